"""Folding of evaluations over cosets of a multiplicative domain."""

from __future__ import annotations

from itertools import accumulate, repeat
from operator import mul
from typing import Any, Sequence

from whirkit.ntt.engine import intt_batch
from whirkit.parameters import FoldType


def compute_fold(
    answers: Sequence[Any],
    folding_randomness: Sequence[Any],
    coset_offset_inv: Any,
    coset_gen_inv: Any,
    two_inv: Any,
    folding_factor: int,
) -> Any:
    """Fold the values of f on the coset offset * <gen> down to one value.

    `answers` holds the 2**folding_factor evaluations of f on the coset,
    in the order offset * gen**i.
    """
    if len(answers) != 1 << folding_factor:
        raise ValueError(
            f"expected {1 << folding_factor} answers, got {len(answers)}"
        )
    if len(folding_randomness) < folding_factor:
        raise ValueError(
            f"need {folding_factor} folding challenges, got {len(folding_randomness)}"
        )
    values = list(answers)
    for rec in range(folding_factor):
        half = len(values) // 2
        r = folding_randomness[len(folding_randomness) - 1 - rec]
        point_invs = accumulate(
            repeat(coset_gen_inv, half - 1), mul, initial=coset_offset_inv
        )
        values = [
            two_inv * ((f0 + f1) + r * (p * (f0 - f1)))
            for f0, f1, p in zip(values[:half], values[half:], point_invs)
        ]
        coset_offset_inv = coset_offset_inv * coset_offset_inv
        coset_gen_inv = coset_gen_inv * coset_gen_inv
    return values[0]


def restructure_evaluations(
    stacked_evaluations: Sequence[Any],
    fold_type: FoldType,
    domain_gen: Any,
    domain_gen_inv: Any,
    folding_factor: int,
) -> list:
    """Prepare stacked evaluations for folding as `fold_type` requires.

    With ProverHelps every block of 2**folding_factor values is turned into
    the coefficients of the polynomial folding interpolates on that coset.
    """
    folding_size = 1 << folding_factor
    values = list(stacked_evaluations)
    if len(values) % folding_size:
        raise ValueError(
            f"length {len(values)} is not a multiple of {folding_size}"
        )
    if fold_type is FoldType.NAIVE or not values:
        return values

    intt_batch(values, folding_size)

    # Block i holds f on w^i * <w^(n/k)>; undo the coset shift and the size.
    field = type(values[0])
    size_inv = field(folding_size).inverse()
    coset_offset_inv = field(1)
    for start in range(0, len(values), folding_size):
        scales = accumulate(
            repeat(coset_offset_inv, folding_size - 1), mul, initial=size_inv
        )
        block = values[start : start + folding_size]
        values[start : start + folding_size] = [v * s for v, s in zip(block, scales)]
        coset_offset_inv = coset_offset_inv * domain_gen_inv
    return values