"""Lagrange basis of {0,1}^n at a point, visited in Gray-code order."""

from __future__ import annotations

from functools import reduce
from operator import mul
from typing import Any, Iterator

from whirkit.poly.hypercube import BinaryHypercubePoint
from whirkit.poly.multilinear import MultilinearPoint


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def gray_encode(integer: int) -> int:
    """Reflected binary Gray code of `integer`."""
    return (integer >> 1) ^ integer


def gray_decode(integer: int) -> int:
    """Inverse of gray_encode."""
    result = 0
    while integer:
        result ^= integer
        integer >>= 1
    return result


def lagrange_polynomial_gray(
    point: MultilinearPoint,
) -> Iterator[tuple[BinaryHypercubePoint, Any]]:
    """Yield (x, eq_poly(point, x)) for every x in {0,1}^n in Gray-code order.

    Consecutive points differ in one bit, so each value is the previous one
    times a precomputed ratio. No coordinate of `point` may be 0 or 1.
    """
    coords = list(point.coords)
    if any(z == 0 or z == 1 for z in coords):
        raise ValueError("Gray-code iteration needs coordinates other than 0 and 1")
    negated = [1 - z for z in coords]
    precomputed: list = []
    for z, neg in zip(coords, negated):
        # Ratios for flipping a bit 0 -> 1 and 1 -> 0.
        precomputed.append(z * neg.inverse())
        precomputed.append(neg * z.inverse())
    start = reduce(mul, negated, 1)
    return _gray_iter(len(coords), precomputed, start)


def _gray_iter(
    num_variables: int, precomputed: list, value: Any
) -> Iterator[tuple[BinaryHypercubePoint, Any]]:
    total = 1 << num_variables
    gray = gray_encode(0)
    for position in range(total):
        yield BinaryHypercubePoint(gray), value
        following = gray_encode(position + 1)
        if position + 1 < total:
            diff = gray ^ following
            i = (num_variables - 1) - _trailing_zeros(diff)
            flip = 1 if diff & following == 0 else 0
            value = value * precomputed[2 * i + flip]
        gray = following