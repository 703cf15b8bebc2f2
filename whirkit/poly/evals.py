"""Multilinear polynomials stored by their values on the boolean hypercube."""

from __future__ import annotations

from typing import Any, Sequence

from whirkit.ntt.utils import is_power_of_two
from whirkit.poly.lagrange import lagrange_polynomial_iter
from whirkit.poly.multilinear import MultilinearPoint


class EvaluationsList:
    """A multilinear f in n variables, given by f on {0,1}^n in lexicographic order."""

    __slots__ = ("_evals", "_num_variables")

    def __init__(self, evals: Sequence[Any]) -> None:
        values = list(evals)
        if not is_power_of_two(len(values)):
            raise ValueError(
                f"number of evaluations {len(values)} is not a power of two"
            )
        self._evals = values
        self._num_variables = len(values).bit_length() - 1

    def _check_point(self, point: MultilinearPoint) -> None:
        if point.num_variables() != self._num_variables:
            raise ValueError(
                f"point has {point.num_variables()} variables, "
                f"polynomial has {self._num_variables}"
            )

    def evaluate(self, point: MultilinearPoint) -> Any:
        """Value of the polynomial at `point`, summed over the Lagrange basis."""
        self._check_point(point)
        binary = point.to_hypercube()
        if binary is not None:
            return self._evals[binary.value]
        total = None
        for b, lag in lagrange_polynomial_iter(point):
            term = lag * self._evals[b.value]
            total = term if total is None else total + term
        return total

    def eval_extension(self, point: MultilinearPoint) -> Any:
        """Value of the polynomial at `point`, by folding one variable at a time."""
        self._check_point(point)
        binary = point.to_hypercube()
        if binary is not None:
            return self._evals[binary.value]
        values = self._evals
        # The last variable selects between adjacent entries.
        for x in reversed(point.coords):
            one_minus_x = 1 - x
            values = [
                low * one_minus_x + high * x
                for low, high in zip(values[0::2], values[1::2])
            ]
        return values[0]

    def evals(self) -> list:
        """The evaluations, in lexicographic order of the hypercube points."""
        return self._evals

    def num_evals(self) -> int:
        """Number of stored evaluations."""
        return len(self._evals)

    def num_variables(self) -> int:
        """Number of variables of the polynomial."""
        return self._num_variables

    def __getitem__(self, index: int) -> Any:
        return self._evals[index]

    def __len__(self) -> int:
        return len(self._evals)

    def __repr__(self) -> str:
        return f"EvaluationsList({self._evals!r})"