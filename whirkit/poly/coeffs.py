"""Multilinear polynomials stored by their coefficients.

coeffs[j] is the coefficient of the monomial whose variables are the set
bits of j, read big-endian over the num_variables lowest bits: with three
variables X_0, X_1, X_2, coeffs[1] belongs to X_2, coeffs[2] to X_1 and
coeffs[4] to X_0.
"""

from __future__ import annotations

from typing import Any, Sequence

from whirkit.ntt.utils import is_power_of_two
from whirkit.ntt.wavelet import wavelet_transform
from whirkit.poly.evals import EvaluationsList
from whirkit.poly.hypercube import BinaryHypercubePoint
from whirkit.poly.multilinear import MultilinearPoint


def _eval_multivariate(coeffs: Sequence[Any], point: Sequence[Any]) -> Any:
    """Evaluate a coefficient list at `point`, folding the last variable first."""
    values = list(coeffs)
    for x in reversed(point):
        values = [low + high * x for low, high in zip(values[0::2], values[1::2])]
    return values[0]


class CoefficientList:
    """A multilinear polynomial in coefficient form."""

    __slots__ = ("_coeffs", "_num_variables")

    def __init__(self, coeffs: Sequence[Any]) -> None:
        values = list(coeffs)
        if not is_power_of_two(len(values)):
            raise ValueError(
                f"number of coefficients {len(values)} is not a power of two"
            )
        self._coeffs = values
        self._num_variables = len(values).bit_length() - 1

    def coeffs(self) -> list:
        """The coefficients, in the order described by the module."""
        return self._coeffs

    def num_variables(self) -> int:
        """Number of variables."""
        return self._num_variables

    def num_coeffs(self) -> int:
        """Number of coefficients."""
        return len(self._coeffs)

    def _check_point(self, point: MultilinearPoint) -> None:
        if point.num_variables() != self._num_variables:
            raise ValueError(
                f"point has {point.num_variables()} variables, "
                f"polynomial has {self._num_variables}"
            )

    def evaluate_hypercube(self, point: BinaryHypercubePoint) -> Any:
        """Value at a point of {0,1}^n."""
        if not 0 <= point.value < (1 << self._num_variables):
            raise ValueError(
                f"hypercube point {point.value} does not fit "
                f"{self._num_variables} variables"
            )
        return self.evaluate(
            MultilinearPoint.from_binary_hypercube_point(point, self._num_variables)
        )

    def evaluate(self, point: MultilinearPoint) -> Any:
        """Value at a point of F^n."""
        self._check_point(point)
        return _eval_multivariate(self._coeffs, point.coords)

    def evaluate_at_extension(self, point: MultilinearPoint) -> Any:
        """Value at a point whose coordinates lie in an extension of the base field."""
        self._check_point(point)
        value = _eval_multivariate(self._coeffs, point.coords)
        if point.coords:
            field = type(point.coords[0])
            if hasattr(field, "from_base") and not isinstance(value, field):
                value = field.from_base(value)
        return value

    def evaluate_at_univariate(self, points: Sequence[Any]) -> list:
        """Read the coefficients as a univariate polynomial (ascending powers) and evaluate it at each point."""
        results = []
        for x in points:
            acc = 0
            for c in reversed(self._coeffs):
                acc = acc * x + c
            results.append(acc)
        return results

    def to_extension(self, field: type) -> "CoefficientList":
        """The same polynomial with coefficients embedded in `field`."""
        return CoefficientList([field.from_base(c) for c in self._coeffs])

    def fold(self, folding_randomness: MultilinearPoint) -> "CoefficientList":
        """Partially evaluate the last variables at `folding_randomness`.

        Returns f(X_0, ..., X_{n-k-1}, r_0, ..., r_{k-1}).
        """
        k = folding_randomness.num_variables()
        if k > self._num_variables:
            raise ValueError(
                f"cannot fold {k} variables of a polynomial in {self._num_variables}"
            )
        chunk = 1 << k
        randomness = folding_randomness.coords
        return CoefficientList(
            [
                _eval_multivariate(self._coeffs[start : start + chunk], randomness)
                for start in range(0, len(self._coeffs), chunk)
            ]
        )

    def to_evaluations(self) -> EvaluationsList:
        """The polynomial's values on the boolean hypercube."""
        values = list(self._coeffs)
        wavelet_transform(values)
        return EvaluationsList(values)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __repr__(self) -> str:
        return f"CoefficientList({self._coeffs!r})"