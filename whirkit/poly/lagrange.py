"""Iteration over the Lagrange basis of {0,1}^n at a given point."""

from __future__ import annotations

from typing import Any, Iterator

from whirkit.poly.hypercube import BinaryHypercubePoint
from whirkit.poly.multilinear import MultilinearPoint


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def lagrange_polynomial_iter(
    point: MultilinearPoint,
) -> Iterator[tuple[BinaryHypercubePoint, Any]]:
    """Yield (x, eq_poly(point, x)) for every x in {0,1}^n, in increasing order.

    A stack of prefix products is kept so that each step only recomputes
    the factors for the bits that changed.
    """
    coords = list(point.coords)
    num_variables = len(coords)
    negated = [1 - x for x in coords]

    stack: list = [1]
    for neg in negated:
        stack.append(stack[-1] * neg)

    # Reversed so that index i corresponds to bit i of the position.
    coords.reverse()
    negated.reverse()

    yield BinaryHypercubePoint(0), stack[-1]
    for position in range(1, 1 << num_variables):
        changed = _trailing_zeros(position) + 1
        del stack[len(stack) - changed :]
        for bit_index in reversed(range(changed)):
            factor = coords[bit_index] if position >> bit_index & 1 else negated[bit_index]
            stack.append(stack[-1] * factor)
        yield BinaryHypercubePoint(position), stack[-1]