"""Iteration over the monomials of {0,1}^n evaluated at a given point."""

from __future__ import annotations

from typing import Any, Iterator

from whirkit.poly.hypercube import BinaryHypercubePoint
from whirkit.poly.multilinear import MultilinearPoint


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def term_polynomial_iter(
    point: MultilinearPoint,
) -> Iterator[tuple[BinaryHypercubePoint, Any]]:
    """Yield (b, prod of x_i over the bits set in b) for every b in {0,1}^n, in order.

    The value at b is the monomial selected by b evaluated at `point`, so the
    pairs give the weights of a coefficient list's entries at that point.
    """
    coords = list(reversed(point.coords))
    num_variables = len(coords)
    stack: list = [1] * (num_variables + 1)

    yield BinaryHypercubePoint(0), stack[-1]
    for position in range(1, 1 << num_variables):
        changed = _trailing_zeros(position) + 1
        del stack[len(stack) - changed :]
        for bit_index in reversed(range(changed)):
            top = stack[-1]
            stack.append(top * coords[bit_index] if position >> bit_index & 1 else top)
        yield BinaryHypercubePoint(position), stack[-1]