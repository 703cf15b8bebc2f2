"""Points of the boolean hypercube {0,1}^n, encoded as integers.

A point's coordinates are the n least significant bits of its value, most
significant first; n itself is not stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, order=True)
class BinaryHypercubePoint:
    """A point of {0,1}^n given by the bits of `value`."""

    value: int


def binary_hypercube(num_variables: int) -> Iterator[BinaryHypercubePoint]:
    """Yield every point of {0,1}^num_variables in increasing order."""
    if num_variables < 0:
        raise ValueError("number of variables must not be negative")
    for value in range(1 << num_variables):
        yield BinaryHypercubePoint(value)