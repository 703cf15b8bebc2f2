"""Small integer helpers for the transforms."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

_CACHE_SIZE = 1 << 15


def workload_size(item_size: int) -> int:
    """Number of items of `item_size` bytes that fit a single-thread workload."""
    if item_size <= 0:
        raise ValueError("item size must be positive")
    return _CACHE_SIZE // item_size


def as_chunks_exact(values: Sequence[T], chunk_size: int) -> list[list[T]]:
    """Split `values` into chunks of exactly `chunk_size` items."""
    if chunk_size == 0:
        raise ValueError("chunk size must be non-zero")
    if len(values) % chunk_size:
        raise ValueError("slice length must be a multiple of chunk size")
    return [list(values[i : i + chunk_size]) for i in range(0, len(values), chunk_size)]


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def sqrt_factor(n: int) -> int:
    """Largest factor of n not above sqrt(n), for n of the form 2^k * {1, 3, 9}."""
    if n <= 0:
        raise ValueError("n must be positive")
    twos = _trailing_zeros(n)
    odd = n >> twos
    if odd == 1:
        return 1 << (twos // 2)
    if odd in (3, 9):
        return 3 << (twos // 2)
    raise ValueError(f"{n} is not of the form 2^k * {{1, 3, 9}}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple; lcm(0, 0) raises ZeroDivisionError."""
    return a * (b // gcd(a, b))


def is_power_of_two(n: int) -> bool:
    """True when n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0