"""Fast wavelet transform: the recursive kernel [[1, 0], [1, 1]].

Applied to the coefficients of a multilinear polynomial it produces the
polynomial's evaluations on the boolean hypercube.
"""

from __future__ import annotations

from whirkit.ntt.utils import is_power_of_two


def wavelet_transform(values: list) -> None:
    """Transform `values` in place; its length must be a power of two."""
    if not values:
        return
    wavelet_transform_batch(values, len(values))


def wavelet_transform_batch(values: list, size: int) -> None:
    """Transform each consecutive block of `size` values in place."""
    if not is_power_of_two(size):
        raise ValueError(f"transform size {size} is not a power of two")
    if len(values) % size:
        raise ValueError(
            f"length {len(values)} is not a multiple of the transform size {size}"
        )
    half = 1
    while half < size:
        for start in range(0, len(values), 2 * half):
            low = values[start : start + half]
            high = values[start + half : start + 2 * half]
            values[start + half : start + 2 * half] = [h + l for h, l in zip(high, low)]
        half *= 2