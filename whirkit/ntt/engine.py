"""Number-theoretic transforms over fields with large two-adicity.

Large transforms are split with the square-root Cooley-Tukey six-step
algorithm; small sizes use hand-unrolled kernels. Engines are cached per
field, and each engine caches a table of roots of unity.
"""

from __future__ import annotations

import operator
import threading
from itertools import accumulate, chain, repeat
from typing import Any, Callable

from whirkit.ntt.transpose import transpose
from whirkit.ntt.utils import is_power_of_two, lcm, sqrt_factor

_ENGINE_CACHE: dict[type, "NttEngine"] = {}
_CACHE_LOCK = threading.Lock()


def _butterfly(v: list, i: int, j: int) -> None:
    v[i], v[j] = v[i] + v[j], v[i] - v[j]


def _swap(v: list, i: int, j: int) -> None:
    v[i], v[j] = v[j], v[i]


def _transpose(values: list, rows: int, cols: int) -> None:
    """Transpose every rows x cols block of `values`, for any dimensions."""
    if is_power_of_two(rows) and is_power_of_two(cols):
        transpose(values, rows, cols)
        return
    size = rows * cols
    for start in range(0, len(values), size):
        block = values[start : start + size]
        values[start : start + size] = list(
            chain.from_iterable(block[c::cols] for c in range(cols))
        )


class NttEngine:
    """Computes NTTs over the field of a primitive root `omega_order` of even order."""

    def __init__(self, order: int, omega_order: Any) -> None:
        if order <= 0 or order % 2:
            raise ValueError("Order must be a multiple of 2.")
        self.field = type(omega_order)
        one = self.field(1)
        zero = self.field(0)
        if omega_order**order != one:
            raise ValueError(f"omega is not a root of unity of order {order}")
        if omega_order ** (order // 2) == one:
            raise ValueError(f"omega is not a primitive root of unity of order {order}")
        self.order = order
        self.omega_order = omega_order
        self._one = one

        # Roots of small order; zero where the subgroup does not exist.
        self.half_omega_3_1_plus_2 = zero
        self.half_omega_3_1_min_2 = zero
        self.omega_4_1 = zero
        self.omega_8_1 = zero
        self.omega_8_3 = zero
        self.omega_16_1 = zero
        self.omega_16_3 = zero
        self.omega_16_9 = zero

        if order % 3 == 0:
            omega_3_1 = self.root(3)
            omega_3_2 = omega_3_1 * omega_3_1
            two_inv = self.field(2).inverse()
            self.half_omega_3_1_min_2 = (omega_3_1 - omega_3_2) * two_inv
            self.half_omega_3_1_plus_2 = (omega_3_1 + omega_3_2) * two_inv
        if order % 4 == 0:
            self.omega_4_1 = self.root(4)
        if order % 8 == 0:
            self.omega_8_1 = self.root(8)
            self.omega_8_3 = self.omega_8_1**3
        if order % 16 == 0:
            self.omega_16_1 = self.root(16)
            self.omega_16_3 = self.omega_16_1**3
            self.omega_16_9 = self.omega_16_1**9

        self._roots: list = []
        self._roots_lock = threading.Lock()
        self._kernels: dict[int, Callable[[list], None]] = {
            2: self._ntt2,
            3: self._ntt3,
            4: self._ntt4,
            8: self._ntt8,
            16: self._ntt16,
        }

    @classmethod
    def from_cache(cls, field: type) -> "NttEngine":
        """Get or create the shared engine for `field`."""
        with _CACHE_LOCK:
            engine = _ENGINE_CACHE.get(field)
            if engine is None:
                engine = cls._from_field(field)
                _ENGINE_CACHE[field] = engine
            return engine

    @classmethod
    def _from_field(cls, field: type) -> "NttEngine":
        adicity = field.TWO_ADICITY
        generator = field.two_adic_root_of_unity()
        if adicity <= 63:
            return cls(1 << adicity, generator)
        for _ in range(adicity - 63):
            generator = generator * generator
        return cls(1 << 63, generator)

    def ntt(self, values: list) -> None:
        """Transform `values` in place."""
        if not values:
            return
        self.ntt_batch(values, len(values))

    def ntt_batch(self, values: list, size: int) -> None:
        """Transform each consecutive block of `size` values in place."""
        if size <= 0 or len(values) % size:
            raise ValueError(
                f"length {len(values)} is not a multiple of the transform size {size}"
            )
        roots = self._roots_table(size)
        self._dispatch(values, roots, size)

    def intt(self, values: list) -> None:
        """Inverse transform in place, without the 1/n scaling."""
        if not values:
            return
        values[1:] = values[:0:-1]
        self.ntt(values)

    def intt_batch(self, values: list, size: int) -> None:
        """Inverse transform of each block of `size` values, without 1/n scaling."""
        if size <= 0 or len(values) % size:
            raise ValueError(
                f"length {len(values)} is not a multiple of the transform size {size}"
            )
        for start in range(0, len(values), size):
            values[start + 1 : start + size] = values[start + size - 1 : start : -1]
        self.ntt_batch(values, size)

    def root(self, order: int) -> Any:
        """Primitive root of unity of the given order."""
        if order <= 0 or self.order % order:
            raise ValueError("Subgroup of requested order does not exist.")
        return self.omega_order ** (self.order // order)

    def _roots_table(self, order: int) -> list:
        with self._roots_lock:
            roots = self._roots
            if not roots or len(roots) % order:
                size = order if not roots else lcm(len(roots), order)
                root = self.root(size)
                roots = list(
                    accumulate(repeat(root, size - 1), operator.mul, initial=self._one)
                )
                self._roots = roots
            return roots

    def _dispatch(self, values: list, roots: list, size: int) -> None:
        if size <= 1:
            return
        kernel = self._kernels.get(size)
        if kernel is None:
            self._recurse(values, roots, size)
            return
        for start in range(0, len(values), size):
            chunk = values[start : start + size]
            kernel(chunk)
            values[start : start + size] = chunk

    def _recurse(self, values: list, roots: list, size: int) -> None:
        n1 = sqrt_factor(size)
        n2 = size // n1
        _transpose(values, n1, n2)
        self._dispatch(values, roots, n1)
        _transpose(values, n2, n1)
        self._apply_twiddles(values, roots, n1, n2)
        self._dispatch(values, roots, n2)
        _transpose(values, n1, n2)

    @staticmethod
    def _apply_twiddles(values: list, roots: list, rows: int, cols: int) -> None:
        n = len(roots)
        block = rows * cols
        step = n // block
        for start in range(0, len(values), block):
            for i in range(1, rows):
                base = start + i * cols
                row_step = i * step
                values[base + 1 : base + cols] = [
                    value * roots[(row_step * j) % n]
                    for j, value in enumerate(values[base + 1 : base + cols], start=1)
                ]

    def _ntt2(self, v: list) -> None:
        _butterfly(v, 0, 1)

    def _ntt3(self, v: list) -> None:
        # Rader's algorithm reduces size 3 to size 2.
        v0 = v[0]
        _butterfly(v, 1, 2)
        v[0] = v[0] + v[1]
        v[1] = v[1] * self.half_omega_3_1_plus_2
        v[2] = v[2] * self.half_omega_3_1_min_2
        v[1] = v[1] + v0
        _butterfly(v, 1, 2)

    def _ntt4_at(self, v: list, a: int, b: int, c: int, d: int) -> None:
        _butterfly(v, a, c)
        _butterfly(v, b, d)
        v[d] = v[d] * self.omega_4_1
        _butterfly(v, a, b)
        _butterfly(v, c, d)
        _swap(v, b, c)

    def _ntt4(self, v: list) -> None:
        self._ntt4_at(v, 0, 1, 2, 3)

    def _ntt8(self, v: list) -> None:
        # Cooley-Tukey with v as a 2x4 matrix.
        for i in range(4):
            _butterfly(v, i, i + 4)
        v[5] = v[5] * self.omega_8_1
        v[6] = v[6] * self.omega_4_1
        v[7] = v[7] * self.omega_8_3
        for base in (0, 4):
            _butterfly(v, base, base + 2)
            _butterfly(v, base + 1, base + 3)
            v[base + 3] = v[base + 3] * self.omega_4_1
            _butterfly(v, base, base + 1)
            _butterfly(v, base + 2, base + 3)
        _swap(v, 1, 4)
        _swap(v, 3, 6)

    def _ntt16(self, v: list) -> None:
        # Cooley-Tukey with v as a 4x4 matrix.
        for i in range(4):
            self._ntt4_at(v, i, i + 4, i + 8, i + 12)
        twiddles = (
            (5, self.omega_16_1),
            (6, self.omega_8_1),
            (7, self.omega_16_3),
            (9, self.omega_8_1),
            (10, self.omega_4_1),
            (11, self.omega_8_3),
            (13, self.omega_16_3),
            (14, self.omega_8_3),
            (15, self.omega_16_9),
        )
        for index, twiddle in twiddles:
            v[index] = v[index] * twiddle
        for i in range(0, 16, 4):
            self._ntt4_at(v, i, i + 1, i + 2, i + 3)
        for a, b in ((1, 4), (2, 8), (3, 12), (6, 9), (7, 13), (11, 14)):
            _swap(v, a, b)


def _engine_for(values: list) -> NttEngine:
    return NttEngine.from_cache(type(values[0]))


def ntt(values: list) -> None:
    """NTT of `values` in place, using the cached engine of their field."""
    if values:
        _engine_for(values).ntt(values)


def ntt_batch(values: list, size: int) -> None:
    """Many NTTs of `size` values each, in place."""
    if values:
        _engine_for(values).ntt_batch(values, size)


def intt(values: list) -> None:
    """Inverse NTT in place, without the 1/n scaling."""
    if values:
        _engine_for(values).intt(values)


def intt_batch(values: list, size: int) -> None:
    """Many inverse NTTs of `size` values each, without the 1/n scaling."""
    if values:
        _engine_for(values).intt_batch(values, size)


def expand_from_coeff(coeffs: list, expansion: int) -> list:
    """Reed-Solomon encode `coeffs` at rate 1/`expansion`.

    Entry m of the result is the polynomial evaluated at root**m, where
    root is a primitive root of unity of order len(coeffs) * expansion.
    """
    if expansion <= 0:
        raise ValueError("expansion must be positive")
    if not coeffs:
        return []
    field = type(coeffs[0])
    engine = NttEngine.from_cache(field)
    expanded_size = len(coeffs) * expansion
    root = engine.root(expanded_size)
    result = list(coeffs)
    for i in range(1, expansion):
        root_i = root**i
        offsets = accumulate(repeat(root_i, len(coeffs) - 1), operator.mul, initial=field(1))
        result.extend(c * offset for c, offset in zip(coeffs, offsets))
    engine.ntt_batch(result, len(coeffs))
    _transpose(result, expansion, len(coeffs))
    return result