"""Prime fields and the Goldilocks extension fields."""

from __future__ import annotations

import operator
from functools import total_ordering
from typing import ClassVar, Iterable


def _two_adicity(n: int) -> int:
    return (n & -n).bit_length() - 1


def _root_of_unity(two_adic_root, two_adicity: int, order: int):
    if order < 1 or order & (order - 1):
        raise ValueError(f"no root of unity of order {order}: not a power of two")
    log_order = order.bit_length() - 1
    if log_order > two_adicity:
        raise ValueError(f"no root of unity of order {order} in this field")
    omega = two_adic_root
    for _ in range(log_order, two_adicity):
        omega = omega * omega
    return omega


@total_ordering
class PrimeFieldElement:
    """An element of a prime field; subclasses fix the modulus and generator."""

    MODULUS: ClassVar[int]
    GENERATOR: ClassVar[int]
    TWO_ADICITY: ClassVar[int]
    BYTE_SIZE: ClassVar[int]
    DEGREE: ClassVar[int] = 1
    BASE: ClassVar[type]

    __slots__ = ("value",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "MODULUS" in cls.__dict__:
            cls.TWO_ADICITY = _two_adicity(cls.MODULUS - 1)
            cls.BYTE_SIZE = (cls.MODULUS.bit_length() + 7) // 8
            cls.BASE = cls

    def __init__(self, value=0):
        if isinstance(value, PrimeFieldElement):
            if type(value) is not type(self):
                raise TypeError(
                    f"cannot convert {type(value).__name__} to {type(self).__name__}"
                )
            value = value.value
        elif isinstance(value, ExtensionFieldElement):
            raise TypeError("cannot convert an extension element to a prime field")
        self.value = operator.index(value) % self.MODULUS

    def _coerce(self, other):
        if type(other) is type(self):
            return other.value
        if isinstance(other, int):
            return other % self.MODULUS
        return None

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self.value + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self.value - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(v - self.value)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * type(self)(v).inverse()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(v) * self.inverse()

    def __neg__(self):
        return type(self)(-self.value)

    def __pow__(self, exponent):
        exponent = operator.index(exponent)
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return type(self)(pow(self.value, exponent, self.MODULUS))

    def __eq__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self.value == v

    def __lt__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self.value < v

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"

    def __str__(self):
        return str(self.value)

    def inverse(self):
        """Multiplicative inverse; zero has none."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return type(self)(pow(self.value, -1, self.MODULUS))

    @classmethod
    def field_size_in_bits(cls) -> int:
        """Bit size of the modulus times the extension degree."""
        return cls.MODULUS.bit_length() * cls.DEGREE

    @classmethod
    def two_adic_root_of_unity(cls):
        """Primitive root of unity of order 2**TWO_ADICITY."""
        return cls(pow(cls.GENERATOR, (cls.MODULUS - 1) >> cls.TWO_ADICITY, cls.MODULUS))

    @classmethod
    def root_of_unity(cls, order: int):
        """Primitive root of unity of a power-of-two order."""
        return _root_of_unity(cls.two_adic_root_of_unity(), cls.TWO_ADICITY, order)

    @classmethod
    def from_base(cls, value):
        """Embed a base prime field element (here the field itself)."""
        return cls(value)

    @classmethod
    def from_be_bytes_mod_order(cls, data: bytes):
        """Interpret big-endian bytes as an integer reduced modulo the prime."""
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:
        """Canonical little-endian encoding."""
        return self.value.to_bytes(self.BYTE_SIZE, "little")


class Field256(PrimeFieldElement):
    """BN254 scalar field."""

    __slots__ = ()
    MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
    GENERATOR = 5


class Field192(PrimeFieldElement):
    """192-bit prime field."""

    __slots__ = ()
    MODULUS = 3801539170989320091464968600173246866371124347557388484609
    GENERATOR = 3


class Field128(PrimeFieldElement):
    """128-bit prime field."""

    __slots__ = ()
    MODULUS = 340282366920938463463374557953744961537
    GENERATOR = 3


class Field64(PrimeFieldElement):
    """The Goldilocks field."""

    __slots__ = ()
    MODULUS = 18446744069414584321
    GENERATOR = 7


@total_ordering
class ExtensionFieldElement:
    """Element of BASE[x] / (x**DEGREE - NONRESIDUE), stored as coefficients."""

    BASE: ClassVar[type[PrimeFieldElement]]
    DEGREE: ClassVar[int]
    NONRESIDUE: ClassVar[int]
    TWO_ADICITY: ClassVar[int]

    __slots__ = ("coeffs",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "BASE" in cls.__dict__:
            cls.TWO_ADICITY = cls.BASE.TWO_ADICITY

    def __init__(self, *coeffs):
        if len(coeffs) == 1 and type(coeffs[0]) is type(self):
            self.coeffs = coeffs[0].coeffs
            return
        if len(coeffs) > self.DEGREE:
            raise ValueError(
                f"{type(self).__name__} takes at most {self.DEGREE} coefficients"
            )
        values = [self._base_int(c) for c in coeffs]
        values.extend([0] * (self.DEGREE - len(values)))
        self.coeffs = tuple(values)

    @classmethod
    def _base_int(cls, value) -> int:
        if isinstance(value, cls.BASE):
            return value.value
        if isinstance(value, (PrimeFieldElement, ExtensionFieldElement)):
            raise TypeError(f"cannot use {type(value).__name__} as a coefficient")
        return operator.index(value) % cls.BASE.MODULUS

    @classmethod
    def _from_coeffs(cls, coeffs):
        element = cls.__new__(cls)
        element.coeffs = tuple(coeffs)
        return element

    def _coerce(self, other):
        if type(other) is type(self):
            return other.coeffs
        if isinstance(other, self.BASE) or (
            isinstance(other, int) and not isinstance(other, PrimeFieldElement)
        ):
            return (self._base_int(other),) + (0,) * (self.DEGREE - 1)
        return None

    @classmethod
    def _mul_coeffs(cls, a, b):
        p = cls.BASE.MODULUS
        d = cls.DEGREE
        product = [0] * (2 * d - 1)
        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b):
                    product[i + j] += x * y
        for k in range(2 * d - 2, d - 1, -1):
            product[k - d] += cls.NONRESIDUE * product[k]
        return tuple(v % p for v in product[:d])

    @classmethod
    def _invert_coeffs(cls, coeffs):
        p = cls.BASE.MODULUS
        result = (1,) + (0,) * (cls.DEGREE - 1)
        base = coeffs
        exponent = p**cls.DEGREE - 2
        while exponent:
            if exponent & 1:
                result = cls._mul_coeffs(result, base)
            base = cls._mul_coeffs(base, base)
            exponent >>= 1
        return result

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        p = self.BASE.MODULUS
        return self._from_coeffs((a + b) % p for a, b in zip(self.coeffs, v))

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        p = self.BASE.MODULUS
        return self._from_coeffs((a - b) % p for a, b in zip(self.coeffs, v))

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        p = self.BASE.MODULUS
        return self._from_coeffs((b - a) % p for a, b in zip(self.coeffs, v))

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._from_coeffs(self._mul_coeffs(self.coeffs, v))

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * self._from_coeffs(v).inverse()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._from_coeffs(v) * self.inverse()

    def __neg__(self):
        p = self.BASE.MODULUS
        return self._from_coeffs((-a) % p for a in self.coeffs)

    def __pow__(self, exponent):
        exponent = operator.index(exponent)
        if exponent < 0:
            return self.inverse() ** (-exponent)
        result = (1,) + (0,) * (self.DEGREE - 1)
        base = self.coeffs
        while exponent:
            if exponent & 1:
                result = self._mul_coeffs(result, base)
            base = self._mul_coeffs(base, base)
            exponent >>= 1
        return self._from_coeffs(result)

    def __eq__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self.coeffs == v

    def __lt__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        # Highest coefficient is compared first.
        return self.coeffs[::-1] < tuple(v)[::-1]

    def __hash__(self):
        if not any(self.coeffs[1:]):
            return hash(self.coeffs[0])
        return hash(self.coeffs)

    def __bool__(self):
        return any(self.coeffs)

    def __repr__(self):
        return f"{type(self).__name__}{self.coeffs}"

    def inverse(self):
        """Multiplicative inverse; zero has none."""
        if not any(self.coeffs):
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return self._from_coeffs(self._invert_coeffs(self.coeffs))

    @classmethod
    def field_size_in_bits(cls) -> int:
        """Bit size of the base modulus times the extension degree."""
        return cls.BASE.field_size_in_bits() * cls.DEGREE

    @classmethod
    def two_adic_root_of_unity(cls):
        """The base field's two-adic root of unity, embedded."""
        return cls.from_base(cls.BASE.two_adic_root_of_unity())

    @classmethod
    def root_of_unity(cls, order: int):
        """Primitive root of unity of a power-of-two order."""
        return _root_of_unity(cls.two_adic_root_of_unity(), cls.TWO_ADICITY, order)

    @classmethod
    def from_base(cls, value):
        """Embed a base prime field element."""
        return cls(value)

    def to_bytes(self) -> bytes:
        """Canonical encoding: the coefficients' encodings in order."""
        size = self.BASE.BYTE_SIZE
        return b"".join(c.to_bytes(size, "little") for c in self.coeffs)


class Field64_2(ExtensionFieldElement):
    """Quadratic extension of Goldilocks by the square root of 7."""

    __slots__ = ()
    BASE = Field64
    DEGREE = 2
    NONRESIDUE = 7

    @classmethod
    def _invert_coeffs(cls, coeffs):
        p = cls.BASE.MODULUS
        a, b = coeffs
        norm_inv = pow((a * a - cls.NONRESIDUE * b * b) % p, -1, p)
        return (a * norm_inv % p, -b * norm_inv % p)


class Field64_3(ExtensionFieldElement):
    """Cubic extension of Goldilocks by the cube root of 2."""

    __slots__ = ()
    BASE = Field64
    DEGREE = 3
    NONRESIDUE = 2

    @classmethod
    def _invert_coeffs(cls, coeffs):
        p = cls.BASE.MODULUS
        nr = cls.NONRESIDUE
        c0, c1, c2 = coeffs
        t0 = (c0 * c0 - nr * c1 * c2) % p
        t1 = (nr * c2 * c2 - c0 * c1) % p
        t2 = (c1 * c1 - c0 * c2) % p
        t3 = (c0 * t0 + nr * (c2 * t1 + c1 * t2)) % p
        inv = pow(t3, -1, p)
        return (t0 * inv % p, t1 * inv % p, t2 * inv % p)


def serialize_elements(elements: Iterable) -> bytes:
    """Encode a sequence of elements: a little-endian u64 count, then each element."""
    items = list(elements)
    return len(items).to_bytes(8, "little") + b"".join(e.to_bytes() for e in items)