"""Points of F^n and the equality polynomials over {0,1}^n and {0,1,2}^n."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import reduce
from operator import mul
from typing import Any, Iterator, Optional

from whirkit.poly.hypercube import BinaryHypercubePoint


@dataclass(frozen=True)
class MultilinearPoint:
    """A point (x_1, ..., x_n) of F^n; the x_i are often 0 or 1.

    Binary points built from a hypercube point hold the integers 0 and 1,
    which combine with elements of any field.
    """

    coords: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coords)

    def __getitem__(self, index):
        return self.coords[index]

    def num_variables(self) -> int:
        """Number of coordinates."""
        return len(self.coords)

    @classmethod
    def from_binary_hypercube_point(
        cls, point: BinaryHypercubePoint, num_variables: int
    ) -> "MultilinearPoint":
        """The point whose coordinates are the low `num_variables` bits of `point`, most significant first."""
        if num_variables < 0:
            raise ValueError("number of variables must not be negative")
        value = point.value
        return cls(
            (value >> (num_variables - 1 - i)) & 1 for i in range(num_variables)
        )

    def to_hypercube(self) -> Optional[BinaryHypercubePoint]:
        """The matching hypercube point, or None if some coordinate is not 0 or 1."""
        counter = 0
        for coord in self.coords:
            if coord == 0:
                counter <<= 1
            elif coord == 1:
                counter = (counter << 1) + 1
            else:
                return None
        return BinaryHypercubePoint(counter)

    @classmethod
    def expand_from_univariate(cls, point: Any, num_variables: int) -> "MultilinearPoint":
        """Map y to (y^(2^(n-1)), ..., y^4, y^2, y).

        A multilinear f evaluated at this point equals the univariate
        polynomial with the same coefficient list evaluated at y.
        """
        powers = []
        current = point
        for _ in range(num_variables):
            powers.append(current)
            current = current * current
        powers.reverse()
        return cls(powers)

    @classmethod
    def rand(
        cls, rng: random.Random, field: type, num_variables: int
    ) -> "MultilinearPoint":
        """A uniformly random point of field^num_variables drawn from `rng`."""
        modulus = field.BASE.MODULUS
        return cls(
            field(*(rng.randrange(modulus) for _ in range(field.DEGREE)))
            for _ in range(num_variables)
        )


def eq_poly(coords: MultilinearPoint, point: BinaryHypercubePoint) -> Any:
    """eq(coords, point) = prod_i c_i p_i + (1 - c_i)(1 - p_i) for binary `point`."""
    n_variables = coords.num_variables()
    value = point.value
    if not 0 <= value < (1 << n_variables):
        raise ValueError(
            f"hypercube point {value} does not fit {n_variables} variables"
        )
    factors = []
    for coord in reversed(coords.coords):
        factors.append(coord if value & 1 else 1 - coord)
        value >>= 1
    return reduce(mul, factors, 1)


def eq_poly_outside(coords: MultilinearPoint, point: MultilinearPoint) -> Any:
    """eq(coords, point) for a `point` that need not be binary."""
    if coords.num_variables() != point.num_variables():
        raise ValueError(
            f"points have {coords.num_variables()} and {point.num_variables()} variables"
        )
    return reduce(
        mul,
        (l * r + (1 - l) * (1 - r) for l, r in zip(coords.coords, point.coords)),
        1,
    )


def eq_poly3(coords: MultilinearPoint, point: int) -> Any:
    """Equality polynomial over {0,1,2}^n.

    `point` is read as a big-endian ternary number; the result is 1 when
    coords equals that point of {0,1,2}^n and 0 on every other such point.
    """
    n_variables = coords.num_variables()
    if not 0 <= point < 3**n_variables:
        raise ValueError(f"ternary point {point} does not fit {n_variables} variables")
    factors = []
    for val in reversed(coords.coords):
        trit = point % 3
        if trit == 0:
            factors.append((val - 1) * (val - 2) / 2)
        elif trit == 1:
            factors.append(-(val * (val - 2)))
        else:
            factors.append(val * (val - 1) / 2)
        point //= 3
    return reduce(mul, factors, 1)