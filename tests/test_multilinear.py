import random

import pytest

from whirkit.fields import Field64, Field64_2
from whirkit.poly.hypercube import BinaryHypercubePoint, binary_hypercube
from whirkit.poly.multilinear import (
    MultilinearPoint,
    eq_poly,
    eq_poly3,
    eq_poly_outside,
)

F = Field64


def test_equality():
    point = MultilinearPoint([F(0), F(0)])
    assert eq_poly(point, BinaryHypercubePoint(0b00)) == F(1)
    assert eq_poly(point, BinaryHypercubePoint(0b01)) == F(0)
    assert eq_poly(point, BinaryHypercubePoint(0b10)) == F(0)
    assert eq_poly(point, BinaryHypercubePoint(0b11)) == F(0)

    point = MultilinearPoint([F(1), F(0)])
    assert eq_poly(point, BinaryHypercubePoint(0b00)) == F(0)
    assert eq_poly(point, BinaryHypercubePoint(0b01)) == F(0)
    assert eq_poly(point, BinaryHypercubePoint(0b10)) == F(1)
    assert eq_poly(point, BinaryHypercubePoint(0b11)) == F(0)


def test_equality_sums_to_one_over_hypercube():
    point = MultilinearPoint([F(42), F(36)])
    total = sum((eq_poly(point, b) for b in binary_hypercube(2)), F(0))
    assert total == F(1)


def test_eq_poly_outside_agrees_on_binary_points():
    coords = MultilinearPoint([F(42), F(36), F(7)])
    for b in binary_hypercube(3):
        binary = MultilinearPoint.from_binary_hypercube_point(b, 3)
        assert eq_poly_outside(coords, binary) == eq_poly(coords, b)


def test_eq_poly_outside_length_mismatch():
    with pytest.raises(ValueError):
        eq_poly_outside(MultilinearPoint([F(1)]), MultilinearPoint([F(1), F(2)]))


@pytest.mark.parametrize(
    "coords, hit",
    [
        ([0, 0], 0),
        ([1, 0], 3),
        ([0, 2], 2),
        ([2, 2], 8),
    ],
)
def test_equality3(coords, hit):
    point = MultilinearPoint([F(c) for c in coords])
    for p in range(9):
        expected = F(1) if p == hit else F(0)
        assert eq_poly3(point, p) == expected


def test_equality3_out_of_range():
    with pytest.raises(ValueError):
        eq_poly3(MultilinearPoint([F(0), F(0)]), 9)


def test_equality_2():
    coords = MultilinearPoint([F(0), F(0)])
    with pytest.raises(ValueError):
        eq_poly(coords, BinaryHypercubePoint(0b100))


def test_expand_from_univariate():
    num_variables = 4
    point0 = MultilinearPoint.expand_from_univariate(F(0), num_variables)
    point1 = MultilinearPoint.expand_from_univariate(F(1), num_variables)
    point2 = MultilinearPoint.expand_from_univariate(F(2), num_variables)

    assert point0.num_variables() == num_variables
    assert point1.num_variables() == num_variables
    assert point2.num_variables() == num_variables

    assert (
        MultilinearPoint.from_binary_hypercube_point(BinaryHypercubePoint(0), num_variables)
        == point0
    )
    assert (
        MultilinearPoint.from_binary_hypercube_point(
            BinaryHypercubePoint((1 << num_variables) - 1), num_variables
        )
        == point1
    )
    assert MultilinearPoint([F(256), F(16), F(4), F(2)]) == point2


def test_from_hypercube_and_back():
    hypercube_point = BinaryHypercubePoint(24)
    assert (
        MultilinearPoint.from_binary_hypercube_point(hypercube_point, 5).to_hypercube()
        == hypercube_point
    )


def test_to_hypercube_of_non_binary_point():
    assert MultilinearPoint([F(0), F(5)]).to_hypercube() is None


def test_rand_is_deterministic_per_seed():
    first = MultilinearPoint.rand(random.Random(7), F, 5)
    second = MultilinearPoint.rand(random.Random(7), F, 5)
    assert first == second
    assert first.num_variables() == 5
    assert all(isinstance(c, F) for c in first)


def test_rand_extension_field():
    point = MultilinearPoint.rand(random.Random(3), Field64_2, 3)
    assert len(point) == 3
    assert all(isinstance(c, Field64_2) for c in point)