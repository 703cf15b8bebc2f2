import pytest

from whirkit.ntt.utils import (
    as_chunks_exact,
    gcd,
    is_power_of_two,
    lcm,
    sqrt_factor,
    workload_size,
)


def test_gcd():
    assert gcd(4, 6) == 2
    assert gcd(0, 4) == 4
    assert gcd(4, 0) == 4
    assert gcd(1, 1) == 1
    assert gcd(64, 16) == 16
    assert gcd(81, 9) == 9
    assert gcd(0, 0) == 0


def test_lcm():
    assert lcm(5, 6) == 30
    assert lcm(3, 7) == 21
    assert lcm(0, 10) == 0


def test_lcm_zero_zero_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


@pytest.mark.parametrize(
    "i, expected",
    [(0, 1), (1, 1), (2, 2), (3, 2), (4, 4), (5, 4), (6, 8), (7, 8), (8, 16), (9, 16)],
)
def test_sqrt_factor_powers_of_two(i, expected):
    assert sqrt_factor(1 << i) == expected


@pytest.mark.parametrize("n", [3, 6, 9, 12, 18, 48, 72, 1 << 20, 9 << 10])
def test_sqrt_factor_divides(n):
    assert n % sqrt_factor(n) == 0


@pytest.mark.parametrize("n", [0, 5, 27, 10])
def test_sqrt_factor_rejects(n):
    with pytest.raises(ValueError):
        sqrt_factor(n)


def test_as_chunks_exact():
    v = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    assert as_chunks_exact(v, 12) == [[1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]]
    assert as_chunks_exact(v, 6) == [[1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12]]
    assert as_chunks_exact(v, 1) == [[x] for x in v]


def test_as_chunks_exact_rejects():
    with pytest.raises(ValueError):
        as_chunks_exact([1, 2, 3], 2)
    with pytest.raises(ValueError):
        as_chunks_exact([1, 2], 0)


def test_workload_size():
    assert workload_size(1) == 1 << 15
    assert workload_size(8) * 8 == 1 << 15
    with pytest.raises(ValueError):
        workload_size(0)


def test_is_power_of_two():
    assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]