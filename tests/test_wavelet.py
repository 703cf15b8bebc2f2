import pytest

from whirkit.fields import Field64
from whirkit.ntt.wavelet import wavelet_transform, wavelet_transform_batch

F = Field64


def test_four_coefficients_to_evaluations():
    coeffs = [F(22), F(5), F(10), F(97)]
    values = list(coeffs)
    wavelet_transform(values)
    assert values[0] == coeffs[0]
    assert values[1] == coeffs[0] + coeffs[1]
    assert values[2] == coeffs[0] + coeffs[2]
    assert values[3] == coeffs[0] + coeffs[1] + coeffs[2] + coeffs[3]


@pytest.mark.parametrize("size", [1, 2, 4, 8, 16, 32, 64])
def test_unit_vector_spreads_to_supersets(size):
    for k in range(size):
        values = [F(0)] * size
        values[k] = F(1)
        wavelet_transform(values)
        assert values == [F(1) if i & k == k else F(0) for i in range(size)]


def test_constant_first_entry_fills_all():
    values = [F(7)] + [F(0)] * 15
    wavelet_transform(values)
    assert values == [F(7)] * 16


def test_linearity():
    a = [F(i + 1) for i in range(32)]
    b = [F(3 * i) for i in range(32)]
    combined = [x + 2 * y for x, y in zip(a, b)]
    for values in (a, b, combined):
        wavelet_transform(values)
    assert combined == [x + 2 * y for x, y in zip(a, b)]


def test_batch_matches_individual_transforms():
    size = 8
    values = [F(i * 13 + 2) for i in range(5 * size)]
    chunks = [values[i : i + size] for i in range(0, len(values), size)]
    wavelet_transform_batch(values, size)
    for chunk in chunks:
        wavelet_transform(chunk)
    assert values == [x for chunk in chunks for x in chunk]


def test_last_entry_is_sum_of_all():
    values = [F(i) for i in range(64)]
    total = sum(values, F(0))
    wavelet_transform(values)
    assert values[-1] == total


def test_batch_rejects_non_power_of_two_size():
    with pytest.raises(ValueError):
        wavelet_transform_batch([F(0)] * 6, 3)


def test_batch_rejects_length_not_multiple():
    with pytest.raises(ValueError):
        wavelet_transform_batch([F(0)] * 6, 4)


def test_whole_transform_rejects_non_power_of_two_length():
    with pytest.raises(ValueError):
        wavelet_transform([F(1)] * 5)