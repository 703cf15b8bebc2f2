import pytest

from whirkit.cmdline import AvailableFields, AvailableMerkle, WhirType


@pytest.mark.parametrize(
    "text, expected",
    [("LDT", WhirType.LDT), ("PCS", WhirType.PCS)],
)
def test_whir_type_parse(text, expected):
    assert WhirType.parse(text) is expected


def test_whir_type_invalid():
    with pytest.raises(ValueError, match="Invalid field: ldt"):
        WhirType.parse("ldt")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Goldilocks1", AvailableFields.GOLDILOCKS1),
        ("Goldilocks2", AvailableFields.GOLDILOCKS2),
        ("Goldilocks3", AvailableFields.GOLDILOCKS3),
        ("Field128", AvailableFields.FIELD128),
        ("Field192", AvailableFields.FIELD192),
        ("Field256", AvailableFields.FIELD256),
    ],
)
def test_fields_parse(text, expected):
    assert AvailableFields.parse(text) is expected


def test_fields_invalid():
    with pytest.raises(ValueError, match="Invalid field: Field64"):
        AvailableFields.parse("Field64")


def test_merkle_parse():
    assert AvailableMerkle.parse("Keccak") is AvailableMerkle.KECCAK256
    assert AvailableMerkle.parse("Blake3") is AvailableMerkle.BLAKE3


def test_merkle_full_name_is_rejected():
    with pytest.raises(ValueError, match="Invalid hash: Keccak256"):
        AvailableMerkle.parse("Keccak256")