"""Command-line choices: protocol type, field and Merkle hash."""

from __future__ import annotations

from enum import Enum


class WhirType(Enum):
    """Whether the protocol runs as a low-degree test or as a commitment scheme."""

    LDT = "LDT"
    PCS = "PCS"

    @classmethod
    def parse(cls, text: str) -> "WhirType":
        """Parse the command-line spelling of a protocol type."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid field: {text}") from None


class AvailableFields(Enum):
    """Fields that the prover and verifier can be run over."""

    GOLDILOCKS1 = "Goldilocks1"  # Goldilocks itself
    GOLDILOCKS2 = "Goldilocks2"  # quadratic extension of Goldilocks
    GOLDILOCKS3 = "Goldilocks3"  # cubic extension of Goldilocks
    FIELD128 = "Field128"
    FIELD192 = "Field192"
    FIELD256 = "Field256"

    @classmethod
    def parse(cls, text: str) -> "AvailableFields":
        """Parse the command-line spelling of a field."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid field: {text}") from None


class AvailableMerkle(Enum):
    """Hash functions available for the Merkle tree."""

    KECCAK256 = "Keccak"
    BLAKE3 = "Blake3"

    @classmethod
    def parse(cls, text: str) -> "AvailableMerkle":
        """Parse the command-line spelling of a hash function."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid hash: {text}") from None