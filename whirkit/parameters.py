"""Protocol parameters and their textual forms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


def default_max_pow(num_variables: int, log_inv_rate: int) -> int:
    """Default number of proof-of-work bits for the given size and rate."""
    bits = num_variables + log_inv_rate - 3
    if bits < 0:
        raise ValueError(
            "num_variables + log_inv_rate must be at least 3 to derive PoW bits"
        )
    return bits


class SoundnessType(Enum):
    """Soundness assumption used when choosing parameters."""

    UNIQUE_DECODING = "UniqueDecoding"
    PROVABLE_LIST = "ProvableList"
    CONJECTURE_LIST = "ConjectureList"

    @classmethod
    def parse(cls, text: str) -> "SoundnessType":
        """Parse a soundness type from its name."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid soundness specification: {text}") from None

    def __str__(self) -> str:
        return self.value


class FoldType(Enum):
    """How the prover prepares evaluations for folding."""

    NAIVE = "Naive"
    PROVER_HELPS = "ProverHelps"

    @classmethod
    def parse(cls, text: str) -> "FoldType":
        """Parse a fold type from its name."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid fold type specification: {text}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MultivariateParameters:
    """Size of the multilinear polynomial being committed to."""

    num_variables: int

    def __str__(self) -> str:
        return f"Number of variables: {self.num_variables}"


@dataclass
class WhirParameters:
    """User-facing settings of a protocol run."""

    initial_statement: bool
    starting_log_inv_rate: int
    folding_factor: int
    soundness_type: SoundnessType
    security_level: int
    pow_bits: int
    fold_optimisation: FoldType
    leaf_hash_params: Any = None
    two_to_one_params: Any = None

    def __str__(self) -> str:
        return (
            f"Targeting {self.security_level}-bits of security with "
            f"{self.pow_bits}-bits of PoW - soundness: {self.soundness_type}\n"
            f"Starting rate: 2^-{self.starting_log_inv_rate}, "
            f"folding_factor: {self.folding_factor}, "
            f"fold_opt_type: {self.fold_optimisation}\n"
        )