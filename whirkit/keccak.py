"""Keccak-256 hashing for Merkle trees over field elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from Crypto.Hash import keccak

from whirkit.fields import serialize_elements
from whirkit.merkle import HashCounter

DIGEST_SIZE = 32


def _keccak256(*parts: bytes) -> bytes:
    h = keccak.new(digest_bits=256)
    for part in parts:
        h.update(part)
    return h.digest()


@dataclass(frozen=True)
class KeccakDigest:
    """A 32-byte Keccak-256 digest."""

    data: bytes = bytes(DIGEST_SIZE)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != DIGEST_SIZE:
            raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    def __bytes__(self) -> bytes:
        return self.data

    def to_sponge_bytes(self) -> bytes:
        """Bytes absorbed into a sponge: the digest itself."""
        return self.data

    def to_sponge_field_elements(self, field: type) -> list:
        """The digest read big-endian and reduced into `field`, as one element."""
        return [field.from_be_bytes_mod_order(self.data)]


class KeccakLeafHash:
    """Hashes a leaf, a sequence of field elements, by its canonical encoding."""

    def evaluate(self, leaf: Iterable) -> KeccakDigest:
        """Keccak-256 of the leaf's serialization."""
        digest = KeccakDigest(_keccak256(serialize_elements(leaf)))
        HashCounter.add()
        return digest


class KeccakTwoToOneHash:
    """Hashes two digests into one."""

    def evaluate(self, left: KeccakDigest, right: KeccakDigest) -> KeccakDigest:
        """Keccak-256 of the left digest followed by the right one."""
        digest = KeccakDigest(_keccak256(left.data, right.data))
        HashCounter.add()
        return digest

    def compress(self, left: KeccakDigest, right: KeccakDigest) -> KeccakDigest:
        """Same as evaluate."""
        return self.evaluate(left, right)


def default_config() -> tuple[None, None]:
    """Parameters of the leaf and two-to-one hashers (none)."""
    return None, None