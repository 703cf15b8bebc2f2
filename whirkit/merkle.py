"""Hash counting and trivial hashers for Merkle trees."""

from __future__ import annotations

import threading
from typing import Any, ClassVar, TypeVar

T = TypeVar("T")


class HashCounter:
    """Process-wide count of hash evaluations."""

    _count: ClassVar[int] = 0
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def add(cls) -> int:
        """Count one hash; returns the count before it."""
        with HashCounter._lock:
            previous = HashCounter._count
            HashCounter._count = previous + 1
            return previous

    @classmethod
    def reset(cls) -> None:
        """Set the count back to zero."""
        with HashCounter._lock:
            HashCounter._count = 0

    @classmethod
    def get(cls) -> int:
        """Current count."""
        with HashCounter._lock:
            return HashCounter._count


class LeafIdentityHasher:
    """Leaf "hash" that is the leaf's canonical encoding."""

    def evaluate(self, value: Any) -> bytes:
        """Canonical bytes of a single field element."""
        return value.to_bytes()


class IdentityDigestConverter:
    """Uses a leaf digest unchanged as the input of the next layer."""

    @staticmethod
    def convert(item: T) -> T:
        """Return `item` itself."""
        return item


class MockTwoToOneHash:
    """Two-to-one hash that always yields 32 zero bytes."""

    def evaluate(self, left: Any, right: Any) -> bytes:
        """32 zero bytes, whatever the inputs."""
        return bytes(32)

    def compress(self, left: Any, right: Any) -> bytes:
        """32 zero bytes, whatever the inputs."""
        return bytes(32)


def default_mock_config() -> tuple[None, None]:
    """Parameters of the leaf and two-to-one hashers of the mock tree (none)."""
    return None, None