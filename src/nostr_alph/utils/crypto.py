"""Cryptographic helpers — hashing."""

from __future__ import annotations

import enum
import hashlib
from collections.abc import Callable


class HashFunction(enum.StrEnum):
    """Hash identities a protocol version may name."""

    BLAKE2B_256 = "blake2b-256"
    SHA256 = "sha256"


def blake2b256(data: bytes) -> bytes:
    """BLAKE2b with a 32-byte digest, unkeyed — Alephium's address hash."""
    return hashlib.blake2b(data, digest_size=32).digest()


def sha256(data: bytes) -> bytes:
    """Single SHA-256 hash (Nostr's event-id domain)."""
    return hashlib.sha256(data).digest()


_HASHES: dict[HashFunction, Callable[[bytes], bytes]] = {
    HashFunction.BLAKE2B_256: blake2b256,
    HashFunction.SHA256: sha256,
}


def hash_function(name: str | HashFunction) -> Callable[[bytes], bytes]:
    """Resolve a hash identity to its 32-byte digest function.

    Raises:
        ValueError: If *name* is not a known hash identity.
    """
    return _HASHES[HashFunction(name)]
