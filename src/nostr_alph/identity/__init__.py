"""Identity — Nostr key encodings in front of the codec."""

from __future__ import annotations

from nostr_alph.identity.nip19 import (
    is_on_curve,
    normalize_pubkey,
    npub_to_address,
    npub_to_pubkey,
    pubkey_to_npub,
    script_to_npub,
)

__all__ = [
    "is_on_curve",
    "normalize_pubkey",
    "npub_to_address",
    "npub_to_pubkey",
    "pubkey_to_npub",
    "script_to_npub",
]
