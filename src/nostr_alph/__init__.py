"""nostr-alph — derive Alephium Schnorr addresses from Nostr public keys."""

from __future__ import annotations

from nostr_alph.codec import (
    SCHNORR_V1,
    AddressCodec,
    DerivedAddress,
    ProtocolParams,
    derive_address,
    group_of,
    script_to_pubkey,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    "SCHNORR_V1",
    "AddressCodec",
    "DerivedAddress",
    "ProtocolParams",
    "derive_address",
    "group_of",
    "script_to_pubkey",
    "verify",
]
