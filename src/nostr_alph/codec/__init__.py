"""Codec — Nostr public key ⇄ Alephium Schnorr P2SH address derivation."""

from __future__ import annotations

from nostr_alph.codec.address import (
    DerivedAddress,
    address_hash_of,
    derive_address,
    validate_address,
)
from nostr_alph.codec.base58 import base58_decode, base58_encode
from nostr_alph.codec.engine import AddressCodec
from nostr_alph.codec.group import group_of, group_of_address
from nostr_alph.codec.params import SCHNORR_V1, ProtocolParams
from nostr_alph.codec.reverse import Verification, script_to_pubkey, verify, verify_detailed
from nostr_alph.codec.script import build_script, is_schnorr_script, parse_script

__all__ = [
    "SCHNORR_V1",
    "AddressCodec",
    "DerivedAddress",
    "ProtocolParams",
    "Verification",
    "address_hash_of",
    "base58_decode",
    "base58_encode",
    "build_script",
    "derive_address",
    "group_of",
    "group_of_address",
    "is_schnorr_script",
    "parse_script",
    "script_to_pubkey",
    "validate_address",
    "verify",
    "verify_detailed",
]
