"""Reverse derivation and verification.

A public key can only be recovered from an unlock script revealed on-chain;
an address alone commits to a one-way hash of that script.
"""

from __future__ import annotations

from dataclasses import dataclass

from nostr_alph.codec.address import derive_address
from nostr_alph.codec.params import SCHNORR_V1, ProtocolParams
from nostr_alph.codec.script import parse_script


@dataclass(frozen=True)
class Verification:
    """Outcome of checking a public key against an address."""

    matches: bool
    derived_address: str


def script_to_pubkey(script: bytes, params: ProtocolParams = SCHNORR_V1) -> bytes:
    """Return the x-only public key embedded in a revealed unlock script.

    Raises:
        MalformedScript: If *script* does not match the template.
    """
    return parse_script(script, params)


def verify_detailed(
    pubkey: bytes, expected_address: str, params: ProtocolParams = SCHNORR_V1
) -> Verification:
    """Re-derive the address for *pubkey* and compare it to *expected_address*.

    Raises:
        InvalidKeyLength: If *pubkey* is not 32 bytes.
    """
    derived = derive_address(pubkey, params).address
    return Verification(matches=derived == expected_address, derived_address=derived)


def verify(pubkey: bytes, expected_address: str, params: ProtocolParams = SCHNORR_V1) -> bool:
    """Check that *pubkey* derives exactly *expected_address*."""
    return verify_detailed(pubkey, expected_address, params).matches
