"""Nostr identity adapter — NIP-19 ``npub`` and hex public keys.

Turns the human-readable forms a user types into the normalized 32-byte
x-only key the codec accepts, and back.
"""

from __future__ import annotations

import logging
import re

from bech32 import bech32_decode, bech32_encode, convertbits
from ecdsa import SECP256k1

from nostr_alph.codec.address import DerivedAddress, derive_address
from nostr_alph.codec.params import PUBKEY_LENGTH, SCHNORR_V1, ProtocolParams
from nostr_alph.codec.reverse import script_to_pubkey
from nostr_alph.codec.script import check_pubkey
from nostr_alph.errors import InvalidIdentity

logger = logging.getLogger(__name__)

NPUB_HRP = "npub"

_HEX_KEY = re.compile(r"^[0-9a-fA-F]{64}$")
_FIELD_P = SECP256k1.curve.p()


def npub_to_pubkey(npub: str) -> bytes:
    """Decode a NIP-19 ``npub1...`` string to a 32-byte x-only key.

    Raises:
        InvalidIdentity: If the string is not valid bech32 or not an npub.
    """
    hrp, data = bech32_decode(npub)
    if hrp is None or data is None:
        msg = "Invalid bech32 string"
        raise InvalidIdentity(msg)
    if hrp != NPUB_HRP:
        msg = f"Expected npub, got {hrp}"
        raise InvalidIdentity(msg)
    decoded = convertbits(data, 5, 8, False)
    if decoded is None or len(decoded) != PUBKEY_LENGTH:
        msg = "npub does not decode to a 32-byte key"
        raise InvalidIdentity(msg)
    return bytes(decoded)


def pubkey_to_npub(pubkey: bytes) -> str:
    """Encode a 32-byte x-only key as a NIP-19 ``npub`` string.

    Raises:
        InvalidKeyLength: If *pubkey* is not 32 bytes.
    """
    data = convertbits(check_pubkey(pubkey), 8, 5, True)
    return bech32_encode(NPUB_HRP, data)


def normalize_pubkey(value: str) -> bytes:
    """Accept an ``npub1...`` or 64-char hex key and return 32 raw bytes.

    Raises:
        InvalidIdentity: If *value* is neither form.
    """
    value = value.strip()
    if value.lower().startswith(NPUB_HRP + "1"):
        return npub_to_pubkey(value)
    if _HEX_KEY.match(value):
        return bytes.fromhex(value)
    msg = f"Expected npub or 64 hex chars, got {len(value)} chars"
    raise InvalidIdentity(msg)


def is_on_curve(pubkey: bytes) -> bool:
    """Check that a secp256k1 point with x-coordinate *pubkey* exists.

    Funds sent to the address of an off-curve key can never be unlocked,
    since no private key signs for it.
    """
    x = int.from_bytes(check_pubkey(pubkey), "big")
    if x >= _FIELD_P:
        return False
    # y^2 = x^3 + 7  (mod p)  for secp256k1; a square iff Euler's criterion holds
    y_sq = (pow(x, 3, _FIELD_P) + 7) % _FIELD_P
    return pow(y_sq, (_FIELD_P - 1) // 2, _FIELD_P) in (0, 1)


def npub_to_address(npub: str, params: ProtocolParams = SCHNORR_V1) -> DerivedAddress:
    """Derive the address for a Nostr ``npub``."""
    pubkey = npub_to_pubkey(npub)
    if not is_on_curve(pubkey):
        logger.warning("npub %s... is not a valid secp256k1 x-coordinate", npub[:12])
    return derive_address(pubkey, params)


def script_to_npub(script: bytes, params: ProtocolParams = SCHNORR_V1) -> str:
    """Recover the ``npub`` whose key is embedded in a revealed unlock script.

    Raises:
        MalformedScript: If *script* does not match the template.
    """
    return pubkey_to_npub(script_to_pubkey(script, params))
