"""Schnorr unlock script — build and parse the fixed P2SH template.

The script is ``PREFIX || pubkey || SUFFIX``. Parsing is a template match:
anything that is not exactly this shape is rejected, never partially read.
"""

from __future__ import annotations

from nostr_alph.codec.params import PUBKEY_LENGTH, SCHNORR_V1, ProtocolParams
from nostr_alph.errors import InvalidKeyLength, MalformedScript


def check_pubkey(pubkey: bytes) -> bytes:
    """Return *pubkey* unchanged if it is a 32-byte x-only key.

    Raises:
        InvalidKeyLength: Otherwise.
    """
    if len(pubkey) != PUBKEY_LENGTH:
        raise InvalidKeyLength(len(pubkey))
    return bytes(pubkey)


def build_script(pubkey: bytes, params: ProtocolParams = SCHNORR_V1) -> bytes:
    """Build the unlock script embedding *pubkey*.

    Args:
        pubkey: 32-byte x-only secp256k1 public key.
        params: Protocol constants to use.

    Returns:
        ``script_prefix || pubkey || script_suffix``.

    Raises:
        InvalidKeyLength: If *pubkey* is not 32 bytes.
    """
    return params.script_prefix + check_pubkey(pubkey) + params.script_suffix


def parse_script(script: bytes, params: ProtocolParams = SCHNORR_V1) -> bytes:
    """Extract the 32-byte public key from an unlock script.

    Raises:
        MalformedScript: If the length, prefix or suffix does not match.
    """
    script = bytes(script)
    if len(script) != params.script_length:
        msg = f"expected {params.script_length} bytes, got {len(script)}"
        raise MalformedScript(msg, length=len(script))
    if not script.startswith(params.script_prefix):
        raise MalformedScript("prefix mismatch", length=len(script))
    if not script.endswith(params.script_suffix):
        raise MalformedScript("suffix mismatch", length=len(script))
    start = params.key_offset
    return script[start : start + PUBKEY_LENGTH]


def is_schnorr_script(script: bytes, params: ProtocolParams = SCHNORR_V1) -> bool:
    """Check if *script* matches the unlock script template."""
    try:
        parse_script(script, params)
    except MalformedScript:
        return False
    return True
