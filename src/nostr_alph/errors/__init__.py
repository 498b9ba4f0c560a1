"""Errors — typed exceptions raised by the codec and identity adapter."""

from __future__ import annotations

from nostr_alph.errors.codec_errors import (
    CodecError,
    InvalidCharacter,
    InvalidIdentity,
    InvalidKeyLength,
    InvalidLength,
    MalformedScript,
    WrongAddressKind,
)

__all__ = [
    "CodecError",
    "InvalidCharacter",
    "InvalidIdentity",
    "InvalidKeyLength",
    "InvalidLength",
    "MalformedScript",
    "WrongAddressKind",
]
