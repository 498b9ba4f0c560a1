"""CodecError — base exception class for all nostr-alph errors."""

from __future__ import annotations


class CodecError(ValueError):
    """Base error for all derivation codec operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "codec-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidKeyLength(CodecError):
    """A public key is not exactly 32 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"Expected 32-byte x-only public key, got {length} bytes",
            code="invalid-key-length",
        )
        self.length = length


class MalformedScript(CodecError):
    """An unlock script does not match the fixed Schnorr template."""

    def __init__(self, reason: str, *, length: int) -> None:
        super().__init__(f"Not a Schnorr P2SH script: {reason}", code="malformed-script")
        self.reason = reason
        self.length = length


class InvalidCharacter(CodecError):
    """A base58 string contains a symbol outside the alphabet."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(
            f"Invalid base58 character {character!r} at position {position}",
            code="invalid-character",
        )
        self.character = character
        self.position = position


class WrongAddressKind(CodecError):
    """A decoded address carries an unexpected tag byte."""

    def __init__(self, tag: int, expected: int) -> None:
        super().__init__(
            f"Unexpected address kind {tag:#04x}, expected {expected:#04x}",
            code="wrong-address-kind",
        )
        self.tag = tag
        self.expected = expected


class InvalidLength(CodecError):
    """A decoded address body is not tag byte + 32-byte hash."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Invalid address payload length: {length}", code="invalid-length")
        self.length = length


class InvalidIdentity(CodecError):
    """A human-readable Nostr key could not be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="invalid-identity")
