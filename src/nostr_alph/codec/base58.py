"""Base58 encoding / decoding without a checksum.

Alephium addresses are plain base58 over ``tag || hash``. There is no
Base58Check checksum, so a corrupted address decodes silently.
"""

from __future__ import annotations

from nostr_alph.errors import InvalidCharacter

B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_B58_INDEX = {char: i for i, char in enumerate(B58_ALPHABET)}


def _count_leading(seq, zero) -> int:  # type: ignore[no-untyped-def]
    count = 0
    for item in seq:
        if item != zero:
            break
        count += 1
    return count


def base58_encode(payload: bytes) -> str:
    """Encode raw bytes to Base58 (no checksum).

    Each leading ``0x00`` byte becomes one leading ``'1'``.
    """
    zeros = _count_leading(payload, 0)
    n = int.from_bytes(payload[zeros:], "big")
    digits: list[str] = []
    while n > 0:
        n, remainder = divmod(n, 58)
        digits.append(B58_ALPHABET[remainder])
    return B58_ALPHABET[0] * zeros + "".join(reversed(digits))


def base58_decode(s: str) -> bytes:
    """Decode a Base58 string to raw bytes (no checksum).

    Raises:
        InvalidCharacter: If *s* contains a symbol outside the alphabet.
    """
    n = 0
    for position, char in enumerate(s):
        digit = _B58_INDEX.get(char)
        if digit is None:
            raise InvalidCharacter(char, position)
        n = n * 58 + digit
    zeros = _count_leading(s, B58_ALPHABET[0])
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n > 0 else b""
    return b"\x00" * zeros + body
