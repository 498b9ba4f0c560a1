"""Group assignment — which shard group an address belongs to.

Bit-for-bit the scheme used by Alephium nodes::

    group = xor_fold(djb2(hash) | 1) % group_count
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nostr_alph.codec.params import GROUP_COUNT, SCHNORR_V1

if TYPE_CHECKING:
    from nostr_alph.codec.params import ProtocolParams

_MASK32 = 0xFFFFFFFF


def djb2(data: bytes) -> int:
    """32-bit DJB2 hash over unsigned bytes, as an unsigned int."""
    acc = 5381
    for b in data:
        acc = ((acc << 5) + acc + b) & _MASK32
    return acc


def xor_fold(value: int) -> int:
    """XOR the four big-endian bytes of a 32-bit value into one byte."""
    value &= _MASK32
    return (value >> 24) ^ ((value >> 16) & 0xFF) ^ ((value >> 8) & 0xFF) ^ (value & 0xFF)


def group_of(address_hash: bytes, group_count: int = GROUP_COUNT) -> int:
    """Return the group index in ``[0, group_count)`` for an address hash."""
    return xor_fold(djb2(address_hash) | 1) % group_count


def group_of_address(address: str, params: ProtocolParams = SCHNORR_V1) -> int:
    """Return the group index of a base58 address string.

    Raises:
        InvalidCharacter, InvalidLength, WrongAddressKind: If the address
            does not decode to an address of this protocol's kind.
    """
    from nostr_alph.codec.address import address_hash_of

    return group_of(address_hash_of(address, params), params.group_count)
