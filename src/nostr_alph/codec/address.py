"""Address encoding — Schnorr P2SH addresses from x-only public keys.

Alephium address operations:
- P2SH address derivation from a Nostr (BIP340) public key
- Address → script hash extraction and kind validation

An address is ``base58(tag || blake2b256(unlock_script))``. The hash step is
one-way: nothing here turns an address back into a public key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nostr_alph.codec.base58 import base58_decode, base58_encode
from nostr_alph.codec.group import group_of
from nostr_alph.codec.params import HASH_LENGTH, SCHNORR_V1, ProtocolParams
from nostr_alph.codec.script import build_script
from nostr_alph.errors import CodecError, InvalidLength, WrongAddressKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedAddress:
    """Result of a forward derivation.

    Attributes:
        address: Base58 address string.
        hash: 32-byte script hash (address body without the tag).
        script: Unlock script the address commits to.
        pubkey: The 32-byte x-only public key embedded in *script*.
        group: Shard group index of the address.
    """

    address: str
    hash: bytes
    script: bytes
    pubkey: bytes
    group: int

    @property
    def script_hex(self) -> str:
        return self.script.hex()

    @property
    def pubkey_hex(self) -> str:
        return self.pubkey.hex()


def derive_address(pubkey: bytes, params: ProtocolParams = SCHNORR_V1) -> DerivedAddress:
    """Derive the P2SH address for an x-only public key.

    Args:
        pubkey: 32-byte x-only secp256k1 public key.
        params: Protocol constants to use.

    Returns:
        The :class:`DerivedAddress` with address, hash, script and group.

    Raises:
        InvalidKeyLength: If *pubkey* is not 32 bytes.
    """
    script = build_script(pubkey, params)
    h = params.hash(script)
    address = base58_encode(bytes([params.tag_byte]) + h)
    group = group_of(h, params.group_count)
    logger.debug("Derived %s (group %d) under %s", address, group, params.name)
    return DerivedAddress(
        address=address,
        hash=h,
        script=script,
        pubkey=bytes(pubkey),
        group=group,
    )


def address_hash_of(address: str, params: ProtocolParams = SCHNORR_V1) -> bytes:
    """Extract the 32-byte script hash from an address.

    Raises:
        InvalidCharacter: If the address is not valid base58.
        InvalidLength: If the decoded payload is not 33 bytes.
        WrongAddressKind: If the tag byte is not this protocol's kind.
    """
    payload = base58_decode(address)
    if len(payload) != 1 + HASH_LENGTH:
        raise InvalidLength(len(payload))
    if payload[0] != params.tag_byte:
        raise WrongAddressKind(payload[0], params.tag_byte)
    return payload[1:]


def validate_address(address: str, params: ProtocolParams = SCHNORR_V1) -> bool:
    """Check if *address* decodes to an address of this protocol's kind."""
    try:
        address_hash_of(address, params)
    except CodecError:
        return False
    return True
