"""Protocol parameters — the byte-exact constants of one address scheme.

Every codec function takes a :class:`ProtocolParams` so that a change to any
constant is a new, coexisting parameter set rather than an edit to globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from nostr_alph.utils.crypto import HashFunction, hash_function

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Compiled Ralph bytecode of:
#
#   AssetScript Schnorr(publicKey: ByteVec) {
#     pub fn unlock() -> () {
#       verifyBIP340Schnorr!(txId!(), publicKey, getSegregatedSignature!())
#     }
#   }
#
# with the 32-byte public key pushed between prefix and suffix.
SCHNORR_SCRIPT_PREFIX = bytes.fromhex("0101000000000458144020")
SCHNORR_SCRIPT_SUFFIX = bytes.fromhex("8685")

PUBKEY_LENGTH = 32
HASH_LENGTH = 32

TAG_P2PKH = 0x00
TAG_P2MPKH = 0x01
TAG_P2SH = 0x02
TAG_P2C = 0x03

GROUP_COUNT = 4


@dataclass(frozen=True)
class ProtocolParams:
    """Constants for deriving one kind of address from an x-only key.

    Attributes:
        name: Label for this parameter set (e.g. ``schnorr-v1``).
        script_prefix: Unlock script bytes preceding the public key.
        script_suffix: Unlock script bytes following the public key.
        tag_byte: Address kind byte prepended to the script hash.
        group_count: Number of shard groups on the network.
        hash_name: Hash identity applied to the unlock script.
    """

    name: str
    script_prefix: bytes
    script_suffix: bytes
    tag_byte: int = TAG_P2SH
    group_count: int = GROUP_COUNT
    hash_name: HashFunction = HashFunction.BLAKE2B_256

    def __post_init__(self) -> None:
        if not 0 <= self.tag_byte <= 0xFF:
            msg = f"tag_byte must fit in one byte, got {self.tag_byte}"
            raise ValueError(msg)
        if not 1 <= self.group_count <= 256:
            msg = f"group_count must be in [1, 256], got {self.group_count}"
            raise ValueError(msg)
        # Normalise str input and fail early on unknown names.
        object.__setattr__(self, "hash_name", HashFunction(self.hash_name))

    @property
    def key_offset(self) -> int:
        """Byte offset of the public key inside the unlock script."""
        return len(self.script_prefix)

    @property
    def script_length(self) -> int:
        """Total length of a well-formed unlock script."""
        return len(self.script_prefix) + PUBKEY_LENGTH + len(self.script_suffix)

    def hash(self, data: bytes) -> bytes:
        """Apply this protocol's script hash to *data*."""
        return hash_function(self.hash_name)(data)


SCHNORR_V1 = ProtocolParams(
    name="schnorr-v1",
    script_prefix=SCHNORR_SCRIPT_PREFIX,
    script_suffix=SCHNORR_SCRIPT_SUFFIX,
)
