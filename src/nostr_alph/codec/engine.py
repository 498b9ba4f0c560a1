"""AddressCodec — the derivation operations bound to one parameter set."""

from __future__ import annotations

from dataclasses import dataclass, field

from nostr_alph.codec import address as _address
from nostr_alph.codec import group as _group
from nostr_alph.codec import reverse as _reverse
from nostr_alph.codec import script as _script
from nostr_alph.codec.params import SCHNORR_V1, ProtocolParams


@dataclass(frozen=True)
class AddressCodec:
    """Stateless facade over the codec for a fixed :class:`ProtocolParams`.

    Two codecs with different parameters can be used side by side, e.g.
    while a protocol upgrade is being rolled out.
    """

    params: ProtocolParams = field(default=SCHNORR_V1)

    def build_script(self, pubkey: bytes) -> bytes:
        return _script.build_script(pubkey, self.params)

    def parse_script(self, script: bytes) -> bytes:
        return _script.parse_script(script, self.params)

    def derive_address(self, pubkey: bytes) -> _address.DerivedAddress:
        return _address.derive_address(pubkey, self.params)

    def address_hash_of(self, address: str) -> bytes:
        return _address.address_hash_of(address, self.params)

    def validate_address(self, address: str) -> bool:
        return _address.validate_address(address, self.params)

    def group_of(self, address_hash: bytes) -> int:
        return _group.group_of(address_hash, self.params.group_count)

    def group_of_address(self, address: str) -> int:
        return _group.group_of_address(address, self.params)

    def script_to_pubkey(self, script: bytes) -> bytes:
        return _reverse.script_to_pubkey(script, self.params)

    def verify(self, pubkey: bytes, expected_address: str) -> bool:
        return _reverse.verify(pubkey, expected_address, self.params)

    def verify_detailed(self, pubkey: bytes, expected_address: str) -> _reverse.Verification:
        return _reverse.verify_detailed(pubkey, expected_address, self.params)
