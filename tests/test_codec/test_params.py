"""Tests for protocol parameters and the codec facade."""

from __future__ import annotations

import pytest

from nostr_alph.codec.engine import AddressCodec
from nostr_alph.codec.params import SCHNORR_V1, ProtocolParams
from nostr_alph.errors import MalformedScript
from nostr_alph.utils.crypto import HashFunction, sha256

_ADDRESS = "qvegNNcKFBtkMcZTLj42pki2YDYTvHaGyBxBaWrPaHwj"


class TestProtocolParams:
    def test_schnorr_v1(self) -> None:
        assert SCHNORR_V1.script_prefix.hex() == "0101000000000458144020"
        assert SCHNORR_V1.script_suffix.hex() == "8685"
        assert SCHNORR_V1.tag_byte == 0x02
        assert SCHNORR_V1.group_count == 4
        assert SCHNORR_V1.hash_name == HashFunction.BLAKE2B_256
        assert SCHNORR_V1.key_offset == 11
        assert SCHNORR_V1.script_length == 45

    def test_hash_name_from_string(self) -> None:
        params = ProtocolParams(
            name="x", script_prefix=b"", script_suffix=b"", hash_name="sha256"  # type: ignore[arg-type]
        )
        assert params.hash_name is HashFunction.SHA256
        assert params.hash(b"abc") == sha256(b"abc")

    def test_unknown_hash(self) -> None:
        with pytest.raises(ValueError):
            ProtocolParams(
                name="x", script_prefix=b"", script_suffix=b"", hash_name="md5"  # type: ignore[arg-type]
            )

    @pytest.mark.parametrize("tag", [-1, 256])
    def test_invalid_tag(self, tag: int) -> None:
        with pytest.raises(ValueError, match="tag_byte"):
            ProtocolParams(name="x", script_prefix=b"", script_suffix=b"", tag_byte=tag)

    @pytest.mark.parametrize("count", [0, 257])
    def test_invalid_group_count(self, count: int) -> None:
        with pytest.raises(ValueError, match="group_count"):
            ProtocolParams(name="x", script_prefix=b"", script_suffix=b"", group_count=count)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SCHNORR_V1.tag_byte = 3  # type: ignore[misc]


class TestAddressCodec:
    """Facade bound to one parameter set."""

    def test_default_params(self, test_pubkey: bytes) -> None:
        codec = AddressCodec()
        assert codec.params is SCHNORR_V1
        derived = codec.derive_address(test_pubkey)
        assert derived.address == _ADDRESS
        assert codec.address_hash_of(_ADDRESS) == derived.hash
        assert codec.group_of(derived.hash) == 0
        assert codec.group_of_address(_ADDRESS) == 0
        assert codec.validate_address(_ADDRESS)
        assert codec.verify(test_pubkey, _ADDRESS)
        assert codec.verify_detailed(test_pubkey, _ADDRESS).matches

    def test_script_roundtrip(self, test_pubkey: bytes) -> None:
        codec = AddressCodec()
        script = codec.build_script(test_pubkey)
        assert codec.parse_script(script) == test_pubkey
        assert codec.script_to_pubkey(script) == test_pubkey

    def test_versions_coexist(self, test_pubkey: bytes) -> None:
        v2 = ProtocolParams(
            name="schnorr-v2",
            script_prefix=SCHNORR_V1.script_prefix,
            script_suffix=b"\x86\x86",
            tag_byte=0x02,
        )
        old, new = AddressCodec(), AddressCodec(v2)
        a_old = old.derive_address(test_pubkey)
        a_new = new.derive_address(test_pubkey)
        assert a_old.address == _ADDRESS
        assert a_new.address != a_old.address
        assert new.verify(test_pubkey, a_new.address)
        assert not old.verify(test_pubkey, a_new.address)
        with pytest.raises(MalformedScript):
            old.script_to_pubkey(a_new.script)
        assert new.script_to_pubkey(a_new.script) == test_pubkey
