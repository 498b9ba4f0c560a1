"""Tests for the Nostr identity adapter — identity/nip19.py."""

from __future__ import annotations

import logging

import pytest

from nostr_alph.codec.address import derive_address
from nostr_alph.codec.script import build_script
from nostr_alph.errors import InvalidIdentity, InvalidKeyLength, MalformedScript
from nostr_alph.identity.nip19 import (
    is_on_curve,
    normalize_pubkey,
    npub_to_address,
    npub_to_pubkey,
    pubkey_to_npub,
    script_to_npub,
)

_JACK_NPUB = "npub1sg6plzptd64u62a878hep2kev88swjh3tw00gjsfl8f237lmu63q0uf63m"
_JACK_HEX = "82341f882b6eabcd2ba7f1ef90aad961cf074af15b9ef44a09f9d2a8fbfbe6a2"
_FIATJAF_NPUB = "npub180cvv07tjdrrgpa0j7j7tmnyl2yr6yr7l8j4s3evf6u64th6gkwsyjh6w6"
_ADDRESS = "qvegNNcKFBtkMcZTLj42pki2YDYTvHaGyBxBaWrPaHwj"


class TestNpub:
    """NIP-19 npub encoding."""

    def test_decode_known(self) -> None:
        assert npub_to_pubkey(_JACK_NPUB).hex() == _JACK_HEX

    def test_encode_known(self) -> None:
        assert pubkey_to_npub(bytes.fromhex(_JACK_HEX)) == _JACK_NPUB

    @pytest.mark.parametrize("npub", [_JACK_NPUB, _FIATJAF_NPUB])
    def test_roundtrip(self, npub: str) -> None:
        pubkey = npub_to_pubkey(npub)
        assert len(pubkey) == 32
        assert pubkey_to_npub(pubkey) == npub

    def test_bad_checksum(self) -> None:
        with pytest.raises(InvalidIdentity, match="bech32"):
            npub_to_pubkey(_JACK_NPUB[:-1] + ("q" if _JACK_NPUB[-1] != "q" else "p"))

    def test_wrong_hrp(self) -> None:
        from bech32 import bech32_encode, convertbits

        nsec = bech32_encode("nsec", convertbits(b"\x01" * 32, 8, 5, True))
        with pytest.raises(InvalidIdentity, match="Expected npub, got nsec"):
            npub_to_pubkey(nsec)

    def test_wrong_length(self) -> None:
        from bech32 import bech32_encode, convertbits

        short = bech32_encode("npub", convertbits(b"\x01" * 20, 8, 5, True))
        with pytest.raises(InvalidIdentity, match="32-byte"):
            npub_to_pubkey(short)

    def test_encode_invalid_length(self) -> None:
        with pytest.raises(InvalidKeyLength):
            pubkey_to_npub(b"\x01" * 33)


class TestNormalizePubkey:
    def test_hex(self) -> None:
        assert normalize_pubkey(_JACK_HEX) == bytes.fromhex(_JACK_HEX)

    def test_hex_uppercase_and_whitespace(self) -> None:
        assert normalize_pubkey(f"  {_JACK_HEX.upper()}\n") == bytes.fromhex(_JACK_HEX)

    def test_npub(self) -> None:
        assert normalize_pubkey(_JACK_NPUB) == bytes.fromhex(_JACK_HEX)

    @pytest.mark.parametrize("value", ["", "abcd", "z" * 64, _JACK_HEX + "00", "02" + _JACK_HEX])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(InvalidIdentity):
            normalize_pubkey(value)


class TestIsOnCurve:
    def test_real_keys(self, test_pubkey: bytes) -> None:
        assert is_on_curve(test_pubkey)
        assert is_on_curve(bytes.fromhex(_JACK_HEX))

    def test_x_above_field_prime(self) -> None:
        assert not is_on_curve(b"\xff" * 32)

    def test_invalid_length(self) -> None:
        with pytest.raises(InvalidKeyLength):
            is_on_curve(b"\x01" * 31)


class TestComposition:
    def test_npub_to_address(self, test_pubkey: bytes) -> None:
        derived = npub_to_address(pubkey_to_npub(test_pubkey))
        assert derived.address == _ADDRESS
        assert derived.group == 0

    def test_script_to_npub(self) -> None:
        script = build_script(bytes.fromhex(_JACK_HEX))
        assert script_to_npub(script) == _JACK_NPUB

    def test_script_to_npub_malformed(self) -> None:
        with pytest.raises(MalformedScript):
            script_to_npub(b"\x00" * 45)

    @pytest.mark.parametrize("npub", [_JACK_NPUB, _FIATJAF_NPUB])
    def test_full_cycle(self, npub: str) -> None:
        forward = npub_to_address(npub)
        assert script_to_npub(forward.script) == npub
        assert forward.address == derive_address(npub_to_pubkey(npub)).address

    def test_off_curve_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        npub = pubkey_to_npub(b"\xff" * 32)
        with caplog.at_level(logging.WARNING, logger="nostr_alph.identity.nip19"):
            npub_to_address(npub)
        assert "not a valid secp256k1" in caplog.text
