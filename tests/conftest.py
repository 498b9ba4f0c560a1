"""Shared test fixtures for nostr-alph test suite."""

from __future__ import annotations

import os

import pytest

# Reference vector from the alephium-web3 test suite (bip340-schnorr).
_TEST_PUBKEY_HEX = "aecfc38a48f5fe7e050fca59de9f8d77fa7a7d9e63af608a95f8839de397f48a"


@pytest.fixture
def test_pubkey() -> bytes:
    """32-byte x-only key whose address is known."""
    return bytes.fromhex(_TEST_PUBKEY_HEX)


@pytest.fixture
def test_script(test_pubkey: bytes) -> bytes:
    """Unlock script for :func:`test_pubkey`, spelled out byte for byte."""
    return bytes.fromhex("0101000000000458144020") + test_pubkey + bytes.fromhex("8685")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``NOSTR_ALPH_*`` variables out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("NOSTR_ALPH_"):
            monkeypatch.delenv(key, raising=False)
