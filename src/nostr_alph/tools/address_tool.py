#!/usr/bin/env python3
"""Nostr ⇄ Alephium address tool — derive, reverse, verify, group.

A standalone CLI for mapping Nostr identities to Alephium Schnorr addresses:

    # Derive the Alephium address for a Nostr public key (npub or hex)
    python -m nostr_alph.tools.address_tool derive <npub|hex>

    # Recover the Nostr key from a revealed unlock script
    python -m nostr_alph.tools.address_tool reverse <script_hex>

    # Check that a Nostr key controls an Alephium address
    python -m nostr_alph.tools.address_tool verify <npub|hex> <address>

    # Show the shard group of an address
    python -m nostr_alph.tools.address_tool group <address>

Protocol constants and log level come from ``NOSTR_ALPH_*`` environment
variables or the YAML file named by ``NOSTR_ALPH_CONFIG_PATH``.
"""

from __future__ import annotations

import logging
import sys

from nostr_alph.codec.engine import AddressCodec
from nostr_alph.config.settings import AppConfig
from nostr_alph.errors import CodecError
from nostr_alph.identity.nip19 import is_on_curve, normalize_pubkey, pubkey_to_npub

logger = logging.getLogger(__name__)


def _setup(config: AppConfig) -> AddressCodec:
    logging.basicConfig(level=str(config.log_level), format=config.log.format)
    params = config.protocol.to_params()
    logger.debug("Using protocol %s", params.name)
    return AddressCodec(params)


def _cmd_derive(codec: AddressCodec, key: str) -> None:
    """Derive and print the address for a Nostr public key."""
    pubkey = normalize_pubkey(key)
    if not is_on_curve(pubkey):
        logger.warning("Key is not a valid secp256k1 x-coordinate; funds would be unspendable")
    derived = codec.derive_address(pubkey)
    print(f"npub:    {pubkey_to_npub(pubkey)}")
    print(f"pubkey:  {derived.pubkey_hex}")
    print(f"address: {derived.address}")
    print(f"group:   {derived.group}")
    print(f"script:  {derived.script_hex}")


def _cmd_reverse(codec: AddressCodec, script_hex: str) -> None:
    """Print the Nostr key embedded in a revealed unlock script."""
    try:
        script = bytes.fromhex(script_hex.strip())
    except ValueError as exc:
        msg = "Script must be hex"
        raise CodecError(msg) from exc
    pubkey = codec.script_to_pubkey(script)
    print(f"npub:    {pubkey_to_npub(pubkey)}")
    print(f"pubkey:  {pubkey.hex()}")
    print(f"address: {codec.derive_address(pubkey).address}")


def _cmd_verify(codec: AddressCodec, key: str, address: str) -> bool:
    """Check a key against an address; returns whether they match."""
    result = codec.verify_detailed(normalize_pubkey(key), address)
    if result.matches:
        print(f"MATCH    {address}")
    else:
        print(f"MISMATCH expected {address}, derived {result.derived_address}")
    return result.matches


def _cmd_group(codec: AddressCodec, address: str) -> None:
    print(codec.group_of_address(address))


def _usage(line: str) -> None:
    print(f"Usage: address_tool {line}")
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__)
        sys.exit(1)

    cmd = args[0].lower()
    codec = _setup(AppConfig())

    try:
        if cmd == "derive":
            if len(args) < 2:
                _usage("derive <npub|hex>")
            _cmd_derive(codec, args[1])
        elif cmd == "reverse":
            if len(args) < 2:
                _usage("reverse <script_hex>")
            _cmd_reverse(codec, args[1])
        elif cmd == "verify":
            if len(args) < 3:
                _usage("verify <npub|hex> <address>")
            if not _cmd_verify(codec, args[1], args[2]):
                sys.exit(1)
        elif cmd == "group":
            if len(args) < 2:
                _usage("group <address>")
            _cmd_group(codec, args[1])
        else:
            print(f"Unknown command: {cmd}")
            print(__doc__)
            sys.exit(1)
    except CodecError as exc:
        print(f"Error: {exc.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
