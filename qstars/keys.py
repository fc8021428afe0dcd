"""Base64 helpers and derivation of public keys and addresses from ed25519 private keys."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json

from nacl.signing import SigningKey

from qstars.address import PREF_ADD, convert_and_encode

BECH32_PREFIX_ACC_ADDR = PREF_ADD
BECH32_PREFIX_ACC_PUB = "cosmosaccpub"

_PRIV_KEY_PREFIX = bytes.fromhex("a3288910")
_PUB_KEY_PREFIX = bytes.fromhex("1624de64")
_PRIV_KEY_SIZE = 64
_PUB_KEY_SIZE = 32
_ADDRESS_SIZE = 20


def encbase64(data: bytes) -> str:
    """Standard base64 encoding of ``data``."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decbase64(text: str) -> bytes:
    """Decode standard base64; malformed input gives empty bytes."""
    try:
        return base64.b64decode(text, validate=True)
    except ValueError:
        return b""


def _retrieve(raw: bytes) -> tuple[str, str, SigningKey]:
    if len(raw) != _PRIV_KEY_SIZE:
        raise ValueError(f"private key must be {_PRIV_KEY_SIZE} bytes, got {len(raw)}")
    public = raw[_PRIV_KEY_SIZE - _PUB_KEY_SIZE:]
    amino_public = _PUB_KEY_PREFIX + bytes([_PUB_KEY_SIZE]) + public
    address = hashlib.sha256(public).digest()[:_ADDRESS_SIZE]
    return (
        convert_and_encode(BECH32_PREFIX_ACC_PUB, amino_public),
        convert_and_encode(BECH32_PREFIX_ACC_ADDR, address),
        SigningKey(raw[:_PUB_KEY_SIZE]),
    )


def pub_addr_retrieval_from_amino(ca_pri_base64: str) -> tuple[str, str, SigningKey]:
    """Derive bech32 public key, bech32 address and signing key from a base64 private key.

    Raises ``ValueError`` if the key cannot be decoded.
    """
    document = json.dumps({"type": "tendermint/PrivKeyEd25519", "value": ca_pri_base64})
    value = json.loads(document)["value"]
    try:
        raw = base64.b64decode(value, validate=True)
    except ValueError as exc:
        raise ValueError(f"invalid private key encoding: {exc}") from None
    return _retrieve(raw)


def pub_addr_retrieval_from_hex1(ca_pri_hex: str) -> tuple[str, str, SigningKey]:
    """Derive the same triple from a ``0x``-prefixed hex, amino-encoded private key."""
    try:
        encoded = binascii.unhexlify(ca_pri_hex[2:])
    except binascii.Error as exc:
        raise ValueError(f"invalid hex private key: {exc}") from None
    header = _PRIV_KEY_PREFIX + bytes([_PRIV_KEY_SIZE])
    if not encoded.startswith(header) or len(encoded) != len(header) + _PRIV_KEY_SIZE:
        raise ValueError("not an amino-encoded ed25519 private key")
    return _retrieve(encoded[len(header):])