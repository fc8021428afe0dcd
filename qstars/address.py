"""Bech32 encoding and account address parsing."""

from __future__ import annotations

import binascii
from typing import Iterable

PREF_ADD = "address"

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_MAP = {char: index for index, char in enumerate(_CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_CHECKSUM_LEN = 6
_MAX_LENGTH = 90
_MIN_LENGTH = 8

_NO_ADDRESS = "decoding bech32 address failed: must provide an address"


def _polymod(values: Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, data: bytes) -> list[int]:
    values = _hrp_expand(hrp) + list(data) + [0] * _CHECKSUM_LEN
    polymod = _polymod(values) ^ 1
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(_CHECKSUM_LEN)]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> bytes:
    acc = 0
    bits = 0
    out = []
    max_value = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise ValueError(f"invalid data range: {value}")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise ValueError("invalid incomplete group")
    return bytes(out)


def _encode(hrp: str, data: bytes) -> str:
    combined = list(data) + _create_checksum(hrp, data)
    return hrp + "1" + "".join(_CHARSET[d] for d in combined)


def _decode(bech: str) -> tuple[str, bytes]:
    if not _MIN_LENGTH <= len(bech) <= _MAX_LENGTH:
        raise ValueError(f"invalid bech32 string length {len(bech)}")
    for char in bech:
        if not 33 <= ord(char) <= 126:
            raise ValueError(f"invalid character in string: {char!r}")
    lower = bech.lower()
    if bech != lower and bech != bech.upper():
        raise ValueError("string not all lowercase or all uppercase")
    bech = lower
    pos = bech.rfind("1")
    if pos < 1 or pos + _CHECKSUM_LEN + 1 > len(bech):
        raise ValueError(f"invalid index of 1: {pos}")
    hrp, data_part = bech[:pos], bech[pos + 1:]
    try:
        data = [_CHARSET_MAP[char] for char in data_part]
    except KeyError as exc:
        raise ValueError(f"invalid character not part of charset: {exc.args[0]!r}") from None
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise ValueError("checksum failed")
    return hrp, bytes(data[:-_CHECKSUM_LEN])


def convert_and_encode(hrp: str, data: bytes) -> str:
    """Encode 8-bit ``data`` as a bech32 string with human-readable part ``hrp``."""
    return _encode(hrp, _convert_bits(bytes(data), 8, 5, True))


def decode_and_convert(bech: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and 8-bit data."""
    hrp, data = _decode(bech)
    return hrp, _convert_bits(data, 5, 8, False)


def get_from_bech32(bech32str: str, prefix: str) -> bytes:
    """Decode ``bech32str`` and check that its prefix is ``prefix``."""
    if not bech32str:
        raise ValueError(_NO_ADDRESS)
    hrp, data = decode_and_convert(bech32str)
    if hrp != prefix:
        raise ValueError(f"invalid bech32 prefix. Expected {prefix}, Got {hrp}")
    return data


def acc_address_from_hex(address: str) -> bytes:
    """Decode an account address given in hex."""
    if not address:
        raise ValueError(_NO_ADDRESS)
    try:
        return binascii.unhexlify(address)
    except binascii.Error as exc:
        raise ValueError(f"invalid hex address: {exc}") from None


def acc_address_from_bech32(address: str) -> bytes:
    """Decode an account address given in bech32 with the account prefix."""
    return get_from_bech32(address, PREF_ADD)