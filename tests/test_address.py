import pytest

from qstars.address import (
    PREF_ADD,
    acc_address_from_bech32,
    acc_address_from_hex,
    convert_and_encode,
    decode_and_convert,
    get_from_bech32,
)


def test_round_trip_twenty_bytes():
    data = bytes(range(20))
    encoded = convert_and_encode(PREF_ADD, data)
    assert encoded.startswith(PREF_ADD + "1")
    assert decode_and_convert(encoded) == (PREF_ADD, data)


@pytest.mark.parametrize("data", [b"", b"\x00", b"\xff" * 7, bytes(range(37))])
def test_round_trip_various_lengths(data):
    encoded = convert_and_encode("test", data)
    assert decode_and_convert(encoded) == ("test", data)


def test_reference_vector_decodes():
    assert decode_and_convert("A12UEL5L") == ("a", b"")


def test_uppercase_is_accepted():
    encoded = convert_and_encode(PREF_ADD, b"\x01\x02\x03")
    assert decode_and_convert(encoded.upper()) == (PREF_ADD, b"\x01\x02\x03")


def test_mixed_case_rejected():
    encoded = convert_and_encode(PREF_ADD, b"\x01\x02\x03")
    mixed = encoded[0].upper() + encoded[1:]
    with pytest.raises(ValueError):
        decode_and_convert(mixed)


def test_bad_checksum_rejected():
    encoded = convert_and_encode(PREF_ADD, bytes(20))
    last = encoded[-1]
    replacement = "q" if last != "q" else "p"
    with pytest.raises(ValueError):
        decode_and_convert(encoded[:-1] + replacement)


def test_too_short_rejected():
    with pytest.raises(ValueError):
        decode_and_convert("a1qqq")


def test_get_from_bech32_checks_prefix():
    encoded = convert_and_encode("other", bytes(20))
    with pytest.raises(ValueError, match="invalid bech32 prefix"):
        get_from_bech32(encoded, PREF_ADD)


def test_get_from_bech32_empty():
    with pytest.raises(ValueError, match="must provide an address"):
        get_from_bech32("", PREF_ADD)


def test_acc_address_from_bech32():
    data = bytes(range(10, 30))
    assert acc_address_from_bech32(convert_and_encode(PREF_ADD, data)) == data


def test_acc_address_from_hex():
    assert acc_address_from_hex("0a0b") == b"\x0a\x0b"
    assert acc_address_from_hex(bytes(range(20)).hex()) == bytes(range(20))


@pytest.mark.parametrize("bad", ["", "zz", "abc", "0a 0b"])
def test_acc_address_from_hex_invalid(bad):
    with pytest.raises(ValueError):
        acc_address_from_hex(bad)