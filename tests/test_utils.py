import pytest

from pyocra import errors, utils


def test_decimal_to_hex():
    assert utils.decimal_to_hex("12345678") == "BC614E"
    assert utils.decimal_to_hex("00000000") == "0"
    assert utils.decimal_to_hex("") == "0"


def test_decimal_to_hex_beyond_128_bits():
    value = "9" * 64
    assert int(utils.decimal_to_hex(value), 16) == 10**64 - 1
    assert len(utils.decimal_to_hex(value)) == 54


def test_hex_to_bytes_left_aligned():
    assert utils.hex_to_bytes("ABCD", 4) == b"\xab\xcd\x00\x00"
    assert utils.hex_to_bytes("abc", 3) == b"\xab\xc0\x00"


def test_hex_to_bytes_right_aligned():
    assert utils.hex_to_bytes("ABCD", 4, align_right=True) == b"\x00\x00\xab\xcd"
    assert utils.hex_to_bytes("abc", 3, align_right=True) == b"\x00\x0a\xbc"


def test_hex_to_bytes_prefix():
    assert utils.hex_to_bytes("0x1f", 2) == b"\x1f\x00"


def test_hex_to_bytes_invalid_digit():
    with pytest.raises(errors.InvalidHexDigit):
        utils.hex_to_bytes("12G4", 4)
    with pytest.raises(errors.InvalidHexDigit):
        utils.hex_to_bytes("12 4", 4)


def test_hex_to_bytes_too_long():
    with pytest.raises(errors.HexValueTooLong):
        utils.hex_to_bytes("AABBCC", 2)
    with pytest.raises(errors.HexValueTooLong):
        utils.hex_to_bytes("ABC", 1, align_right=True)
    assert utils.hex_to_bytes("AABB", 2) == b"\xaa\xbb"


def test_int_to_bytestring():
    assert utils.int_to_bytestring(0) == b"\x00" * 8
    assert utils.int_to_bytestring(0x132D0B6) == b"\x00\x00\x00\x00\x01\x32\xd0\xb6"
    assert utils.int_to_bytestring(2**64 - 1) == b"\xff" * 8


def test_is_decimal():
    assert utils.is_decimal("0123456789")
    assert not utils.is_decimal("3215j")
    assert not utils.is_decimal("12²")


def test_strings_equal():
    assert utils.strings_equal("237653", "237653")
    assert utils.strings_equal("２３７６５３", "237653")
    assert not utils.strings_equal("237653", "237654")
    assert not utils.strings_equal("237653", "2376530")
