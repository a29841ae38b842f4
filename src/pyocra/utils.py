import string
import unicodedata
from hmac import compare_digest

from .errors import HexValueTooLong, InvalidHexDigit

HEX_DIGITS = frozenset(string.hexdigits)
DECIMAL_DIGITS = frozenset(string.digits)


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns a non-negative integer into the big-endian bytestring OCRA
    feeds to the HMAC for counter and timestamp values.

    :raises OverflowError: if the value does not fit in ``padding`` bytes
    """
    return i.to_bytes(padding, "big")


def decimal_to_hex(value: str) -> str:
    """
    Converts a decimal digit string of any length to uppercase hex.

    Python integers are arbitrary precision, so a 64 digit numeric
    challenge converts without overflow.

    >>> decimal_to_hex("12345678")
    'BC614E'
    """
    return "{:X}".format(int(value or "0"))


def hex_to_bytes(value: str, length: int, align_right: bool = False) -> bytes:
    """
    Decodes a hex digit string into a region of exactly ``length`` bytes.

    Left aligned values are zero padded on the right; an odd trailing
    nibble becomes the high nibble of the last byte. Right aligned values
    are zero padded on the left; an odd leading nibble becomes the low
    nibble of the first byte.

    :param value: hex digits, case-insensitive, optionally ``0x`` prefixed
    :param length: size of the output region in bytes
    :param align_right: right-justify the value within the region
    :raises InvalidHexDigit: on characters outside ``[0-9A-Fa-f]``
    :raises HexValueTooLong: if the decoded value does not fit in ``length``
    """
    if len(value) > 2 and value[:2] in ("0x", "0X"):
        value = value[2:]

    for c in value:
        if c not in HEX_DIGITS:
            raise InvalidHexDigit("Hex value must contain only [0-9][a-f][A-F], got {!r}".format(c))

    if len(value) % 2:
        value = "0" + value if align_right else value + "0"
    decoded = bytes.fromhex(value)

    if len(decoded) > length:
        raise HexValueTooLong("{} bytes of hex data do not fit in {} bytes".format(len(decoded), length))
    if align_right:
        return decoded.rjust(length, b"\0")
    return decoded.ljust(length, b"\0")


def is_decimal(value: str) -> bool:
    return all(c in DECIMAL_DIGITS for c in value)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
