"""
OCRASuite parsing and validation (RFC 6287 section 6).

An OCRASuite string looks like::

    OCRA-1:HOTP-SHA256-8:C-QN08-PSHA1-S064-T1M
    ──┬───  ──────┬─────  ───────────┬────────
      │           │                  └── DataInput: [C]-QFxx-[PH]-[Snnn]-[TG]
      │           └── CryptoFunction: HOTP-SHAx-t
      └── Version

The grammar is case-insensitive; :func:`parse` upper-cases the input and
``str(suite)`` renders the canonical upper-case form back.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from . import errors
from .utils import is_decimal

log = logging.getLogger(__name__)

OCRA_1 = "OCRA-1"
HOTP = "HOTP"

#: The question is always encoded in a fixed 128 byte field.
QUESTION_LENGTH = 128

COUNTER_LENGTH = 8
TIMESTAMP_LENGTH = 8

DIGITS = (0, 4, 5, 6, 7, 8, 9, 10)

MIN_CHALLENGE_LENGTH = 4
MAX_CHALLENGE_LENGTH = 64
MAX_SESSION_LENGTH = 512

DATA_INPUT_PATTERN = "[C]-QFxx-[PH]-[Snnn]-[TG]"


class HashAlgorithm(enum.Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]


_DIGEST_SIZES = {
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA512: 64,
}


class ChallengeFormat(enum.Enum):
    ALPHANUMERIC = "A"
    NUMERIC = "N"
    HEX = "H"


class TimeUnit(enum.Enum):
    SECONDS = "S"
    MINUTES = "M"
    HOURS = "H"

    @property
    def seconds(self) -> int:
        return _UNIT_SECONDS[self]


_UNIT_SECONDS = {
    TimeUnit.SECONDS: 1,
    TimeUnit.MINUTES: 60,
    TimeUnit.HOURS: 3600,
}


@dataclass(frozen=True)
class Challenge:
    format: ChallengeFormat
    length: int

    def __str__(self) -> str:
        return "Q{}{:02d}".format(self.format.value, self.length)


@dataclass(frozen=True)
class TimestampStep:
    unit: TimeUnit
    magnitude: int

    @property
    def seconds(self) -> int:
        """Length of one time step in seconds."""
        return self.magnitude * self.unit.seconds

    def __str__(self) -> str:
        return "T{}{}".format(self.magnitude, self.unit.value)


@dataclass(frozen=True)
class OCRASuite:
    """
    A validated OCRASuite.

    Instances are immutable and fully determine the byte layout of every
    message built for them::

        suite | 0x00 | [counter] | question | [password] | [session] | [timestamp]
    """

    hmac_algorithm: HashAlgorithm
    digits: int
    challenge: Challenge
    counter: bool = False
    password_hash: Optional[HashAlgorithm] = None
    session_length: int = 0
    timestamp: Optional[TimestampStep] = None
    version: str = OCRA_1

    @property
    def password_length(self) -> int:
        return self.password_hash.digest_size if self.password_hash else 0

    @property
    def message_length(self) -> int:
        """Exact size in bytes of every message built for this suite."""
        return (
            len(str(self))
            + 1
            + (COUNTER_LENGTH if self.counter else 0)
            + QUESTION_LENGTH
            + self.password_length
            + self.session_length
            + (TIMESTAMP_LENGTH if self.timestamp else 0)
        )

    def __str__(self) -> str:
        data_input = []
        if self.counter:
            data_input.append("C")
        data_input.append(str(self.challenge))
        if self.password_hash:
            data_input.append("P" + self.password_hash.value)
        if self.session_length:
            data_input.append("S{:03d}".format(self.session_length))
        if self.timestamp:
            data_input.append(str(self.timestamp))

        return "{}:{}-{}-{}:{}".format(
            self.version, HOTP, self.hmac_algorithm.value, self.digits, "-".join(data_input)
        )


class _Slot(enum.Enum):
    """States of the DataInput walk, named after the slot they expect."""

    COUNTER = "C"
    CHALLENGE = "Q"
    PASSWORD = "P"
    SESSION = "S"
    TIMESTAMP = "T"
    DONE = ""


_NEXT_SLOT = {
    _Slot.COUNTER: _Slot.CHALLENGE,
    _Slot.CHALLENGE: _Slot.PASSWORD,
    _Slot.PASSWORD: _Slot.SESSION,
    _Slot.SESSION: _Slot.TIMESTAMP,
    _Slot.TIMESTAMP: _Slot.DONE,
}


def parse(suite: str) -> OCRASuite:
    """
    Parses and validates an OCRASuite string.

    Validation runs front to back and stops at the first violated rule.

    :param suite: the OCRASuite, e.g. ``"OCRA-1:HOTP-SHA1-6:QN08"``
    :returns: the validated suite
    :raises SuiteError: the specific subclass names the violated rule
    """
    fields = suite.upper().split(":")
    if len(fields) != 3:
        raise errors.InvalidSuiteShape(
            "Invalid OCRA suite, pattern is: <Version>:<CryptoFunction>:<DataInput>, see RFC6287"
        )
    version, crypto_function, data_input = fields

    if version != OCRA_1:
        raise errors.UnsupportedVersion("Invalid OCRA version, supported version is 1")

    hmac_algorithm, digits = _parse_crypto_function(crypto_function)
    parsed = OCRASuite(hmac_algorithm=hmac_algorithm, digits=digits, **_parse_data_input(data_input))
    log.debug("Parsed OCRA suite %s", parsed)
    return parsed


def _parse_crypto_function(function: str):
    parts = function.split("-")
    if len(parts) != 3:
        raise errors.InvalidCryptoFunction(
            "Invalid OCRA CryptoFunction, pattern is HOTP-SHAx-t, x = {1, 256, 512}, t = {0, 4-10}"
        )
    algorithm, hash_name, digits = parts

    if algorithm != HOTP:
        raise errors.UnsupportedHmacAlgorithm(
            "Invalid OCRA CryptoFunction, only HOTP is supported, pattern is HOTP-SHAx-t"
        )
    if hash_name not in HashAlgorithm.__members__:
        raise errors.UnsupportedHashFunction(
            "Invalid OCRA CryptoFunction, hash must be SHA1, SHA256 or SHA512, pattern is HOTP-SHAx-t"
        )
    if digits not in [str(d) for d in DIGITS]:
        raise errors.InvalidDigitCount(
            "Invalid OCRA CryptoFunction, supported digits t = {0, 4-10}, pattern is HOTP-SHAx-t"
        )
    return HashAlgorithm[hash_name], int(digits)


def _parse_data_input(data_input: str) -> Dict:
    tokens: List[str] = data_input.split("-")
    if not tokens[0]:
        raise errors.MissingFirstDataInput(
            "Data input has missing first argument, pattern is: " + DATA_INPUT_PATTERN
        )

    fields: Dict = {}
    consumed = 0
    slot = _Slot.COUNTER
    while slot is not _Slot.DONE:
        token = tokens[consumed] if consumed < len(tokens) else ""
        matched = token[:1] == slot.value

        if slot is _Slot.CHALLENGE and not matched:
            if not token:
                raise errors.EmptyChallengeDataInput(
                    "Data input has empty challenge argument, pattern is: " + DATA_INPUT_PATTERN
                )
            raise errors.MissingChallengeDataInput(
                "Data input has missing challenge data 'QFxx', pattern is: " + DATA_INPUT_PATTERN
            )

        if matched:
            _SLOT_PARSERS[slot](token[1:], fields)
            consumed += 1
        slot = _NEXT_SLOT[slot]

    if consumed != len(tokens):
        # Duplicated and out-of-order tokens land here as well: the walk
        # never revisits a slot.
        raise errors.UnexpectedTrailingDataInput(
            "Unsupported data input format, unexpected parameters left, pattern is: " + DATA_INPUT_PATTERN
        )
    return fields


def _parse_counter(payload: str, fields: Dict) -> None:
    if payload:
        raise errors.InvalidCounterDescriptor("Counter data input takes no value, pattern is: C")
    fields["counter"] = True


def _parse_challenge(payload: str, fields: Dict) -> None:
    if len(payload) != 3:
        raise errors.InvalidChallengeDescriptor(
            "Challenge data 'QFxx' has wrong number of values, pattern is: Q[A|N|H][04-64]"
        )
    fmt, length = payload[0], payload[1:]

    if fmt not in [f.value for f in ChallengeFormat]:
        raise errors.InvalidChallengeFormat(
            "Challenge data 'QFxx' has unrecognized format 'F', pattern is: Q[A|N|H][04-64]"
        )
    if not is_decimal(length) or not MIN_CHALLENGE_LENGTH <= int(length) <= MAX_CHALLENGE_LENGTH:
        raise errors.InvalidChallengeLength(
            "Challenge data 'QFxx' length 'xx' is out of bound, pattern is: Q[A|N|H][04-64]"
        )
    fields["challenge"] = Challenge(ChallengeFormat(fmt), int(length))


def _parse_password(payload: str, fields: Dict) -> None:
    if payload not in HashAlgorithm.__members__:
        raise errors.UnsupportedPasswordHash(
            "Password descriptor 'PH' hash must be SHA1, SHA256 or SHA512, pattern is: PSHA[1|256|512]"
        )
    fields["password_hash"] = HashAlgorithm[payload]


def _parse_session(payload: str, fields: Dict) -> None:
    if len(payload) != 3 or not is_decimal(payload):
        raise errors.InvalidSessionDescriptor("Invalid session data 'Snnn', pattern is: S[001-512]")

    length = int(payload)
    if not 1 <= length <= MAX_SESSION_LENGTH:
        raise errors.InvalidSessionLength("Session data 'Snnn' value 'nnn' is out of bound, pattern is: S[001-512]")
    fields["session_length"] = length


def _parse_timestamp(payload: str, fields: Dict) -> None:
    magnitude, unit = payload[:-1], payload[-1:]
    if not 1 <= len(magnitude) <= 2 or not is_decimal(magnitude):
        raise errors.InvalidTimestampDescriptor(
            "Invalid timestamp data 'TG', pattern is: T[[1-59][S|M] | [0-48]H]"
        )
    if unit not in [u.value for u in TimeUnit]:
        raise errors.InvalidTimestampStep(
            "Timestamp data 'TG' time-step must be S, M or H, pattern is: T[[1-59][S|M] | [0-48]H]"
        )

    step = TimeUnit(unit)
    value = int(magnitude)
    low, high = (0, 48) if step is TimeUnit.HOURS else (1, 59)
    # "05M" would not render back to itself
    if not low <= value <= high or str(value) != magnitude:
        raise errors.InvalidTimestampValue(
            "Timestamp data 'TG' value 'G' is out of bound, pattern is: T[[1-59][S|M] | [0-48]H]"
        )
    fields["timestamp"] = TimestampStep(step, value)


_SLOT_PARSERS = {
    _Slot.COUNTER: _parse_counter,
    _Slot.CHALLENGE: _parse_challenge,
    _Slot.PASSWORD: _parse_password,
    _Slot.SESSION: _parse_session,
    _Slot.TIMESTAMP: _parse_timestamp,
}
