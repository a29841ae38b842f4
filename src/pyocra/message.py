"""
Assembly of the OCRA DataInput message (RFC 6287 section 5.1).
"""

from dataclasses import dataclass
from typing import Optional

from . import errors, utils
from .suite import (
    COUNTER_LENGTH,
    QUESTION_LENGTH,
    TIMESTAMP_LENGTH,
    ChallengeFormat,
    OCRASuite,
)

MAX_UINT64 = 2**64 - 1


@dataclass(frozen=True)
class OCRAParameters:
    """
    Per-call inputs to OCRA generation.

    Which of the optional values are required is decided by the suite.
    ``password_digest`` is an already hashed password and takes the place
    of ``password`` when given.
    """

    key: bytes
    challenge: Optional[str] = None
    counter: Optional[int] = None
    password: Optional[str] = None
    password_digest: Optional[bytes] = None
    session_info: Optional[str] = None
    timestamp: Optional[int] = None


def build_message(suite: OCRASuite, params: OCRAParameters, sha_hash) -> bytes:
    """
    Serializes ``params`` into the byte message that gets HMAC'ed.

    The layout and total length are fixed by the suite::

        suite string | 0x00 | counter (8) | question (128) | password hash
        | session info (Snnn) | timestamp (8)

    with the optional fields present only when the suite names them.

    :param suite: the validated suite
    :param params: the caller's values
    :param sha_hash: ``sha_hash(data, algorithm) -> bytes`` used for the password
    :returns: a message of exactly ``suite.message_length`` bytes
    """
    message = bytearray(suite.message_length)

    suite_bytes = str(suite).encode("ascii")
    message[: len(suite_bytes)] = suite_bytes
    # followed by the NUL separator, already zero
    pos = len(suite_bytes) + 1

    if suite.counter:
        if params.counter is None:
            raise errors.MissingCounter("Suite contains a counter, but no counter value was given")
        message[pos : pos + COUNTER_LENGTH] = _uint64(params.counter, errors.InvalidCounter, "counter")
        pos += COUNTER_LENGTH

    message[pos : pos + QUESTION_LENGTH] = _question(suite, params.challenge)
    pos += QUESTION_LENGTH

    if suite.password_hash:
        password = _password(suite, params, sha_hash)
        message[pos : pos + len(password)] = password
        pos += len(password)

    if suite.session_length:
        if params.session_info is None:
            raise errors.MissingSessionInfo("Suite contains session info, but no session info was given")
        try:
            session = utils.hex_to_bytes(params.session_info, suite.session_length, align_right=True)
        except errors.HexValueTooLong as e:
            raise errors.SessionInfoTooLong(str(e)) from e
        message[pos : pos + suite.session_length] = session
        pos += suite.session_length

    if suite.timestamp:
        if params.timestamp is None:
            raise errors.MissingTimestamp("Suite contains a timestamp, but no timestamp value was given")
        message[pos : pos + TIMESTAMP_LENGTH] = _uint64(params.timestamp, errors.InvalidTimestamp, "timestamp")

    return bytes(message)


def _uint64(value: int, error, name: str) -> bytes:
    if not 0 <= value <= MAX_UINT64:
        raise error("{} must be an unsigned 64 bit integer, got {}".format(name, value))
    return utils.int_to_bytestring(value)


def _question(suite: OCRASuite, challenge: Optional[str]) -> bytes:
    if challenge is None:
        raise errors.MissingChallenge("Missing parameter 'challenge'")
    if len(challenge) > suite.challenge.length:
        raise errors.ChallengeTooLong(
            "Challenge has {} characters, suite allows at most {}".format(len(challenge), suite.challenge.length)
        )

    fmt = suite.challenge.format
    if fmt is ChallengeFormat.ALPHANUMERIC:
        try:
            return challenge.encode("ascii").ljust(QUESTION_LENGTH, b"\0")
        except UnicodeEncodeError as e:
            raise errors.NonAsciiChallenge("Alphanumeric challenge must be ASCII") from e

    if fmt is ChallengeFormat.NUMERIC:
        if not utils.is_decimal(challenge):
            raise errors.NonNumericChallenge("Numeric challenge must contain only digits '0' to '9'")
        challenge = utils.decimal_to_hex(challenge)

    return utils.hex_to_bytes(challenge, QUESTION_LENGTH)


def _password(suite: OCRASuite, params: OCRAParameters, sha_hash) -> bytes:
    algorithm = suite.password_hash
    size = suite.password_length

    if params.password_digest is not None:
        if len(params.password_digest) != size:
            raise errors.InvalidPasswordDigest(
                "Password digest must be {} bytes for {}, got {}".format(
                    size, algorithm.value, len(params.password_digest)
                )
            )
        return params.password_digest

    if params.password is None:
        raise errors.MissingPassword("Suite contains a password, but no password was given")

    digest = sha_hash(params.password.encode("utf-8"), algorithm)
    if len(digest) != size:
        raise errors.PasswordHashLengthMismatch(
            "Password hashing returned {} bytes, {} needs {}; check the sha_hash function".format(
                len(digest), algorithm.value, size
            )
        )
    return digest
