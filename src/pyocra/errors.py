class OCRAError(Exception):
    """
    Base class for every error raised by pyocra.
    """


class SuiteError(OCRAError, ValueError):
    """
    The suite string does not follow the RFC 6287 OCRASuite grammar.
    """


class ParameterError(OCRAError, ValueError):
    """
    A value the suite requires is missing or out of range.
    """


class EncodingError(OCRAError, ValueError):
    """
    A parameter is present but not encoded the way the suite expects.
    """


class CollaboratorError(OCRAError, RuntimeError):
    """
    An injected hash or HMAC function broke its contract.

    Not a ValueError: the caller's arguments were fine, the configured
    sha_hash or hmac_digest function is not.
    """


# Suite grammar


class InvalidSuiteShape(SuiteError):
    pass


class UnsupportedVersion(SuiteError):
    pass


class InvalidCryptoFunction(SuiteError):
    pass


class UnsupportedHmacAlgorithm(SuiteError):
    pass


class UnsupportedHashFunction(SuiteError):
    pass


class InvalidDigitCount(SuiteError):
    pass


class MissingFirstDataInput(SuiteError):
    pass


class InvalidCounterDescriptor(SuiteError):
    pass


class EmptyChallengeDataInput(SuiteError):
    pass


class MissingChallengeDataInput(SuiteError):
    pass


class InvalidChallengeDescriptor(SuiteError):
    pass


class InvalidChallengeFormat(SuiteError):
    pass


class InvalidChallengeLength(SuiteError):
    pass


class UnsupportedPasswordHash(SuiteError):
    pass


class InvalidSessionDescriptor(SuiteError):
    pass


class InvalidSessionLength(SuiteError):
    pass


class InvalidTimestampDescriptor(SuiteError):
    pass


class InvalidTimestampStep(SuiteError):
    pass


class InvalidTimestampValue(SuiteError):
    pass


class UnexpectedTrailingDataInput(SuiteError):
    pass


# Generation parameters


class MissingKey(ParameterError):
    pass


class MissingCounter(ParameterError):
    pass


class InvalidCounter(ParameterError):
    pass


class MissingChallenge(ParameterError):
    pass


class ChallengeTooLong(ParameterError):
    pass


class MissingPassword(ParameterError):
    pass


class InvalidPasswordDigest(ParameterError):
    pass


class MissingSessionInfo(ParameterError):
    pass


class SessionInfoTooLong(ParameterError):
    pass


class MissingTimestamp(ParameterError):
    pass


class InvalidTimestamp(ParameterError):
    pass


# Encodings


class NonNumericChallenge(EncodingError):
    pass


class NonAsciiChallenge(EncodingError):
    pass


class InvalidHexDigit(EncodingError):
    pass


class HexValueTooLong(EncodingError):
    pass


# Collaborators


class PasswordHashLengthMismatch(CollaboratorError):
    pass


class InvalidDigestLength(CollaboratorError):
    pass
