import string
from secrets import SystemRandom
from typing import Union

from . import errors as errors
from .message import OCRAParameters as OCRAParameters
from .message import build_message as build_message
from .ocra import OCRA as OCRA
from .otp import truncate as truncate
from .suite import ChallengeFormat
from .suite import HashAlgorithm as HashAlgorithm
from .suite import OCRASuite as OCRASuite
from .suite import parse as parse

random = SystemRandom()

_CHALLENGE_ALPHABETS = {
    ChallengeFormat.ALPHANUMERIC: string.ascii_letters + string.digits,
    ChallengeFormat.NUMERIC: string.digits,
    ChallengeFormat.HEX: "0123456789ABCDEF",
}


def random_challenge(suite: Union[str, OCRASuite]) -> str:
    """
    Generates a random challenge of the suite's format and maximum length,
    as a server would send it to a token.

    :param suite: OCRASuite string or parsed suite
    :returns: challenge string
    """
    if not isinstance(suite, OCRASuite):
        suite = parse(suite)
    chars = _CHALLENGE_ALPHABETS[suite.challenge.format]
    return "".join(random.choice(chars) for _ in range(suite.challenge.length))
