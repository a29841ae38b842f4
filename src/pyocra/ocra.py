import calendar
import datetime
import logging
import time
from typing import Any, Optional, Union

from . import crypto, utils
from .errors import InvalidHexDigit, MissingKey
from .message import OCRAParameters, build_message
from .otp import truncate
from .suite import OCRASuite, parse

log = logging.getLogger(__name__)


class OCRA(object):
    """
    Handler for OCRA challenge-response OTPs (RFC 6287).
    """

    def __init__(
        self,
        suite: Union[str, OCRASuite],
        sha_hash: Optional[crypto.ShaHash] = None,
        hmac_digest: Optional[crypto.HmacDigest] = None,
    ) -> None:
        """
        :param suite: OCRASuite string such as ``"OCRA-1:HOTP-SHA1-6:QN08"``,
            or an already parsed suite
        :param sha_hash: password hash function, defaults to hashlib
        :param hmac_digest: HMAC function, defaults to hashlib
        :raises SuiteError: if the suite string is invalid
        """
        self.suite = suite if isinstance(suite, OCRASuite) else parse(suite)
        self.sha_hash = sha_hash or crypto.sha_hash
        self.hmac_digest = hmac_digest or crypto.hmac_digest

    def generate(
        self,
        key: Union[bytes, str],
        challenge: Optional[str],
        counter: Optional[int] = None,
        password: Optional[str] = None,
        password_digest: Optional[bytes] = None,
        session_info: Optional[str] = None,
        timestamp: Optional[int] = None,
        sha_hash: Optional[crypto.ShaHash] = None,
        hmac_digest: Optional[crypto.HmacDigest] = None,
    ) -> str:
        """
        Computes the OCRA response.

        :param key: shared secret, raw bytes or a hex string
        :param challenge: the question, in the suite's challenge format
        :param counter: required if the suite has ``C``
        :param password: required if the suite has ``PSHAx`` (unless
            ``password_digest`` is given)
        :param password_digest: the password already hashed with the suite's algorithm
        :param session_info: hex string, required if the suite has ``Snnn``
        :param timestamp: time steps since the epoch, required if the
            suite has ``TG``; see :meth:`timecode`
        :param sha_hash: overrides the password hash function for this call
        :param hmac_digest: overrides the HMAC function for this call
        :returns: OTP
        """
        params = OCRAParameters(
            key=self.byte_key(key),
            challenge=challenge,
            counter=counter,
            password=password,
            password_digest=password_digest,
            session_info=session_info,
            timestamp=timestamp,
        )
        message = build_message(self.suite, params, sha_hash or self.sha_hash)
        log.debug("Built %d byte OCRA message for %s", len(message), self.suite)

        digest = (hmac_digest or self.hmac_digest)(message, params.key, self.suite.hmac_algorithm)
        return truncate(digest, self.suite.digits, self.suite.hmac_algorithm)

    def verify(self, response: str, key: Union[bytes, str], challenge: Optional[str], **kwargs: Any) -> bool:
        """
        Verifies a response against the one computed from the same inputs.

        :param response: the OTP to check
        :param key: shared secret, raw bytes or a hex string
        :param challenge: the question that was sent
        :param kwargs: the remaining :meth:`generate` arguments
        """
        return utils.strings_equal(str(response), self.generate(key, challenge, **kwargs))

    def timecode(self, for_time: Union[datetime.datetime, int, float]) -> int:
        """
        Accepts either a datetime or seconds since the epoch and returns the
        number of suite time steps elapsed, the value OCRA expects for ``T``.
        """
        if self.suite.timestamp is None:
            raise ValueError("Suite {} has no timestamp".format(self.suite))
        step = self.suite.timestamp.seconds
        if step == 0:
            raise ValueError("Suite {} has a zero length time step".format(self.suite))

        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo:
                for_time = calendar.timegm(for_time.utctimetuple())
            else:
                for_time = time.mktime(for_time.timetuple())
        return int(for_time // step)

    @staticmethod
    def byte_key(key: Union[bytes, str]) -> bytes:
        if isinstance(key, str):
            try:
                key = bytes.fromhex(key)
            except ValueError as e:
                raise InvalidHexDigit("Key must be raw bytes or a hex string") from e
        if not key:
            raise MissingKey("Missing parameter 'key', required for HMAC")
        return bytes(key)
