from .errors import InvalidDigestLength
from .suite import HashAlgorithm


def truncate(digest: bytes, digits: int, algorithm: HashAlgorithm) -> str:
    """
    Dynamic truncation of an HMAC digest into a decimal OTP (RFC 4226 5.3).

    :param digest: the HMAC result; must be exactly ``algorithm.digest_size`` bytes
    :param digits: OTP length, or 0 for the untruncated 31 bit value
    :param algorithm: the suite's HMAC hash
    :raises InvalidDigestLength: if the HMAC function returned the wrong size
    """
    if len(digest) != algorithm.digest_size:
        raise InvalidDigestLength(
            "HMAC returned {} bytes, HOTP-{} needs {}; check the hmac_digest function".format(
                len(digest), algorithm.value, algorithm.digest_size
            )
        )

    offset = digest[-1] & 0xF
    code = (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )
    if digits == 0:
        return str(code)

    # the leading 1 keeps the zero padding when sliced off
    str_code = str(10_000_000_000 + (code % 10**digits))
    return str_code[-digits:]
