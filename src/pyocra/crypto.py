"""
Default hash and HMAC collaborators backed by hashlib.

Any callable with the same signature can be passed to :class:`pyocra.OCRA`
instead, e.g. one delegating to an HSM.
"""

import hashlib
import hmac
from typing import Callable

from .suite import HashAlgorithm

ShaHash = Callable[[bytes, HashAlgorithm], bytes]
HmacDigest = Callable[[bytes, bytes, HashAlgorithm], bytes]

_HASHLIB_NAMES = {
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA512: "sha512",
}


def sha_hash(data: bytes, algorithm: HashAlgorithm) -> bytes:
    return hashlib.new(_HASHLIB_NAMES[algorithm], data).digest()


def hmac_digest(message: bytes, key: bytes, algorithm: HashAlgorithm) -> bytes:
    return hmac.new(key, message, _HASHLIB_NAMES[algorithm]).digest()
