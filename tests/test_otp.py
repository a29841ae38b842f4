import pytest

from pyocra import errors
from pyocra.otp import truncate
from pyocra.suite import HashAlgorithm

DIGEST = bytes.fromhex("4347d0f8ba661234a8eadc005e2e1d1b646c9682")


def test_truncate_vector():
    # offset 2 -> 0x50f8ba66
    assert truncate(DIGEST, 6, HashAlgorithm.SHA1) == "477926"


def test_truncate_rfc4226_example():
    digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
    assert truncate(digest, 6, HashAlgorithm.SHA1) == "872921"


def test_truncate_without_digits():
    assert truncate(DIGEST, 0, HashAlgorithm.SHA1) == "1358477926"


def test_truncate_ten_digits():
    assert truncate(DIGEST, 10, HashAlgorithm.SHA1) == "1358477926"


def test_truncate_pads_with_zeros():
    # offset 0 -> 0x00000007
    digest = b"\x00\x00\x00\x07" + bytes(16)
    assert truncate(digest, 8, HashAlgorithm.SHA1) == "00000007"
    assert truncate(digest, 0, HashAlgorithm.SHA1) == "7"


def test_truncate_masks_high_bit():
    digest = b"\xff\xff\xff\xff" + bytes(16)
    assert truncate(digest, 0, HashAlgorithm.SHA1) == str(0x7FFFFFFF)


@pytest.mark.parametrize(
    "algorithm, size",
    [(HashAlgorithm.SHA1, 32), (HashAlgorithm.SHA256, 20), (HashAlgorithm.SHA512, 63), (HashAlgorithm.SHA1, 0)],
)
def test_truncate_digest_length(algorithm, size):
    with pytest.raises(errors.InvalidDigestLength):
        truncate(bytes(size), 6, algorithm)


def test_digest_length_is_not_a_value_error():
    with pytest.raises(errors.CollaboratorError) as excinfo:
        truncate(bytes(5), 6, HashAlgorithm.SHA1)
    assert not isinstance(excinfo.value, ValueError)
