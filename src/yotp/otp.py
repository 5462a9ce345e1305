import hashlib
import hmac
from typing import Union

from .counter import int_to_bytestring
from .encoding import SecretFormat, decode_secret
from .errors import InvalidDigits, InvalidKey, InvalidLength

DIGEST_SIZE = hashlib.sha1().digest_size
MIN_DIGITS = 1
MAX_DIGITS = 9


def truncate(hmac_hash: bytes) -> int:
    """
    Dynamic truncation from RFC 4226, section 5.3.

    The low nibble of the last byte picks an offset (0-15); the four bytes
    starting there are read big-endian with the top bit cleared.

    :param hmac_hash: HMAC-SHA1 digest
    :returns: integer in the range [0, 2**31 - 1]
    """
    if len(hmac_hash) < DIGEST_SIZE:
        raise InvalidLength("digest must be at least {} bytes, got {}".format(DIGEST_SIZE, len(hmac_hash)))
    hmac_hash = bytearray(hmac_hash)
    offset = hmac_hash[-1] & 0xF
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def check_digits(digits: int) -> int:
    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidDigits("digits must be between {} and {}, got {}".format(MIN_DIGITS, MAX_DIGITS, digits))
    return digits


def generate_otp(key: bytes, counter: int, digits: int = 6) -> str:
    """
    :param key: raw secret bytes, used as the HMAC key
    :param counter: the HMAC counter value to use as the OTP input.
        Usually either the counter, or the computed integer based on the Unix timestamp
    :param digits: length of the code, 1 to 9
    :returns: the code, left-padded with zeros
    """
    # Implements RFC 4226
    check_digits(digits)
    if not key:
        raise InvalidKey("key is empty")

    hasher = hmac.new(bytes(key), int_to_bytestring(counter), hashlib.sha1)
    code = truncate(hasher.digest())
    # adding 10**10 keeps the leading zeros once we slice off the tail
    str_code = str(10_000_000_000 + (code % 10**digits))
    return str_code[-digits:]


class OTP(object):
    """
    Base class for OTP handlers.

    Instances are immutable: the key and digit count are fixed at construction.
    """

    def __init__(self, key: bytes, digits: int = 6) -> None:
        if not key:
            raise InvalidKey("key is empty")
        self._key = bytes(key)
        self._digits = check_digits(digits)

    @classmethod
    def from_secret(cls, secret: str, fmt: Union[SecretFormat, str] = SecretFormat.BASE32, **kwargs):
        """
        Builds a handler from a text secret.

        :param secret: hex or Base32 text
        :param fmt: format of ``secret``
        :param kwargs: passed on to the constructor
        """
        return cls(decode_secret(secret, fmt), **kwargs)

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def digits(self) -> int:
        return self._digits

    def __repr__(self) -> str:
        # never show the key
        return "{}(digits={})".format(type(self).__name__, self._digits)
