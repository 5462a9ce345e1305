from . import utils
from .otp import OTP, generate_otp


def hotp(key: bytes, counter: int, digits: int = 6) -> str:
    """
    Computes the RFC 4226 HOTP value for a counter.

    >>> hotp(b"12345678901234567890", 1)
    '287082'

    :param key: raw secret bytes
    :param counter: HMAC counter, 0 <= counter < 2**64
    :param digits: length of the code, 1 to 9
    :returns: the code as a zero-padded string
    """
    return generate_otp(key, counter, digits)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(self, key: bytes, digits: int = 6, initial_count: int = 0) -> None:
        """
        :param key: raw secret bytes
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self._initial_count = initial_count
        super().__init__(key=key, digits=digits)

    @property
    def initial_count(self) -> int:
        return self._initial_count

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return hotp(self.key, self._initial_count + count, self.digits)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the OTP for exactly this counter.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.strings_equal(str(otp), self.at(counter))
