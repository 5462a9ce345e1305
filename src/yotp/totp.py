import datetime
import time
from typing import Optional, Union

from . import utils
from .errors import InvalidTimeStep
from .hotp import hotp
from .otp import OTP

DEFAULT_TIME_STEP = 30
DEFAULT_EPOCH = 0

TimeLike = Union[int, datetime.datetime]


def timecode(current_time: TimeLike, epoch: int = DEFAULT_EPOCH, time_step: int = DEFAULT_TIME_STEP) -> int:
    """
    Number of whole time-steps between ``epoch`` and ``current_time``.

    Uses floor division, so one second before the epoch is step -1, not 0.

    :param current_time: unix time in seconds, or a datetime
    :param epoch: unix time at which counting starts (T0 in RFC 6238)
    :param time_step: length of a step in seconds (X in RFC 6238)
    """
    if time_step <= 0:
        raise InvalidTimeStep("time_step must be a positive integer, got {}".format(time_step))
    return (utils.to_unix_time(current_time) - epoch) // time_step


def totp(
    key: bytes,
    current_time: TimeLike,
    epoch: int = DEFAULT_EPOCH,
    time_step: int = DEFAULT_TIME_STEP,
    digits: int = 6,
) -> str:
    """
    Computes the RFC 6238 TOTP value at a given time.

    >>> totp(b"12345678901234567890", 59, digits=8)
    '94287082'
    """
    return hotp(key, timecode(current_time, epoch, time_step), digits)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        key: bytes,
        digits: int = 6,
        interval: int = DEFAULT_TIME_STEP,
        epoch: int = DEFAULT_EPOCH,
    ) -> None:
        """
        :param key: raw secret bytes
        :param digits: number of integers in the OTP
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param epoch: unix time the intervals are counted from
        """
        if interval <= 0:
            raise InvalidTimeStep("interval must be a positive integer, got {}".format(interval))
        self._interval = interval
        self._epoch = epoch
        super().__init__(key=key, digits=digits)

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def epoch(self) -> int:
        return self._epoch

    def timecode(self, for_time: TimeLike) -> int:
        return timecode(for_time, self._epoch, self._interval)

    def at(self, for_time: TimeLike, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return hotp(self.key, self.timecode(for_time) + counter_offset, self.digits)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(int(time.time()))

    def verify(self, otp: str, for_time: Optional[TimeLike] = None) -> bool:
        """
        Verifies the OTP passed in against the time-step containing ``for_time``.

        Only that one step is checked; codes from neighbouring steps fail.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = int(time.time())
        return utils.strings_equal(str(otp), self.at(for_time))

    def remaining(self, for_time: Optional[TimeLike] = None) -> int:
        """
        Seconds left before the code for ``for_time`` is replaced by the next one.
        """
        if for_time is None:
            for_time = int(time.time())
        return self._interval - (utils.to_unix_time(for_time) - self._epoch) % self._interval
