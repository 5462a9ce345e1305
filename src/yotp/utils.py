import calendar
import datetime
import unicodedata
from hmac import compare_digest
from typing import Union


def to_unix_time(for_time: Union[int, datetime.datetime]) -> int:
    """
    Converts a datetime to whole seconds since the Unix epoch.

    Naive datetimes are taken to be UTC. Integers are returned unchanged.
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo is not None:
            for_time = for_time.astimezone(datetime.timezone.utc)
        return calendar.timegm(for_time.utctimetuple())
    return int(for_time)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
