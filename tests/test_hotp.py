import hashlib
import hmac

import pytest

from yotp import HOTP, hotp
from yotp.counter import int_to_bytestring
from yotp.errors import InvalidDigits, InvalidKey, InvalidLength, OTPError
from yotp.otp import truncate

RFC4226_KEY = b"12345678901234567890"

# RFC 4226 Appendix D
RFC4226_CODES = ["755224", "287082", "359152", "969429", "338314", "254676", "287922", "162583", "399871", "520489"]
RFC4226_TRUNCATED = [
    1284755224,
    1094287082,
    137359152,
    1726969429,
    1640338314,
    868254676,
    1918287922,
    82162583,
    673399871,
    645520489,
]


@pytest.mark.parametrize("counter,expected", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(counter, expected):
    assert hotp(RFC4226_KEY, counter, 6) == expected


@pytest.mark.parametrize("counter,expected", list(enumerate(RFC4226_TRUNCATED)))
def test_rfc4226_truncated_values(counter, expected):
    digest = hmac.new(RFC4226_KEY, int_to_bytestring(counter), hashlib.sha1).digest()
    assert truncate(digest) == expected


def test_truncate_rfc4226_example():
    # section 5.4: offset 0xa selects 50ef7f19
    digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
    assert truncate(digest) == 0x50EF7F19


@pytest.mark.parametrize("fill", [0x00, 0x7F, 0x80, 0xFF])
def test_truncate_masks_top_bit(fill):
    value = truncate(bytes([fill]) * 20)
    assert 0 <= value <= 2**31 - 1
    assert value == (fill & 0x7F) << 24 | fill << 16 | fill << 8 | fill


def test_truncate_short_digest():
    with pytest.raises(InvalidLength):
        truncate(b"\x00" * 19)


def test_digit_widths():
    assert hotp(RFC4226_KEY, 0, 9) == "284755224"
    assert hotp(RFC4226_KEY, 0, 8) == "84755224"
    assert hotp(RFC4226_KEY, 0, 1) == "4"
    # 82162583 needs a leading zero at 9 digits
    assert hotp(RFC4226_KEY, 7, 9) == "082162583"


@pytest.mark.parametrize("digits", [0, 10, -1])
def test_invalid_digits(digits):
    with pytest.raises(InvalidDigits):
        hotp(RFC4226_KEY, 0, digits)


def test_empty_key():
    with pytest.raises(InvalidKey):
        hotp(b"", 0)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        hotp(RFC4226_KEY, 0, 10)
    assert issubclass(InvalidKey, OTPError)


def test_hotp_object():
    handler = HOTP(RFC4226_KEY)
    assert handler.digits == 6
    assert [handler.at(i) for i in range(10)] == RFC4226_CODES


def test_hotp_initial_count():
    handler = HOTP(RFC4226_KEY, initial_count=5)
    assert handler.at(0) == RFC4226_CODES[5]
    assert handler.at(4) == RFC4226_CODES[9]


def test_hotp_verify():
    handler = HOTP(RFC4226_KEY)
    assert handler.verify("755224", 0)
    assert handler.verify(287082, 1)
    assert not handler.verify("755224", 1)
    assert not handler.verify("000000", 0)


def test_hotp_from_secret_formats_agree():
    from_hex = HOTP.from_secret("3132333435363738393031323334353637383930", "hex")
    from_base32 = HOTP.from_secret("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ")
    assert from_hex.key == from_base32.key == RFC4226_KEY
    assert from_hex.at(3) == from_base32.at(3) == "969429"


def test_hotp_is_read_only():
    handler = HOTP(RFC4226_KEY)
    with pytest.raises(AttributeError):
        handler.digits = 8
    with pytest.raises(AttributeError):
        handler.key = b"other"


def test_hotp_constructor_validates():
    with pytest.raises(InvalidKey):
        HOTP(b"")
    with pytest.raises(InvalidDigits):
        HOTP(RFC4226_KEY, digits=10)


def test_repr_hides_key():
    assert "1234" not in repr(HOTP(RFC4226_KEY))
