from .counter import bytestring_to_int as bytestring_to_int
from .counter import int_to_bytestring as int_to_bytestring
from .encoding import SecretFormat as SecretFormat
from .encoding import decode_base32 as decode_base32
from .encoding import decode_hex as decode_hex
from .encoding import decode_secret as decode_secret
from .errors import InvalidDigits as InvalidDigits
from .errors import InvalidFormat as InvalidFormat
from .errors import InvalidKey as InvalidKey
from .errors import InvalidLength as InvalidLength
from .errors import InvalidTimeStep as InvalidTimeStep
from .errors import OTPError as OTPError
from .hotp import HOTP as HOTP
from .hotp import hotp as hotp
from .otp import OTP as OTP
from .otp import truncate as truncate
from .totp import TOTP as TOTP
from .totp import timecode as timecode
from .totp import totp as totp

__version__ = "0.1.0"
