class OTPError(ValueError):
    """
    Base class for every error raised while decoding a secret or computing an OTP.
    """


class InvalidFormat(OTPError):
    """The secret text is not valid for the chosen encoding."""


class InvalidKey(OTPError):
    """The decoded key is empty."""


class InvalidDigits(OTPError):
    """The requested number of digits is outside 1..9."""


class InvalidTimeStep(OTPError):
    """The TOTP time-step is not a positive integer."""


class InvalidLength(OTPError):
    """A fixed-size byte buffer has the wrong length."""
