import base64
import binascii
import enum
from typing import Dict, Union

from .errors import InvalidFormat, InvalidKey


class SecretFormat(enum.Enum):
    HEX = "hex"
    BASE32 = "base32"


BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# 0 and 1 are easily mistyped for O and I, as is a lowercase l for I
BASE32_ALIASES = {"0": "O", "1": "I", "l": "I"}

_BASE32_VALUES: Dict[str, int] = {char: value for value, char in enumerate(BASE32_ALPHABET)}
_BASE32_VALUES.update({alias: _BASE32_VALUES[char] for alias, char in BASE32_ALIASES.items()})

HEX_DIGITS = "0123456789abcdefABCDEF"


def decode_hex(text: str) -> bytes:
    """
    Decodes a hexadecimal secret into key bytes.

    :param text: an even number of hex digits, in either case
    :returns: the key, one byte per pair of digits
    """
    if not text:
        raise InvalidKey("secret is empty")
    if len(text) % 2 != 0:
        raise InvalidFormat("hex secret must have an even number of digits")
    try:
        return base64.b16decode(text, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidFormat("invalid hex secret: {}".format(e)) from e


def decode_base32(text: str) -> bytes:
    """
    Decodes a Base32 secret into key bytes.

    Unlike :func:`base64.b32decode` this accepts any number of symbols and
    does not expect ``=`` padding. Every symbol contributes 5 bits, most
    significant bit first; bits left over after the last full byte are dropped,
    so the result is ``len(text) * 5 // 8`` bytes long.

    :param text: Base32 symbols (A-Z, 2-7, plus the aliases 0, 1 and l)
    :returns: the key
    """
    if not text:
        raise InvalidKey("secret is empty")

    result = bytearray()
    buffer = 0
    bits = 0
    for char in text:
        try:
            value = _BASE32_VALUES[char]
        except KeyError:
            raise InvalidFormat("invalid base32 character {!r}".format(char)) from None
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append(buffer >> bits)
            buffer &= (1 << bits) - 1

    if not result:
        raise InvalidKey("base32 secret is too short to hold a single byte")
    return bytes(result)


def decode_secret(text: str, fmt: Union[SecretFormat, str]) -> bytes:
    """
    Decodes a text secret using an explicitly chosen format.

    :param text: the secret as typed by the user
    :param fmt: :class:`SecretFormat` member, or its value ("hex" / "base32")
    :returns: the key
    """
    try:
        fmt = SecretFormat(fmt)
    except ValueError:
        raise InvalidFormat("unknown secret format {!r}".format(fmt)) from None

    if fmt is SecretFormat.HEX:
        return decode_hex(text)
    return decode_base32(text)


def guess_format(text: str) -> SecretFormat:
    """
    Picks a format from the characters of a secret.

    Even-length strings made only of hex digits are taken as hex, even when
    they would also decode as Base32 (e.g. "ABCD2345"). Callers that know the
    format should pass it to :func:`decode_secret` instead.
    """
    if not text:
        raise InvalidKey("secret is empty")
    if len(text) % 2 == 0 and all(char in HEX_DIGITS for char in text):
        return SecretFormat.HEX
    if all(char in _BASE32_VALUES for char in text):
        return SecretFormat.BASE32
    raise InvalidFormat("secret is neither hex nor base32")
