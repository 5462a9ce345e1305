from .errors import InvalidLength

COUNTER_SIZE = 8


def int_to_bytestring(i: int, padding: int = COUNTER_SIZE) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret

    Negative values are written in two's complement, so a TOTP counter
    from before the epoch still maps to 8 bytes.
    """
    bits = padding * 8
    if not -(1 << (bits - 1)) <= i < (1 << bits):
        raise InvalidLength("counter {} does not fit in {} bytes".format(i, padding))
    i &= (1 << bits) - 1

    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    # bytes come out least significant first
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def bytestring_to_int(data: bytes, padding: int = COUNTER_SIZE) -> int:
    """
    Reads a big-endian counter back from its bytestring.

    :param data: exactly ``padding`` bytes
    :returns: the unsigned counter value
    """
    if len(data) != padding:
        raise InvalidLength("counter must be {} bytes, got {}".format(padding, len(data)))
    result = 0
    for byte in bytearray(data):
        result = (result << 8) | byte
    return result
