import hashlib
import hmac
from typing import Union

# RFC 4226 engine: counter -> 8 bytes -> HMAC-SHA1 -> dynamic truncation -> digits
#
#   int_to_bytestring(1)  -> b"\x00\x00\x00\x00\x00\x00\x00\x01"
#   hmac(key, ...)        -> 20 byte digest
#   truncate(digest)      -> 31 bit integer
#   % 10 ** digits        -> "287082"


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    # Bytes come out least significant first; HMAC wants big-endian
    # 12345 == 0x3039 -> [0x39, 0x30] -> b"\x00\x00\x00\x00\x00\x00\x30\x39"
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def truncate(digest: Union[bytes, bytearray]) -> int:
    """
    Dynamic truncation (RFC 4226 section 5.3).

    The low nibble of the last byte picks an offset in 0-15; the four bytes
    starting there are read big-endian with the top bit cleared.
    """
    offset = digest[-1] & 0xF
    return (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )


def generate_otp(key: Union[bytes, bytearray], counter: int, digits: int) -> str:
    """
    :param key: raw secret bytes
    :param counter: the HMAC counter value, already validated
    :param digits: code length, already validated
    """
    hasher = hmac.new(key, int_to_bytestring(counter), hashlib.sha1)
    code = truncate(hasher.digest())
    return str(code % 10**digits).zfill(digits)
