import base64
from contextlib import contextmanager
from typing import Iterator, Union

from .exceptions import DecodeError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_VALUES = {char: index for index, char in enumerate(ALPHABET)}
_VALUES.update({char.lower(): index for char, index in _VALUES.items() if char.isalpha()})

# ASCII whitespace from line-oriented input, plus padding
_IGNORED = frozenset(" \t\r\n\v\f=")


def decode(text: str) -> bytes:
    """
    Decodes a Base32 secret into raw key bytes.

    ASCII whitespace and "=" padding are dropped wherever they appear and
    letters match in either case, so "jbsw y3dp", "JBSWY3DP" and "JBSWY3DP\\n"
    are the same secret. The input does not need to be a multiple of
    8 symbols; trailing bits that do not fill a byte are discarded.
    Anything else, including non-ASCII whitespace or letters, is rejected.

    :param text: the Base32 secret as typed or piped by the user
    :returns: key bytes, possibly empty
    :raises DecodeError: on a character outside A-Z and 2-7
    """
    return bytes(_decode_to_bytearray(text))


def _decode_to_bytearray(text: str) -> bytearray:
    buffer = 0
    bits = 0
    result = bytearray()
    for position, char in enumerate(text):
        if char in _IGNORED:
            continue
        value = _VALUES.get(char)
        if value is None:
            raise DecodeError("invalid base32 character {!r} at position {}".format(char, position))
        # Each symbol carries 5 bits, most significant first
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            # Keep only the bits not yet emitted
            buffer &= (1 << bits) - 1
    return result


def encode(data: Union[bytes, bytearray], padding: bool = True) -> str:
    """
    Encodes raw bytes as RFC 4648 Base32.

    :param data: the bytes to encode
    :param padding: keep the trailing "=" characters; otpauth secrets
        usually leave them off
    """
    encoded = base64.b32encode(bytes(data)).decode("ascii")
    if not padding:
        encoded = encoded.rstrip("=")
    return encoded


@contextmanager
def scoped_secret(text: str) -> Iterator[bytearray]:
    """
    Decodes ``text`` and yields the key as a bytearray that is overwritten
    with zeros once the block exits.

        with scoped_secret("JBSWY3DPEHPK3PXP") as key:
            code = compute_totp(key)
    """
    key = _decode_to_bytearray(text)
    try:
        yield key
    finally:
        for i in range(len(key)):
            key[i] = 0
