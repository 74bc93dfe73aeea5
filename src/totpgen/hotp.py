import logging
from typing import Union

from . import utils
from .otp import generate_otp

logger = logging.getLogger(__name__)


def compute_hotp(secret: Union[bytes, bytearray], counter: int, digits: int = 6) -> str:
    """
    Generates the HOTP code for the given counter.

    :param secret: raw key bytes, see :func:`totpgen.base32.decode`
    :param counter: the OTP HMAC counter, 0 <= counter < 2**64
    :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        Codes longer than 10 digits are the 31-bit truncated value left-padded with zeros.
    :returns: OTP
    :raises ConfigError: if digits < 1 or counter is out of range
    """
    utils.validate_digits(digits)
    utils.validate_counter(counter)
    logger.debug("computing %d-digit HOTP for counter %d", digits, counter)
    return generate_otp(secret, counter, digits)


def verify_hotp(secret: Union[bytes, bytearray], otp: str, counter: int, digits: int = 6) -> bool:
    """
    Verifies the OTP passed in against the OTP for the counter.

    :param secret: raw key bytes
    :param otp: the OTP to check against
    :param counter: the OTP HMAC counter
    :param digits: expected code length
    """
    return utils.strings_equal(str(otp), compute_hotp(secret, counter, digits))
