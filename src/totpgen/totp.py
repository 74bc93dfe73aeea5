import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from . import utils
from .exceptions import ConfigError
from .hotp import compute_hotp

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30
DEFAULT_EPOCH = 0
DEFAULT_DIGITS = 6


def _now() -> int:
    return int(time.time())


def timecode(timestamp: int, interval: int = DEFAULT_INTERVAL, epoch: int = DEFAULT_EPOCH) -> int:
    """
    Maps a Unix timestamp to the HOTP counter for its time step.

    Floor division is used, so timestamps before ``epoch`` give a negative
    step; that step is reinterpreted as an unsigned 64-bit integer
    (two's complement), e.g. one second before the epoch is 2**64 - 1.

    :param timestamp: seconds since the Unix epoch
    :param interval: seconds per step
    :param epoch: Unix time at which step 0 starts
    :raises ConfigError: if interval <= 0
    """
    utils.validate_interval(interval)
    return ((timestamp - epoch) // interval) & utils.MAX_COUNTER


def compute_totp(
    secret: Union[bytes, bytearray],
    timestamp: Optional[int] = None,
    interval: int = DEFAULT_INTERVAL,
    epoch: int = DEFAULT_EPOCH,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """
    Generates the TOTP code for a point in time.

    :param secret: raw key bytes, see :func:`totpgen.base32.decode`
    :param timestamp: seconds since the Unix epoch, defaults to now
    :param interval: the time step in seconds
    :param epoch: Unix time from which steps are counted
    :param digits: code length
    :returns: OTP
    :raises ConfigError: if interval <= 0 or digits < 1
    """
    utils.validate_digits(digits)
    if timestamp is None:
        timestamp = _now()
    counter = timecode(timestamp, interval, epoch)
    if timestamp < epoch:
        logger.debug("timestamp %d precedes epoch %d, counter wrapped to %d", timestamp, epoch, counter)
    return compute_hotp(secret, counter, digits)


def verify_totp(
    secret: Union[bytes, bytearray],
    otp: str,
    timestamp: Optional[int] = None,
    interval: int = DEFAULT_INTERVAL,
    epoch: int = DEFAULT_EPOCH,
    digits: int = DEFAULT_DIGITS,
    valid_window: int = 0,
) -> bool:
    """
    Verifies the OTP passed in against the current time OTP.

    :param otp: the OTP to check against
    :param timestamp: time to check OTP at (defaults to now)
    :param valid_window: extends the validity to this many steps before and after the current one
    :returns: True if verification succeeded, False otherwise
    :raises ConfigError: if interval <= 0, digits < 1 or valid_window < 0
    """
    utils.validate_interval(interval)
    utils.validate_digits(digits)
    if valid_window < 0:
        raise ConfigError("valid_window must not be negative, got {}".format(valid_window))
    if timestamp is None:
        timestamp = _now()
    for i in range(-valid_window, valid_window + 1):
        candidate = compute_totp(secret, timestamp + i * interval, interval, epoch, digits)
        if utils.strings_equal(str(otp), candidate):
            return True
    return False


def time_remaining(timestamp: Optional[int] = None, interval: int = DEFAULT_INTERVAL, epoch: int = DEFAULT_EPOCH) -> int:
    """
    Seconds until the code for ``timestamp`` rotates, between 1 and interval.
    """
    utils.validate_interval(interval)
    if timestamp is None:
        timestamp = _now()
    return interval - (timestamp - epoch) % interval


@dataclass(frozen=True)
class TotpParameters:
    """
    TOTP configuration: seconds per step, Unix time of step 0 and code length.
    """

    interval: int = DEFAULT_INTERVAL
    epoch: int = DEFAULT_EPOCH
    digits: int = DEFAULT_DIGITS

    def __post_init__(self) -> None:
        utils.validate_interval(self.interval)
        utils.validate_digits(self.digits)

    def at(self, secret: Union[bytes, bytearray], timestamp: Optional[int] = None) -> str:
        return compute_totp(secret, timestamp, self.interval, self.epoch, self.digits)
