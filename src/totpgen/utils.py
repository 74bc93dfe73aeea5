import unicodedata
from hmac import compare_digest

from .exceptions import ConfigError

MAX_COUNTER = 0xFFFFFFFFFFFFFFFF


def validate_digits(digits: int) -> None:
    # Anything above 10 digits only adds leading zeros: the truncated value is 31 bits
    if digits < 1:
        raise ConfigError("digits must be at least 1, got {}".format(digits))


def validate_interval(interval: int) -> None:
    if interval <= 0:
        raise ConfigError("interval must be a positive number of seconds, got {}".format(interval))


def validate_counter(counter: int) -> None:
    if not 0 <= counter <= MAX_COUNTER:
        raise ConfigError("counter must fit in an unsigned 64-bit integer, got {}".format(counter))


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    # "４８２１９３" (fullwidth) and "482193" compare equal after NFKC
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
