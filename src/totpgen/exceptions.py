class OTPError(ValueError):
    """
    Base class for errors raised by totpgen.

    Subclasses ValueError so that callers catching ValueError around OTP
    generation keep working.
    """


class DecodeError(OTPError):
    """
    The secret text is not valid Base32.
    """


class ConfigError(OTPError):
    """
    A generation parameter (interval, digits, counter) is out of range.
    """
