from .base32 import decode as decode_base32
from .base32 import encode as encode_base32
from .base32 import scoped_secret as scoped_secret
from .exceptions import ConfigError as ConfigError
from .exceptions import DecodeError as DecodeError
from .exceptions import OTPError as OTPError
from .hotp import compute_hotp as compute_hotp
from .hotp import verify_hotp as verify_hotp
from .totp import TotpParameters as TotpParameters
from .totp import compute_totp as compute_totp
from .totp import time_remaining as time_remaining
from .totp import timecode as timecode
from .totp import verify_totp as verify_totp

__version__ = "1.0.0"
