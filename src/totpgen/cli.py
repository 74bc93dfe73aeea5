import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .base32 import scoped_secret
from .exceptions import OTPError
from .totp import DEFAULT_DIGITS, DEFAULT_EPOCH, DEFAULT_INTERVAL, compute_totp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totpgen",
        description="Print the TOTP code for a base32 secret.",
        epilog="usage reading from stdin: echo <base32 secret> | totpgen",
    )
    parser.add_argument("secret", nargs="?", help="Base32-encoded secret; read from stdin when omitted")
    parser.add_argument("-i", "--interval", type=int, default=DEFAULT_INTERVAL, help="seconds per time step (default: %(default)s)")
    parser.add_argument("-e", "--epoch", type=int, default=DEFAULT_EPOCH, help="Unix time of step 0 (default: %(default)s)")
    parser.add_argument("-d", "--digits", type=int, default=DEFAULT_DIGITS, help="code length (default: %(default)s)")
    parser.add_argument("-t", "--time", dest="timestamp", type=int, default=None, help="seconds since the Unix epoch (default: now)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def read_secret(stream: TextIO) -> str:
    # One line only, like a terminal prompt or `echo SECRET |`
    return stream.readline().strip()


def _error(message: str) -> int:
    print("error: {}, try --help".format(message), file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.WARNING)

    secret = args.secret
    if secret is None:
        try:
            secret = read_secret(sys.stdin)
        except (OSError, UnicodeDecodeError):
            logger.debug("failed to read secret from stdin", exc_info=True)
            return _error("error reading stdin")

    try:
        with scoped_secret(secret) as key:
            code = compute_totp(key, args.timestamp, args.interval, args.epoch, args.digits)
    except OTPError as e:
        return _error(str(e))

    print(code)
    return 0
