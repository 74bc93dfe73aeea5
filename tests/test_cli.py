import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from totpgen.cli import build_parser, main, read_secret

RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def run(argv, stdin=""):
    stdout = io.StringIO()
    stderr = io.StringIO()
    with mock.patch("sys.stdin", io.StringIO(stdin)), redirect_stdout(stdout), redirect_stderr(stderr):
        status = main(argv)
    return status, stdout.getvalue(), stderr.getvalue()


class ParserTest(unittest.TestCase):
    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.secret)
        self.assertEqual(args.interval, 30)
        self.assertEqual(args.epoch, 0)
        self.assertEqual(args.digits, 6)
        self.assertIsNone(args.timestamp)
        self.assertFalse(args.verbose)

    def test_short_options(self):
        args = build_parser().parse_args(["-i", "60", "-e", "-5", "-d", "8", "-t", "100", RFC_SECRET])
        self.assertEqual((args.interval, args.epoch, args.digits, args.timestamp), (60, -5, 8, 100))
        self.assertEqual(args.secret, RFC_SECRET)


class ReadSecretTest(unittest.TestCase):
    def test_reads_single_stripped_line(self):
        self.assertEqual(read_secret(io.StringIO("  JBSWY3DP\nSECOND\n")), "JBSWY3DP")


class MainTest(unittest.TestCase):
    def test_secret_argument(self):
        status, out, err = run(["--time", "59", RFC_SECRET])
        self.assertEqual((status, out, err), (0, "287082\n", ""))

    def test_secret_from_stdin(self):
        status, out, err = run(["--time", "1111111109", "--digits", "8"], stdin=RFC_SECRET + "\n")
        self.assertEqual((status, out), (0, "07081804\n"))

    def test_lowercase_unpadded_secret(self):
        status, out, _ = run(["-t", "59", RFC_SECRET.lower()])
        self.assertEqual((status, out), (0, "287082\n"))

    def test_interval_and_epoch(self):
        # (1059 - 1000) // 60 == 0
        status, out, _ = run(["-t", "1059", "-e", "1000", "-i", "60", RFC_SECRET])
        self.assertEqual((status, out), (0, "755224\n"))

    def test_defaults_to_now(self):
        with mock.patch("totpgen.totp._now", return_value=59):
            status, out, _ = run([RFC_SECRET])
        self.assertEqual((status, out), (0, "287082\n"))

    def test_invalid_secret(self):
        status, out, err = run(["-t", "59", "not-base32"])
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("error: invalid base32 character"))
        self.assertTrue(err.endswith(", try --help\n"))

    def test_invalid_interval(self):
        status, out, err = run(["-t", "59", "-i", "0", RFC_SECRET])
        self.assertEqual((status, out), (1, ""))
        self.assertIn("interval", err)

    def test_invalid_digits(self):
        status, out, err = run(["-t", "59", "-d", "0", RFC_SECRET])
        self.assertEqual((status, out), (1, ""))
        self.assertIn("digits", err)

    def test_stdin_read_failure(self):
        stdin = mock.Mock()
        stdin.readline.side_effect = OSError("broken pipe")
        stderr = io.StringIO()
        stdout = io.StringIO()
        with mock.patch("sys.stdin", stdin), redirect_stdout(stdout), redirect_stderr(stderr):
            status = main([])
        self.assertEqual(status, 1)
        self.assertEqual(stdout.getvalue(), "")
        self.assertEqual(stderr.getvalue(), "error: error reading stdin, try --help\n")

    def test_non_integer_option(self):
        with self.assertRaises(SystemExit) as cm:
            run(["--digits", "six", RFC_SECRET])
        self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
