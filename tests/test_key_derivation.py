import os
import sys
import base64
import unittest
from unittest import mock

# Ensure the repo root is importable when running tests from a checkout
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from text_crypto import derive_key, MAX_STRETCH_ROUNDS  # noqa: E402
from text_crypto_errors import EmptyKeyError, KeyDerivationError  # noqa: E402


class KeyDerivationTests(unittest.TestCase):
    def test_short_password_is_stretched_with_base64(self):
        # 13 -> 20 -> 28 -> 40 bytes, then cut to 32
        expected = base64.b64encode(base64.b64encode(base64.b64encode(b"correct horse")))[:32]
        self.assertEqual(derive_key("correct horse", 32), expected)

    def test_length_invariant(self):
        passwords = ["a", "pw", "correct horse", "x" * 16, "y" * 32, "z" * 100, "пароль", "🔑"]
        for pw in passwords:
            for length in (1, 8, 16, 24, 32, 64, 200):
                with self.subTest(password=pw, length=length):
                    self.assertEqual(len(derive_key(pw, length)), length)

    def test_exact_length_is_unchanged(self):
        self.assertEqual(derive_key("0123456789abcdef", 16), b"0123456789abcdef")

    def test_long_password_is_truncated(self):
        pw = "p" * 40
        self.assertEqual(derive_key(pw, 32), b"p" * 32)

    def test_uses_utf8_byte_length(self):
        # six Cyrillic letters are 12 UTF-8 bytes, one base64 round gives 16
        self.assertEqual(derive_key("пароль", 16), base64.b64encode("пароль".encode("utf-8")))

    def test_deterministic(self):
        self.assertEqual(derive_key("same", 32), derive_key("same", 32))
        self.assertNotEqual(derive_key("same", 32), derive_key("other", 32))

    def test_empty_password(self):
        with self.assertRaises(EmptyKeyError) as ctx:
            derive_key("", 32)
        self.assertEqual(ctx.exception.code, 99)

    def test_non_positive_length(self):
        with self.assertRaises(ValueError):
            derive_key("pw", 0)
        with self.assertRaises(ValueError):
            derive_key("pw", -4)

    def test_stretch_rounds_are_bounded(self):
        self.assertGreater(MAX_STRETCH_ROUNDS, 0)
        # 1 -> 4 -> 8 -> 12 bytes after three rounds
        with mock.patch("text_crypto.MAX_STRETCH_ROUNDS", 3):
            with self.assertRaises(KeyDerivationError):
                derive_key("a", 64)
            self.assertEqual(len(derive_key("a", 12)), 12)


if __name__ == "__main__":
    unittest.main(verbosity=2)
