# text_crypto_errors.py
"""Exceptions raised by the text encryption helpers."""
from typing import Optional


class TextCryptoError(Exception):
    """Base error; carries a numeric `code` and a human readable `msg`."""

    code = 0

    def __init__(self, msg: str, code: Optional[int] = None):
        super().__init__(msg)
        self.msg = msg
        if code is not None:
            self.code = code

    def __str__(self):
        return self.msg


class EmptyDataError(TextCryptoError, ValueError):
    code = 98


class EmptyPasswordError(TextCryptoError, ValueError):
    code = 99


class KeyDerivationError(TextCryptoError):
    code = 97


class EmptyKeyError(KeyDerivationError):
    code = 99


class CipherPrimitiveError(TextCryptoError):
    code = 96


class MalformedInputError(TextCryptoError, ValueError):
    code = 95


class UnknownProfileError(TextCryptoError, KeyError):
    code = 94
