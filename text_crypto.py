# text_crypto.py
"""
Password based encryption of text.

    blob = encrypt_text("hello world", "correct horse")
    decrypt_text(blob, "correct horse")  # -> "hello world"

The blob is base64 of IV || ciphertext. The key is stretched from the
password with repeated base64 encoding (see `derive_key`); this is NOT a
vetted KDF such as scrypt or PBKDF2 and there is no salt, so the same
password always gives the same key.
"""
import base64
import binascii
import logging
import secrets

from cipher_profiles import DEFAULT_PROFILE, get_profile
from text_crypto_errors import (
    EmptyDataError,
    EmptyKeyError,
    EmptyPasswordError,
    KeyDerivationError,
    MalformedInputError,
)

logger = logging.getLogger(__name__)

MAX_STRETCH_ROUNDS = 64


# ---------- Key derivation ----------
def derive_key(password: str, length: int) -> bytes:
    """Stretch `password` into exactly `length` key bytes."""
    if not password:
        raise EmptyKeyError("Key cannot be empty")
    if length <= 0:
        raise ValueError("key length must be positive")
    material = password.encode("utf-8")
    rounds = 0
    while len(material) < length:
        if rounds >= MAX_STRETCH_ROUNDS:
            raise KeyDerivationError(f"key did not reach {length} bytes after {rounds} rounds")
        material = base64.b64encode(material)
        rounds += 1
    return material[:length]


def _b64decode(blob: str) -> bytes:
    try:
        return base64.b64decode(blob, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug("blob is not valid base64 (%s), treating as empty", e)
        return b""


# ---------- Encrypt / decrypt ----------
def encrypt_text(plaintext: str, password: str, profile=DEFAULT_PROFILE) -> str:
    if not plaintext:
        raise EmptyDataError("No data to encrypt")
    if not password:
        raise EmptyPasswordError("Password cannot be empty")
    profile = get_profile(profile)

    key = derive_key(password, profile.key_length)
    iv = secrets.token_bytes(profile.iv_length)
    ct = profile.encrypt(plaintext.encode("utf-8"), key, iv)
    logger.debug("encrypted %d chars with %s (%d bytes ciphertext)", len(plaintext), profile.name, len(ct))
    return base64.b64encode(iv + ct).decode("ascii")


def decrypt_text(blob: str, password: str, profile=DEFAULT_PROFILE, strict: bool = False) -> str:
    """Decrypt a blob made by `encrypt_text`.

    A blob too short to hold an IV always raises MalformedInputError.
    Otherwise, when the ciphertext does not decrypt cleanly (usually a
    wrong password) or is not UTF-8, an empty string is returned, unless
    `strict` is set, in which case MalformedInputError is raised.
    """
    if not password:
        raise EmptyPasswordError("Password cannot be empty")
    profile = get_profile(profile)

    data = _b64decode(blob or "")
    if len(data) < profile.iv_length:
        raise MalformedInputError(
            f"blob holds {len(data)} bytes, {profile.name} needs at least {profile.iv_length} for the IV"
        )
    iv = data[:profile.iv_length]
    ct = data[profile.iv_length:]

    key = derive_key(password, profile.key_length)
    try:
        pt = profile.decrypt(ct, key, iv)
        text = pt.decode("utf-8")
    except UnicodeDecodeError as e:
        if strict:
            raise MalformedInputError("decrypted data is not valid UTF-8") from e
        logger.warning("decrypted data is not valid UTF-8, returning empty text")
        return ""
    except MalformedInputError:
        if strict:
            raise
        logger.warning("ciphertext did not decrypt with %s, returning empty text", profile.name)
        return ""
    logger.debug("decrypted %d bytes ciphertext with %s", len(ct), profile.name)
    return text
