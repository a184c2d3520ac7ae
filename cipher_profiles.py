# cipher_profiles.py
"""
Named symmetric cipher profiles.

A profile bundles a `cryptography` algorithm and mode with the key and IV
lengths they require, and knows how to run the cipher in both directions
(adding / stripping PKCS#7 padding for block modes).
"""
from dataclasses import dataclass

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.decrepit.ciphers import algorithms as decrepit_algorithms
from cryptography.hazmat.decrepit.ciphers import modes as decrepit_modes

from text_crypto_errors import CipherPrimitiveError, MalformedInputError, UnknownProfileError


@dataclass(frozen=True)
class CipherProfile:
    name: str
    algorithm: type
    mode: type
    key_length: int
    iv_length: int
    padded: bool = False

    def __post_init__(self):
        if self.key_length <= 0:
            raise ValueError(f"{self.name}: key length must be positive")
        if self.iv_length <= 0:
            raise ValueError(f"{self.name}: IV length must be positive")

    @property
    def block_size(self) -> int:
        """Cipher block size in bits."""
        return self.algorithm.block_size

    def new_cipher(self, key: bytes, iv: bytes) -> Cipher:
        try:
            return Cipher(self.algorithm(key), self.mode(iv), backend=default_backend())
        except (ValueError, TypeError) as e:
            raise CipherPrimitiveError(f"{self.name}: {e}") from e

    def encrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        if self.padded:
            padder = padding.PKCS7(self.block_size).padder()
            data = padder.update(data) + padder.finalize()
        enc = self.new_cipher(key, iv).encryptor()
        return enc.update(data) + enc.finalize()

    def decrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Inverse of `encrypt`.

        Key/IV problems raise CipherPrimitiveError; data that does not
        decrypt cleanly (wrong length, bad padding) raises
        MalformedInputError.
        """
        dec = self.new_cipher(key, iv).decryptor()
        try:
            pt = dec.update(data) + dec.finalize()
            if self.padded:
                unpadder = padding.PKCS7(self.block_size).unpadder()
                pt = unpadder.update(pt) + unpadder.finalize()
        except ValueError as e:
            raise MalformedInputError(f"{self.name}: {e}") from e
        return pt


# ---------- Registry ----------
AES_128_CBC = CipherProfile("aes_128_cbc", algorithms.AES, modes.CBC, 16, 16, padded=True)
AES_192_CBC = CipherProfile("aes_192_cbc", algorithms.AES, modes.CBC, 24, 16, padded=True)
AES_256_CBC = CipherProfile("aes_256_cbc", algorithms.AES, modes.CBC, 32, 16, padded=True)
AES_128_CFB8 = CipherProfile("aes_128_cfb8", algorithms.AES, decrepit_modes.CFB8, 16, 16)
AES_256_CFB8 = CipherProfile("aes_256_cfb8", algorithms.AES, decrepit_modes.CFB8, 32, 16)
AES_128_CFB = CipherProfile("aes_128_cfb", algorithms.AES, decrepit_modes.CFB, 16, 16)
AES_256_CFB = CipherProfile("aes_256_cfb", algorithms.AES, decrepit_modes.CFB, 32, 16)
AES_128_OFB = CipherProfile("aes_128_ofb", algorithms.AES, decrepit_modes.OFB, 16, 16)
AES_256_OFB = CipherProfile("aes_256_ofb", algorithms.AES, decrepit_modes.OFB, 32, 16)
AES_128_CTR = CipherProfile("aes_128_ctr", algorithms.AES, modes.CTR, 16, 16)
AES_256_CTR = CipherProfile("aes_256_ctr", algorithms.AES, modes.CTR, 32, 16)
CAMELLIA_128_CBC = CipherProfile("camellia_128_cbc", decrepit_algorithms.Camellia, modes.CBC, 16, 16, padded=True)
CAMELLIA_256_CBC = CipherProfile("camellia_256_cbc", decrepit_algorithms.Camellia, modes.CBC, 32, 16, padded=True)

DEFAULT_PROFILE = AES_256_CBC

PROFILES = {
    p.name: p
    for p in (
        AES_128_CBC, AES_192_CBC, AES_256_CBC,
        AES_128_CFB8, AES_256_CFB8,
        AES_128_CFB, AES_256_CFB,
        AES_128_OFB, AES_256_OFB,
        AES_128_CTR, AES_256_CTR,
        CAMELLIA_128_CBC, CAMELLIA_256_CBC,
    )
}


def get_profile(profile) -> CipherProfile:
    """Resolve a profile object or a name like "AES-256-CBC"."""
    if isinstance(profile, CipherProfile):
        return profile
    key = str(profile).strip().lower().replace("-", "_")
    try:
        return PROFILES[key]
    except KeyError:
        raise UnknownProfileError(f"Unknown cipher profile: {profile}") from None


def available_profiles():
    return sorted(PROFILES)
