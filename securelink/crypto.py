"""
Cryptographic operations for SecureLink tokens.

Keys are derived with PBKDF2-HMAC and URLs are encrypted with AES-256-CBC and
PKCS#7 padding. There is no authentication tag: a wrong key is detected only
through bad padding or invalid UTF-8, and very rarely slips through.
"""

import os
import logging
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.backends import default_backend

from .errors import DecryptionError
from . import config

logger = logging.getLogger(__name__)

_HASH_ALGORITHMS = {
    "sha256": hashes.SHA256,
    "sha1": hashes.SHA1,
}


class CryptoManager:
    """Handles all cryptographic operations for SecureLink tokens."""

    # Constants
    SALT_SIZE = config.SALT_SIZE  # 128 bits
    IV_SIZE = config.IV_SIZE      # 128 bits, one AES block
    KEY_SIZE = config.KEY_SIZE    # 256 bits for AES-256
    BLOCK_SIZE = algorithms.AES.block_size  # in bits

    # KDF parameters
    PBKDF2_ITERATIONS = config.PBKDF2_ITERATIONS

    def __init__(self, hash_name: str = config.PBKDF2_HASH):
        """
        Initialize the crypto manager.

        Args:
            hash_name: PRF hash for PBKDF2, one of config.PBKDF2_HASHES
        """
        if hash_name not in _HASH_ALGORITHMS:
            raise ValueError(f"Unsupported PBKDF2 hash: {hash_name}")
        self.hash_name = hash_name
        self.backend = default_backend()

    def random_bytes(self, size: int) -> bytes:
        """Return `size` bytes from the operating system CSPRNG."""
        return os.urandom(size)

    def generate_salt(self) -> bytes:
        """Generate a cryptographically secure random salt."""
        return self.random_bytes(self.SALT_SIZE)

    def generate_iv(self) -> bytes:
        """Generate a cryptographically secure random IV."""
        return self.random_bytes(self.IV_SIZE)

    def derive_key(self, password: str, salt: bytes) -> bytes:
        """
        Derive an encryption key from a password using PBKDF2-HMAC.

        Args:
            password: The token password
            salt: Random salt for key derivation

        Returns:
            32-byte encryption key
        """
        kdf = PBKDF2HMAC(
            algorithm=_HASH_ALGORITHMS[self.hash_name](),
            length=self.KEY_SIZE,
            salt=salt,
            iterations=self.PBKDF2_ITERATIONS,
            backend=self.backend
        )
        return kdf.derive(password.encode('utf-8'))

    def _cipher(self, key: bytes, iv: bytes) -> Cipher:
        if len(key) != self.KEY_SIZE:
            raise ValueError(f"Key must be {self.KEY_SIZE} bytes, got {len(key)}")
        if len(iv) != self.IV_SIZE:
            raise ValueError(f"IV must be {self.IV_SIZE} bytes, got {len(iv)}")
        return Cipher(algorithms.AES(key), modes.CBC(iv), backend=self.backend)

    def encrypt(self, plaintext: str, key: bytes, iv: bytes) -> bytes:
        """
        Encrypt text using AES-256-CBC with PKCS#7 padding.

        Args:
            plaintext: Text to encrypt, encoded as UTF-8
            key: 32-byte encryption key
            iv: 16-byte initialization vector

        Returns:
            Ciphertext bytes
        """
        encryptor = self._cipher(key, iv).encryptor()
        padder = padding.PKCS7(self.BLOCK_SIZE).padder()
        padded = padder.update(plaintext.encode('utf-8')) + padder.finalize()
        return encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, ciphertext: bytes, key: bytes, iv: bytes) -> str:
        """
        Decrypt AES-256-CBC ciphertext back to text.

        Args:
            ciphertext: Encrypted data
            key: 32-byte encryption key
            iv: Initialization vector used for encryption

        Returns:
            Decrypted text

        Raises:
            DecryptionError: If the padding or the UTF-8 text is invalid,
                which is what a wrong key or corrupted data looks like
        """
        decryptor = self._cipher(key, iv).decryptor()
        try:
            padded = decryptor.update(ciphertext) + decryptor.finalize()
            unpadder = padding.PKCS7(self.BLOCK_SIZE).unpadder()
            data = unpadder.update(padded) + unpadder.finalize()
            return data.decode('utf-8')
        except ValueError as e:
            # UnicodeDecodeError is a ValueError too
            logger.debug(f"Decrypt: {type(e).__name__}")
            raise DecryptionError(config.MSG_DECRYPTION_FAILED) from e
