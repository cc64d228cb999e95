"""
Token serialization for SecureLink.

A token is standard base64 of the compact JSON record

    {"salt": "<32 hex>", "iv": "<32 hex>", "encrypted": "<base64 ciphertext>"}

with the fields in exactly that order. Salt and IV are lowercase hex.
"""

import re
import json
import base64
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .crypto import CryptoManager
from .errors import DecryptionError, InternalCryptoError
from . import config

logger = logging.getLogger(__name__)

_HEX_FIELD = re.compile(r'[0-9a-f]{32}')


def _b64decode_canonical(text: str) -> bytes:
    """Decode base64, rejecting anything but the canonical encoding."""
    raw = base64.b64decode(text, validate=True)
    # Unused trailing bits would let two strings decode to the same bytes
    if base64.b64encode(raw).decode('ascii') != text:
        raise ValueError("Non-canonical base64")
    return raw


@dataclass(frozen=True)
class Envelope:
    """The (salt, iv, ciphertext) triple carried by a token."""
    salt: bytes
    iv: bytes
    ciphertext: bytes

    def to_dict(self) -> Dict[str, str]:
        """Convert to the ordered record used on the wire."""
        return {
            'salt': self.salt.hex(),
            'iv': self.iv.hex(),
            'encrypted': base64.b64encode(self.ciphertext).decode('ascii'),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'Envelope':
        """
        Create from a wire record.

        Raises:
            ValueError: If a field is missing, extra, or badly encoded
        """
        if not isinstance(data, dict) or set(data) != set(config.TOKEN_FIELDS):
            raise ValueError("Token record must hold exactly salt, iv and encrypted")
        for name in config.TOKEN_FIELDS:
            if not isinstance(data[name], str):
                raise ValueError(f"Token field {name} must be a string")
        for name in ('salt', 'iv'):
            if not _HEX_FIELD.fullmatch(data[name]):
                raise ValueError(f"Token field {name} must be 32 lowercase hex characters")
        return cls(
            salt=bytes.fromhex(data['salt']),
            iv=bytes.fromhex(data['iv']),
            ciphertext=_b64decode_canonical(data['encrypted']),
        )

    def to_token(self) -> str:
        """Serialize to the transportable token text."""
        record = json.dumps(self.to_dict(), separators=(',', ':'))
        return base64.b64encode(record.encode('utf-8')).decode('ascii')

    @classmethod
    def from_token(cls, token: str) -> 'Envelope':
        """
        Parse token text.

        Raises:
            ValueError: If the token is not base64 of a valid record
        """
        record = _b64decode_canonical(token.strip()).decode('utf-8')
        if not record.startswith('{'):
            raise ValueError("Token record must be a JSON object")
        return cls.from_dict(json.loads(record))


def seal(url: str, password: str, crypto: Optional[CryptoManager] = None) -> str:
    """
    Encrypt a validated URL under a password and return the token.

    A fresh salt and IV are drawn for every call.

    Raises:
        InternalCryptoError: If the cipher itself fails
    """
    crypto = crypto or CryptoManager()
    try:
        salt = crypto.generate_salt()
        iv = crypto.generate_iv()
        key = crypto.derive_key(password, salt)
        ciphertext = crypto.encrypt(url, key, iv)
    except Exception as e:
        logger.error(f"Seal: Cipher failure: {e}", exc_info=True)
        raise InternalCryptoError(config.MSG_ENCRYPTION_FAILED) from e
    return Envelope(salt=salt, iv=iv, ciphertext=ciphertext).to_token()


def open_token(token: str, password: str, crypto: Optional[CryptoManager] = None) -> str:
    """
    Recover the URL sealed in a token.

    Raises:
        DecryptionError: If the token is malformed or the password is wrong.
            Both cases carry the same message.
    """
    crypto = crypto or CryptoManager()
    try:
        envelope = Envelope.from_token(token)
    except (ValueError, TypeError, RecursionError) as e:
        # json.JSONDecodeError, binascii.Error and UnicodeDecodeError are ValueErrors;
        # RecursionError comes from deeply nested JSON
        logger.debug(f"Open: Malformed token ({type(e).__name__})")
        raise DecryptionError(config.MSG_DECRYPTION_FAILED) from e

    key = crypto.derive_key(password, envelope.salt)
    url = crypto.decrypt(envelope.ciphertext, key, envelope.iv)
    if not url:
        logger.debug("Open: Decrypted to empty text")
        raise DecryptionError(config.MSG_DECRYPTION_FAILED)
    return url
