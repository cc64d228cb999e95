"""
Exceptions raised by the SecureLink core.

The link manager turns each of them into a failed Outcome; nothing here
escapes to the user as a traceback.
"""


class SecureLinkError(Exception):
    """Base exception for SecureLink operations."""


class InputError(SecureLinkError):
    """A required URL, password or token was not supplied."""


class UrlValidationError(SecureLinkError):
    """A URL could not be parsed, even after scheme normalization."""


class DecryptionError(SecureLinkError):
    """
    A token could not be opened.

    Raised alike for a malformed token and for a wrong password, so the
    message never tells an attacker which step failed.
    """


class InternalCryptoError(SecureLinkError):
    """Unexpected failure inside the cipher primitive while sealing."""
