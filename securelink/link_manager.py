"""
Encryption and decryption flows for SecureLink.

The manager validates input, seals or opens tokens and reports every result
as an Outcome carrying a user-facing message. Failures never escape as
exceptions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional
from urllib.parse import quote, urlsplit, parse_qs

from .crypto import CryptoManager
from .envelope import seal, open_token
from .errors import (
    SecureLinkError, InputError, UrlValidationError, DecryptionError, InternalCryptoError
)
from .urls import validate_url, extract_urls
from . import config

logger = logging.getLogger(__name__)


@dataclass
class SealedLink:
    """One encrypted URL and the link that carries it."""
    original: str
    token: str
    share_link: str


@dataclass
class DecryptionSession:
    """
    Caller-owned state of one decryption attempt series.

    attempt_count is informational only; it never locks anything out.
    """
    token: str
    attempt_count: int = 0


@dataclass
class Outcome:
    """Typed result of a flow: success flag, message and payload."""
    success: bool
    message: str
    value: Any = None
    error: Optional[SecureLinkError] = None

    @classmethod
    def failure(cls, error: SecureLinkError) -> 'Outcome':
        return cls(success=False, message=str(error), error=error)


class LinkManager:
    """Runs the single, bulk, selection and decryption flows."""

    def __init__(self, crypto: Optional[CryptoManager] = None, base_url: str = config.DEFAULT_BASE_URL):
        """
        Initialize the link manager.
        Args:
            crypto: CryptoManager to use, a default one if omitted
            base_url: Address share links point to
        """
        self.crypto = crypto or CryptoManager()
        self.base_url = base_url

    def build_share_link(self, token: str) -> str:
        """Return `<base_url>?data=<percent-encoded token>`."""
        separator = '&' if urlsplit(self.base_url).query else '?'
        return f"{self.base_url}{separator}{config.SHARE_LINK_PARAM}={quote(token, safe='')}"

    def session_from_link(self, link_or_token: str) -> DecryptionSession:
        """
        Start a decryption session from a share link or a bare token.

        Raises:
            InputError: If the link carries no token
        """
        text = (link_or_token or '').strip()
        if not text:
            raise InputError(config.MSG_NO_TOKEN)

        parts = urlsplit(text)
        if parts.scheme and parts.netloc:
            values = parse_qs(parts.query).get(config.SHARE_LINK_PARAM)
            if not values or not values[0]:
                raise InputError(config.MSG_NO_TOKEN)
            # parse_qs has already percent-decoded the value
            return DecryptionSession(token=values[0])
        return DecryptionSession(token=text)

    def _seal_all(self, urls: Iterable[str], password: str) -> List[SealedLink]:
        results = []
        for url in urls:
            token = seal(url, password, self.crypto)
            results.append(SealedLink(original=url, token=token, share_link=self.build_share_link(token)))
        return results

    def _sealed_outcome(self, urls: List[str], password: str) -> Outcome:
        try:
            results = self._seal_all(urls, password)
        except InternalCryptoError as e:
            return Outcome.failure(e)

        if len(results) == 1:
            message = config.MSG_ENCRYPTED_ONE
        else:
            message = config.MSG_ENCRYPTED_MANY.format(count=len(results))
        logger.info(f"Sealed {len(results)} URL(s)")
        return Outcome(success=True, message=message, value=results)

    def encrypt_url(self, url: str, password: str) -> Outcome:
        """Encrypt one URL typed by the user."""
        url = (url or '').strip()
        if not url or not password:
            return Outcome.failure(InputError(config.MSG_ENTER_URL_AND_PASSWORD))

        validation = validate_url(url)
        if not validation.valid:
            return Outcome.failure(UrlValidationError(config.MSG_ENTER_VALID_URL))

        return self._sealed_outcome([validation.normalized], password)

    def encrypt_bulk(self, text: str, password: str) -> Outcome:
        """
        Encrypt one URL per line. Invalid lines are skipped silently.
        """
        text = (text or '').strip()
        if not text or not password:
            return Outcome.failure(InputError(config.MSG_ENTER_URLS_AND_PASSWORD))

        valid_urls = []
        for line in text.split('\n'):
            line = line.strip()
            if not line:
                continue
            validation = validate_url(line)
            if validation.valid:
                valid_urls.append(validation.normalized)
            else:
                logger.debug("Skipping invalid line in bulk input")

        if not valid_urls:
            return Outcome.failure(UrlValidationError(config.MSG_NO_VALID_URLS))

        return self._sealed_outcome(valid_urls, password)

    def scan_text(self, text: str) -> Outcome:
        """Find URLs in free text, e.g. clipboard contents."""
        urls = extract_urls(text or '')
        if not urls:
            return Outcome(success=False, message=config.MSG_NO_URLS_FOUND, value=[])
        return Outcome(success=True, message=config.MSG_FOUND_URLS.format(count=len(urls)), value=urls)

    def encrypt_selected(self, urls: List[str], password: str) -> Outcome:
        """Encrypt URLs picked from a scan result."""
        if not password:
            return Outcome.failure(InputError(config.MSG_ENTER_PASSWORD))
        if not urls:
            return Outcome.failure(InputError(config.MSG_SELECT_URLS))

        return self._sealed_outcome(list(urls), password)

    def decrypt(self, session: DecryptionSession, password: str) -> Outcome:
        """
        Try to open the session's token with a password.

        A failed attempt increments session.attempt_count. Malformed tokens
        and wrong passwords produce the same message.
        """
        if not password:
            return Outcome.failure(InputError(config.MSG_ENTER_DECRYPT_PASSWORD))

        try:
            url = open_token(session.token, password, self.crypto)
        except DecryptionError as e:
            session.attempt_count += 1
            logger.warning(f"Decryption failed (attempt {session.attempt_count})")
            message = config.MSG_INCORRECT_PASSWORD_ATTEMPTS.format(
                count=session.attempt_count,
                plural='s' if session.attempt_count > 1 else ''
            )
            return Outcome(success=False, message=message, error=e)

        return Outcome(success=True, message=config.MSG_DECRYPTED, value=url)
