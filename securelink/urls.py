"""
URL validation and free-text URL detection.
"""

import re
import logging
import ipaddress
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlsplit

from .errors import UrlValidationError
from . import config

logger = logging.getLogger(__name__)

_SCHEME_PREFIX = re.compile(r'^https?://')
_EXPLICIT_URL = re.compile(r'https?://[^\s<>"]+', re.IGNORECASE)
_BARE_DOMAIN = re.compile(r'(?:^|\s)((?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,})(?:\s|$)', re.IGNORECASE)


@dataclass
class ValidationResult:
    """Outcome of validating one URL."""
    valid: bool
    message: str
    normalized: Optional[str] = None


def parse_url(url: str) -> None:
    """
    Check that `url` parses as an absolute http(s) URL with a host.

    Raises:
        UrlValidationError: If it does not
    """
    try:
        parts = urlsplit(url)
        if parts.scheme.lower() not in config.URL_SCHEMES:
            raise ValueError(f"Unsupported scheme {parts.scheme!r}")
        host = parts.hostname
        if not host:
            raise ValueError("Missing host")
        if '[' in parts.netloc:
            ipaddress.IPv6Address(host)
        elif any(c in config.URL_FORBIDDEN_HOST_CHARS for c in host):
            raise ValueError("Forbidden character in host")
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise UrlValidationError(config.MSG_URL_INVALID) from e


def validate_url(raw: str) -> ValidationResult:
    """
    Validate a URL entered by the user.

    Input without an explicit http:// or https:// prefix gets https://
    prepended before parsing. The normalized form is returned on success and
    should replace what the user typed.
    """
    if not raw:
        return ValidationResult(valid=False, message=config.MSG_URL_REQUIRED)

    url = raw
    if not _SCHEME_PREFIX.match(url):
        url = config.URL_DEFAULT_PREFIX + url

    try:
        parse_url(url)
    except UrlValidationError as e:
        logger.debug(f"Rejected URL input: {e.__cause__}")
        return ValidationResult(valid=False, message=str(e))
    return ValidationResult(valid=True, message=config.MSG_URL_VALID, normalized=url)


def extract_urls(text: str) -> List[str]:
    """
    Find candidate URLs in free text such as clipboard contents.

    Explicit http(s) URLs come first, then bare domains that are not already
    part of a found URL, prefixed with https://. Order of first discovery is
    kept and exact duplicates are dropped.
    """
    matches = _EXPLICIT_URL.findall(text)

    for match in _BARE_DOMAIN.finditer(text):
        domain = match.group(1)
        if not any(domain in url for url in matches):
            matches.append(config.URL_DEFAULT_PREFIX + domain)

    return list(dict.fromkeys(matches))
