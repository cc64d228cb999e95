"""
Persisted display settings for SecureLink.

Settings live as JSON under ~/.securelink; unreadable or invalid values fall
back to the defaults in config.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from . import config

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Display preferences. They never change how tokens are built."""
    auto_redirect: bool = config.AUTO_REDIRECT_DEFAULT
    redirect_delay: int = config.REDIRECT_DELAY_DEFAULT_SECONDS
    show_password_strength: bool = config.SHOW_PASSWORD_STRENGTH_DEFAULT

    def __post_init__(self):
        self.redirect_delay = clamp_redirect_delay(self.redirect_delay)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """
        Create from dictionary.
        Unknown keys and values of the wrong type are ignored.
        """
        defaults = cls()
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = type(getattr(defaults, f.name))
            # bool is an int subclass, so compare types exactly
            if type(value) is not expected:
                logger.warning(f"Ignoring setting {f.name}: expected {expected.__name__}, got {type(value).__name__}")
                continue
            values[f.name] = value
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")
        return cls(**values)


def clamp_redirect_delay(seconds: int) -> int:
    """Keep the redirect countdown within the configured bounds."""
    return max(config.REDIRECT_DELAY_MIN_SECONDS, min(config.REDIRECT_DELAY_MAX_SECONDS, seconds))


def get_settings_path() -> str:
    """Default location of the settings file."""
    config_dir = os.path.join(os.path.expanduser("~"), config.CONFIG_DIR_NAME)
    return os.path.join(config_dir, config.SETTINGS_FILE)


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Loads settings from the settings file.
    Falls back to defaults when the file is missing or unreadable.
    """
    path = path or get_settings_path()
    if not os.path.exists(path):
        return Settings()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read settings file {path}: {e}. Using defaults.")
        return Settings()

    if not isinstance(data, dict):
        logger.warning(f"Settings file {path} does not hold an object. Using defaults.")
        return Settings()
    return Settings.from_dict(data)


def save_settings(settings: Settings, path: Optional[str] = None) -> None:
    """
    Saves settings to the settings file, creating its directory if needed.
    """
    path = path or get_settings_path()
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)

    tmp_path = path + '.tmp'
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(settings.to_dict(), f, indent=2)
        os.replace(tmp_path, path)
    except OSError as e:
        logger.error(f"Error saving settings file {path}: {e}", exc_info=True)
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
