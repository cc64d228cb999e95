"""
Password strength scoring and password generation.
"""

import re
import secrets
from dataclasses import dataclass, field
from typing import Dict, List

from . import config


@dataclass
class StrengthResult:
    """Advisory strength of a password."""
    level: str
    count: int
    criteria: Dict[str, bool] = field(default_factory=dict)


class PasswordStrengthValidator:
    """Scores passwords against five independent criteria."""

    CRITERIA = ('length', 'uppercase', 'lowercase', 'numbers', 'special')

    @staticmethod
    def check_criteria(password: str) -> Dict[str, bool]:
        """Evaluate every criterion for a password."""
        return {
            'length': len(password) >= config.PASSWORD_STRENGTH_MIN_LENGTH,
            'uppercase': re.search(r'[A-Z]', password) is not None,
            'lowercase': re.search(r'[a-z]', password) is not None,
            'numbers': re.search(r'\d', password) is not None,
            'special': any(c in config.PASSWORD_SPECIAL_CHARS for c in password),
        }

    @staticmethod
    def score(password: str) -> StrengthResult:
        """
        Score a password.

        Returns:
            StrengthResult with level none for an empty password, otherwise
            weak (0-2 criteria), fair (3), good (4) or strong (5)
        """
        if not password:
            return StrengthResult(level=config.STRENGTH_NONE, count=0)

        criteria = PasswordStrengthValidator.check_criteria(password)
        count = sum(criteria.values())

        if count <= 2:
            level = config.STRENGTH_WEAK
        elif count == 3:
            level = config.STRENGTH_FAIR
        elif count == 4:
            level = config.STRENGTH_GOOD
        else:
            level = config.STRENGTH_STRONG
        return StrengthResult(level=level, count=count, criteria=criteria)


def shuffle(items: List[str]) -> None:
    """Shuffle a list in place with Fisher-Yates, drawing from the CSPRNG."""
    for i in range(len(items) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]


def generate_password(length: int = config.PASSWORD_GENERATOR_DEFAULT_LENGTH) -> str:
    """
    Generate a random password that satisfies every strength criterion.

    One uppercase letter, one lowercase letter, one digit and one special
    character are guaranteed; the rest come from the combined alphabet. The
    result is shuffled so the guaranteed characters can land anywhere.
    """
    if length < config.PASSWORD_GENERATOR_MIN_LENGTH:
        raise ValueError(f"Password length must be at least {config.PASSWORD_GENERATOR_MIN_LENGTH}")

    classes = (
        config.PASSWORD_GENERATOR_UPPERCASE,
        config.PASSWORD_GENERATOR_LOWERCASE,
        config.PASSWORD_GENERATOR_DIGITS,
        config.PASSWORD_GENERATOR_SPECIALS,
    )
    chars = ''.join(classes)

    password = [secrets.choice(c) for c in classes]
    password += [secrets.choice(chars) for _ in range(length - len(classes))]
    shuffle(password)
    return ''.join(password)
