"""Password generation.

Random passwords are drawn uniformly, with replacement, from lowercase
letters plus whichever optional classes are enabled. Memorable passwords
trade entropy for ease of typing: a few dictionary words and a 3-digit
suffix.

Both generators take an optional ``rng`` exposing ``choice`` and
``randint``. It defaults to ``secrets.SystemRandom``; tests pass a
deterministic source.
"""

import secrets
from typing import Any, Optional

from core.config import (
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    DIGITS,
    LOWERCASE,
    MEMORABLE_SUFFIX_MAX,
    MEMORABLE_SUFFIX_MIN,
    SPECIAL_CHARACTERS,
    UPPERCASE,
    WORD_LIST,
)


def _default_rng() -> Any:
    return secrets.SystemRandom()


def build_charset(
    use_upper: bool = True,
    use_digits: bool = True,
    use_special: bool = True
) -> str:
    """Assemble the character universe for random passwords.

    Lowercase letters are always included, so the result is never empty.
    """
    chars = LOWERCASE
    if use_upper:
        chars += UPPERCASE
    if use_digits:
        chars += DIGITS
    if use_special:
        chars += SPECIAL_CHARACTERS
    return chars


def generate_random(
    length: int = DEFAULT_PASSWORD_LENGTH,
    use_upper: bool = True,
    use_digits: bool = True,
    use_special: bool = True,
    rng: Optional[Any] = None
) -> str:
    """Generate a random password.

    Every position is an independent uniform draw from the combined pool.
    Enabling a class makes it eligible; it does not guarantee it appears.

    Args:
        length: Password length, 0 or less gives an empty string
        use_upper: Include uppercase letters
        use_digits: Include digits
        use_special: Include special characters
        rng: Random source, defaults to a cryptographically secure one

    Returns:
        Generated password string
    """
    if rng is None:
        rng = _default_rng()
    chars = build_charset(use_upper, use_digits, use_special)
    return ''.join(rng.choice(chars) for _ in range(length))


def generate_memorable(
    word_count: int = DEFAULT_WORD_COUNT,
    separator: str = DEFAULT_SEPARATOR,
    capitalize: bool = True,
    rng: Optional[Any] = None
) -> str:
    """Generate a password from common words and a 3-digit number.

    Words are drawn with replacement, so repeats are possible. The number
    follows the last word directly, without a separator.

    Args:
        word_count: Number of words, 0 or less gives just the number
        separator: Text placed between words
        capitalize: Upper-case the first letter of each word
        rng: Random source, defaults to a cryptographically secure one

    Returns:
        Generated password string like "River-Piano-Star-Lemon482"
    """
    if rng is None:
        rng = _default_rng()
    words = [rng.choice(WORD_LIST) for _ in range(word_count)]
    if capitalize:
        words = [w.capitalize() for w in words]

    suffix = rng.randint(MEMORABLE_SUFFIX_MIN, MEMORABLE_SUFFIX_MAX)
    return separator.join(words) + str(suffix)
