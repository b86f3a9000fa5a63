"""Password strength scoring.

Six independent criteria, one point each. Every failed criterion except
the 12-character bonus adds one suggestion, in rubric order.
"""

import re

from core.config import (
    MAX_STRENGTH_SCORE,
    MIN_PASSWORD_LENGTH,
    SPECIAL_CHARACTERS,
    STRONG_PASSWORD_LENGTH,
)
from core.models import StrengthReport, StrengthTier

SPECIAL_PATTERN = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


def tier_for_score(score: int) -> StrengthTier:
    """Map a rubric score to its tier.

    Raises:
        ValueError: If score is outside 0-6
    """
    if not 0 <= score <= MAX_STRENGTH_SCORE:
        raise ValueError(f"Score must be between 0 and {MAX_STRENGTH_SCORE}, got {score}")
    if score <= 2:
        return "Weak"
    if score <= 4:
        return "Medium"
    return "Strong"


def validate_strength(password: str) -> StrengthReport:
    score = 0
    feedback = []

    # check length
    if len(password) >= MIN_PASSWORD_LENGTH:
        score += 1
    else:
        feedback.append(f"Password should be at least {MIN_PASSWORD_LENGTH} characters")

    # bonus only, no suggestion
    if len(password) >= STRONG_PASSWORD_LENGTH:
        score += 1

    # check for different character types
    if re.search(r'[a-z]', password):
        score += 1
    else:
        feedback.append("Add lowercase letters")

    if re.search(r'[A-Z]', password):
        score += 1
    else:
        feedback.append("Add uppercase letters")

    if re.search(r'[0-9]', password):
        score += 1
    else:
        feedback.append("Add digits")

    if SPECIAL_PATTERN.search(password):
        score += 1
    else:
        feedback.append("Add special characters")

    return StrengthReport(strength=tier_for_score(score), score=score, feedback=feedback)
