"""Pydantic models for saved credentials and strength reports.

Field names of CredentialRecord match the keys of the persisted JSON
objects, so ``model_dump()`` is exactly what gets written to disk.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.config import HASH_HEX_LENGTH, MAX_STRENGTH_SCORE, PASSWORD_AGE_WARNING_DAYS


StrengthTier = Literal["Weak", "Medium", "Strong"]


class CredentialRecord(BaseModel):
    """One saved entry. The plaintext password is never part of it."""
    model_config = ConfigDict(frozen=True)

    service: str = Field(..., min_length=1, description="Site or app name")
    username: str = Field(..., description="Account identifier")
    password_hash: str = Field(
        ...,
        min_length=HASH_HEX_LENGTH,
        max_length=HASH_HEX_LENGTH,
        pattern=r"^[0-9a-f]+$",
        description="Hex-encoded SHA-256 digest of the password",
    )
    created_at: str = Field(..., min_length=1, description="Creation timestamp")

    def age_days(self, now: Optional[datetime] = None) -> Optional[int]:
        """Return the record age in whole days, or None if the timestamp is unreadable."""
        try:
            created = datetime.fromisoformat(self.created_at)
        except ValueError:
            return None

        if now is None:
            now = datetime.now(created.tzinfo)
        elif (now.tzinfo is None) != (created.tzinfo is None):
            return None
        return (now - created).days

    def age_warning(self, now: Optional[datetime] = None) -> Optional[str]:
        """Return a warning once the password is older than the age limit."""
        age = self.age_days(now)
        if age is not None and age > PASSWORD_AGE_WARNING_DAYS:
            return f"Password is {age} days old - consider updating"
        return None


class StrengthReport(BaseModel):
    """Result of scoring a password against the strength rubric."""
    strength: StrengthTier
    score: int = Field(..., ge=0, le=MAX_STRENGTH_SCORE)
    feedback: list[str] = Field(default_factory=list)
