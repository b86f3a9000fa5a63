"""Passkeeper Core Package.

Provides the building blocks behind the password tool:
- config: Centralized configuration constants
- models: Pydantic models for records and strength reports
- generator: Random and memorable password generation
- strength: Password strength scoring
- crypto: One-way password hashing
- storage: Atomic JSON file I/O
- store: File-backed credential records
- audit: Logging setup and structured audit events
"""

# Configuration constants
from core.config import (
    RECORDS_FILE,
    LOG_DIR,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_WORD_COUNT,
    DEFAULT_SEPARATOR,
    SPECIAL_CHARACTERS,
    WORD_LIST,
    PASSWORD_AGE_WARNING_DAYS,
)

# Data models
from core.models import CredentialRecord, StrengthReport

# Generation and scoring
from core.generator import build_charset, generate_random, generate_memorable
from core.strength import tier_for_score, validate_strength

# Hashing
from core.crypto import hash_password, verify_password

# Storage
from core.storage import StorageError, FileCorruptedError, PersistenceError
from core.store import CredentialStore, IndexOutOfRange

# Logging
from core.audit import configure_logging, log_event

__all__ = [
    # Config
    "RECORDS_FILE",
    "LOG_DIR",
    "DEFAULT_PASSWORD_LENGTH",
    "DEFAULT_WORD_COUNT",
    "DEFAULT_SEPARATOR",
    "SPECIAL_CHARACTERS",
    "WORD_LIST",
    "PASSWORD_AGE_WARNING_DAYS",
    # Models
    "CredentialRecord",
    "StrengthReport",
    # Generator
    "build_charset",
    "generate_random",
    "generate_memorable",
    # Strength
    "tier_for_score",
    "validate_strength",
    # Crypto
    "hash_password",
    "verify_password",
    # Storage
    "StorageError",
    "FileCorruptedError",
    "PersistenceError",
    "CredentialStore",
    "IndexOutOfRange",
    # Logging
    "configure_logging",
    "log_event",
]
