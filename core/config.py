"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
File locations can be overridden via environment variables; they are only
used as defaults by the CLI, core operations take explicit paths.
"""

import os
import string

# File paths
RECORDS_FILE = os.environ.get("PASSKEEPER_FILE", "passwords.json")

# Logging
LOG_DIR = os.environ.get("PASSKEEPER_LOG_DIR", "logs")
APP_LOG_NAME = "passkeeper.log"
AUDIT_LOG_NAME = "audit_events.jsonl"
LOG_MAX_BYTES = int(os.environ.get("PASSKEEPER_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
LOG_BACKUP_COUNT = int(os.environ.get("PASSKEEPER_LOG_BACKUP_COUNT", 5))

# Password generation
DEFAULT_PASSWORD_LENGTH = 12
DEFAULT_WORD_COUNT = 4
DEFAULT_SEPARATOR = "-"
MEMORABLE_SUFFIX_MIN = 100
MEMORABLE_SUFFIX_MAX = 999

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+"

WORD_LIST = (
    "apple", "banana", "cherry", "dragon", "eagle", "forest",
    "guitar", "hammer", "island", "jungle", "kitten", "lemon",
    "mountain", "ocean", "piano", "queen", "river", "star",
    "tiger", "umbrella", "valley", "water", "yellow", "zebra",
)

# Strength rubric
MIN_PASSWORD_LENGTH = 8
STRONG_PASSWORD_LENGTH = 12
MAX_STRENGTH_SCORE = 6

# Saved records
PASSWORD_AGE_WARNING_DAYS = 90
HASH_HEX_LENGTH = 64
