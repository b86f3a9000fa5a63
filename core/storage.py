"""Centralized file I/O operations.

Provides consistent JSON file handling with proper error management.
Writes go to a temporary file that is renamed over the target, so a crash
mid-write never leaves a half-written records file behind.
"""

import json
import os
import shutil
import sys
import tempfile
from typing import Any, Optional


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class FileCorruptedError(StorageError):
    """File exists but contains invalid data."""
    pass


class PersistenceError(StorageError):
    """Writing the file failed; the previous contents are still in place."""
    pass


def ensure_directory(directory: str) -> None:
    """Create a directory if it doesn't exist.

    On Unix systems, directories are created with mode 0700 (owner only).
    """
    if not directory:
        return
    if sys.platform != "win32":
        os.makedirs(directory, mode=0o700, exist_ok=True)
    else:
        os.makedirs(directory, exist_ok=True)


def load_json(filepath: str) -> Optional[Any]:
    """Load JSON data from file.

    Args:
        filepath: Path to JSON file

    Returns:
        Parsed JSON data, or None if file doesn't exist

    Raises:
        FileCorruptedError: If file exists but contains invalid JSON
        StorageError: If the file cannot be read
    """
    if not os.path.exists(filepath):
        return None

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FileCorruptedError(f"Invalid JSON in {filepath}: {e}") from e
    except OSError as e:
        raise StorageError(f"Failed to read {filepath}: {e}") from e


def save_json(filepath: str, data: Any, indent: int = 2) -> None:
    """Atomically replace a JSON file.

    The temporary file is created next to the target with owner-only
    permissions, fsynced, then moved into place with os.replace.

    Args:
        filepath: Path to JSON file
        data: JSON-serializable data to save
        indent: JSON indentation level

    Raises:
        PersistenceError: If any step of the write fails
    """
    directory = os.path.dirname(os.path.abspath(filepath))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(filepath)}.", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, filepath)
        tmp_path = None
    except (OSError, TypeError, ValueError) as e:
        raise PersistenceError(f"Failed to write {filepath}: {e}") from e
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)


def backup_file(filepath: str, suffix: str = ".corrupt") -> str:
    """Copy a file aside before it gets overwritten.

    Args:
        filepath: File to copy
        suffix: Appended to the file name for the copy

    Returns:
        Path of the copy

    Raises:
        PersistenceError: If the copy fails
    """
    backup_path = filepath + suffix
    try:
        shutil.copy2(filepath, backup_path)
    except OSError as e:
        raise PersistenceError(f"Failed to back up {filepath}: {e}") from e
    return backup_path
