"""Credential record store.

Keeps an ordered list of CredentialRecord in memory and mirrors it to a
JSON array on disk. Every mutation rewrites the whole file before the call
returns; the in-memory list only changes once that write succeeded.
"""

import logging
import os
from datetime import datetime

from pydantic import ValidationError

from core.audit import log_event
from core.config import RECORDS_FILE
from core.crypto import hash_password, verify_password
from core.models import CredentialRecord
from core.storage import StorageError, backup_file, load_json, save_json


logger = logging.getLogger(__name__)


class IndexOutOfRange(IndexError):
    """Record index is outside 0..len-1."""
    pass


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


class CredentialStore:
    """Ordered, file-backed collection of saved credentials.

    Args:
        path: JSON file holding the records. Missing or unreadable files
            start the store empty.
    """

    def __init__(self, path: str = RECORDS_FILE):
        self._path = path
        self._backup_pending = False
        self._records: list[CredentialRecord] = self._load()

    @property
    def records_file(self) -> str:
        return self._path

    def __len__(self) -> int:
        return len(self._records)

    def _load(self) -> list[CredentialRecord]:
        """Read records from disk, falling back to an empty list.

        Entries that fail validation are skipped. Whenever anything in the
        file could not be used, the original is copied aside before the
        first rewrite.
        """
        try:
            data = load_json(self._path)
        except StorageError as e:
            logger.warning("Could not load %s, starting empty: %s", self._path, e)
            self._backup_pending = True
            return []

        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Unexpected layout in %s, starting empty", self._path)
            self._backup_pending = True
            return []

        records = []
        for position, entry in enumerate(data):
            try:
                records.append(CredentialRecord.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping invalid record %d in %s: %s", position, self._path, e)
                self._backup_pending = True

        log_event("store_loaded", "SUCCESS", {"records": len(records), "skipped": len(data) - len(records)})
        return records

    def _persist(self, records: list[CredentialRecord]) -> None:
        if self._backup_pending and os.path.exists(self._path):
            backup = backup_file(self._path)
            logger.warning("Kept unreadable contents of %s in %s", self._path, backup)
            log_event("store_backup", "SUCCESS", {"backup": backup})
        save_json(self._path, [r.model_dump() for r in records])
        self._backup_pending = False
        self._records = records

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._records):
            raise IndexOutOfRange(
                f"No record at index {index} (store holds {len(self._records)})"
            )

    def append(self, service: str, username: str, password: str) -> CredentialRecord:
        """Hash a password and save it as a new record.

        Args:
            service: Site or app name, must not be empty
            username: Account identifier
            password: Plain text password, only its hash is kept

        Returns:
            The stored record

        Raises:
            pydantic.ValidationError: If service is empty
            PersistenceError: If the file could not be written
        """
        record = CredentialRecord(
            service=service,
            username=username,
            password_hash=hash_password(password),
            created_at=_now(),
        )

        try:
            self._persist(self._records + [record])
        except StorageError:
            log_event("credential_saved", "FAILURE", {"service": service})
            raise

        logger.info("Saved credential for %s", service)
        log_event("credential_saved", "SUCCESS", {"service": service, "index": len(self._records) - 1})
        return record

    def search(self, query: str) -> list[CredentialRecord]:
        """Return records whose service contains query, ignoring case.

        An empty query matches every record.
        """
        needle = query.lower()
        return [r for r in self._records if needle in r.service.lower()]

    def delete_at(self, index: int) -> CredentialRecord:
        """Remove the record at index.

        Returns:
            The removed record

        Raises:
            IndexOutOfRange: If index is not between 0 and len-1
            PersistenceError: If the file could not be written
        """
        self._check_index(index)

        removed = self._records[index]
        remaining = self._records[:index] + self._records[index + 1:]
        try:
            self._persist(remaining)
        except StorageError:
            log_event("credential_deleted", "FAILURE", {"service": removed.service})
            raise

        logger.info("Deleted credential for %s", removed.service)
        log_event("credential_deleted", "SUCCESS", {"service": removed.service, "index": index})
        return removed

    def verify(self, index: int, password: str) -> bool:
        """Check a candidate password against the record at index.

        Raises:
            IndexOutOfRange: If index is not between 0 and len-1
        """
        self._check_index(index)
        return verify_password(password, self._records[index].password_hash)

    # Defined last: inside the class body this name shadows the builtin.
    def list(self) -> "list[CredentialRecord]":
        """Return all records in insertion order."""
        return list(self._records)
