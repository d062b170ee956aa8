"""
Credential store implementations.

- InMemoryCredentialStore: process-local dict, used for development and tests
- SupabaseCredentialStore: `users` table with a unique username column

Both implement ICredentialStore. Duplicate detection is part of the insert
itself, so two concurrent signups for the same username cannot both succeed.
"""

import logging
import threading
import uuid
from typing import Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository

from .exceptions import DuplicateUserError, UserNotFoundError
from .models import CredentialRecord
from .passwords import dummy_verify, hash_password, verify_password

logger = logging.getLogger(__name__)

# Postgres error code for unique_violation
UNIQUE_VIOLATION = "23505"


class InMemoryCredentialStore:
    """
    Credential store held in process memory.

    Hashing happens outside the lock; only the check-and-insert is
    serialized. Records are lost when the process exits.
    """

    def __init__(self, rounds: int = 10):
        self._rounds = rounds
        self._records: dict[str, CredentialRecord] = {}
        self._lock = threading.Lock()

    def create(self, username: str, password: str) -> CredentialRecord:
        record = CredentialRecord(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=hash_password(password, self._rounds),
        )
        with self._lock:
            if username in self._records:
                raise DuplicateUserError(username)
            self._records[username] = record
        logger.info(f"Created credential record for {username}")
        return record

    def verify(self, username: str, password: str) -> bool:
        record = self.get(username)
        if record is None:
            dummy_verify(password, self._rounds)
            raise UserNotFoundError(username)
        return verify_password(password, record.password_hash)

    def get(self, username: str) -> Optional[CredentialRecord]:
        with self._lock:
            return self._records.get(username)


class SupabaseCredentialStore(BaseRepository[CredentialRecord]):
    """
    Credential store backed by a Supabase (Postgres) table.

    Expects a table with columns `id` (uuid), `username` (text, unique)
    and `password_hash` (text). The unique constraint makes the insert an
    atomic insert-if-absent.
    """

    def __init__(self, db: Client, table: str = "users", rounds: int = 10) -> None:
        super().__init__(db, table)
        self._rounds = rounds

    def create(self, username: str, password: str) -> CredentialRecord:
        row = {
            "id": str(uuid.uuid4()),
            "username": username,
            "password_hash": hash_password(password, self._rounds),
        }
        try:
            record = self._insert_one(row)
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateUserError(username)
            raise
        logger.info(f"Created credential record for {username}")
        return record

    def verify(self, username: str, password: str) -> bool:
        record = self.get(username)
        if record is None:
            dummy_verify(password, self._rounds)
            raise UserNotFoundError(username)
        return verify_password(password, record.password_hash)

    def get(self, username: str) -> Optional[CredentialRecord]:
        return self._find_one("username", username)

    def _to_model(self, row: dict) -> CredentialRecord:
        return CredentialRecord(
            id=str(row["id"]),
            username=row["username"],
            password_hash=row["password_hash"],
        )
