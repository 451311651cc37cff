from __future__ import annotations

import threading
import uuid
from typing import Any

import bcrypt


class DuplicateUsernameError(ValueError):
    pass


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _public(record: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in record.items() if k != "password_hash"}


class AccountStore:
    """In-memory account store. Returned profiles never include the password hash."""

    def __init__(self) -> None:
        self._accounts: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def create(
        self,
        username: str,
        password: str,
        home_address: str,
        work_address: str | None = None,
        is_worker: bool = False,
    ) -> dict[str, Any]:
        password_hash = _hash_password(password)
        with self._lock:
            if self._find_record(username) is not None:
                raise DuplicateUsernameError(username)
            record = {
                "id": uuid.uuid4().hex,
                "username": username,
                "password_hash": password_hash,
                "home_address": home_address,
                "work_address": work_address,
                "is_worker": is_worker,
            }
            self._accounts[record["id"]] = record
            return _public(record)

    def _find_record(self, username: str) -> dict[str, Any] | None:
        # Caller must hold self._lock
        for record in self._accounts.values():
            if record["username"] == username:
                return record
        return None

    def find_by_id(self, user_id: str) -> dict[str, Any] | None:
        with self._lock:
            record = self._accounts.get(user_id)
            return _public(record) if record else None

    def find_by_username(self, username: str) -> dict[str, Any] | None:
        with self._lock:
            record = self._find_record(username)
            return _public(record) if record else None

    def update(self, user_id: str, **fields: Any) -> dict[str, Any] | None:
        """Update profile fields; ``None`` values are ignored."""
        allowed = {"username", "home_address", "work_address"}
        with self._lock:
            record = self._accounts.get(user_id)
            if record is None:
                return None
            new_username = fields.get("username")
            if new_username and new_username != record["username"]:
                if self._find_record(new_username) is not None:
                    raise DuplicateUsernameError(new_username)
            for key, value in fields.items():
                if key in allowed and value is not None:
                    record[key] = value
            return _public(record)

    def authenticate(self, username: str, password: str) -> dict[str, Any] | None:
        """Verify credentials. Returns the public profile or ``None``."""
        with self._lock:
            record = self._find_record(username)
            if record is None:
                return None
            password_hash = record["password_hash"]
            profile = _public(record)
        # bcrypt is slow; verify outside the lock
        if _verify_password(password, password_hash):
            return profile
        return None


_default_store = AccountStore()


def get_account_store() -> AccountStore:
    return _default_store
