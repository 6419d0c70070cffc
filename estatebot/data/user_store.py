import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Dict, Optional
from .base import UserStore, UserRecord
from ..core.config import settings

logger = logging.getLogger(__name__)

def user_to_dict(user: UserRecord) -> dict:
    created = user.created_at or datetime.now(timezone.utc)
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "password": user.password,
        "role": user.role,
        "createdAt": created.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
    }

def user_from_dict(d: dict) -> UserRecord:
    created = d.get("createdAt")
    return UserRecord(
        id=d["id"], name=d.get("name", ""), email=d["email"], password=d["password"],
        role=d.get("role", "user"),
        created_at=datetime.fromisoformat(created.replace("Z", "+00:00")) if created else None,
    )

class MemoryUserStore(UserStore):
    def __init__(self):
        self._users: Dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def _by_email(self, email: str) -> Optional[UserRecord]:
        # Caller holds the lock
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            return self._by_email(email)

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._users.get(user_id)

    def add(self, user: UserRecord) -> bool:
        with self._lock:
            if self._by_email(user.email):
                return False
            self._users[user.id] = user
        return True

class JsonUserStore(UserStore):
    """
    Users as a JSON array in DATA_DIR/users.json.
    """
    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not os.path.exists(path):
            self._write([])

    def _read(self) -> list:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError):
            logger.exception("Error reading users file %s", self.path)
            return []

    def _write(self, records: list) -> bool:
        temp = self.path + ".tmp"
        try:
            with open(temp, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(temp, self.path)
            return True
        except OSError:
            logger.exception("Error writing users file %s", self.path)
            return False

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        found = next((r for r in self._read() if r.get("email") == email), None)
        return user_from_dict(found) if found else None

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        found = next((r for r in self._read() if r.get("id") == user_id), None)
        return user_from_dict(found) if found else None

    def add(self, user: UserRecord) -> bool:
        with self._lock:
            records = self._read()
            if any(r.get("email") == user.email for r in records):
                return False
            records.append(user_to_dict(user))
            return self._write(records)

def user_store() -> UserStore:
    if settings.STORAGE_PROVIDER == "memory":
        return MemoryUserStore()
    return JsonUserStore(os.path.join(settings.DATA_DIR, "users.json"))
