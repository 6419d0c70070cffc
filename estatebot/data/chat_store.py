import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Dict, List
from .base import ChatStore, ChatTurn
from ..core.config import settings

logger = logging.getLogger(__name__)

def _iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

def turn_to_dict(turn: ChatTurn) -> dict:
    return {"text": turn.text, "sender": turn.sender, "timestamp": _iso(turn.timestamp)}

def turn_from_dict(d: dict) -> ChatTurn:
    ts = d.get("timestamp")
    stamp = datetime.fromisoformat(ts.replace("Z", "+00:00")) if ts else datetime.now(timezone.utc)
    return ChatTurn(text=d.get("text", ""), sender=d.get("sender", "bot"), timestamp=stamp)

class MemoryChatStore(ChatStore):
    """
    Process-local transcripts. Used by tests and STORAGE_PROVIDER=memory.
    """
    def __init__(self):
        self._chats: Dict[str, List[ChatTurn]] = {}
        self._lock = threading.Lock()

    def load_user_chat(self, user_id: str) -> List[ChatTurn]:
        with self._lock:
            return list(self._chats.get(user_id, []))

    def append_user_chat(self, user_id: str, turns: List[ChatTurn]) -> bool:
        with self._lock:
            self._chats.setdefault(user_id, []).extend(turns)
        return True

class JsonChatStore(ChatStore):
    """
    All transcripts in one JSON file:
      [{"userId", "messages": [{text, sender, timestamp}], "createdAt", "updatedAt"}]
    Writes go through a temp file + os.replace so readers never see a torn file.
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
            logger.exception("Error reading chat history file %s", self.path)
            return []

    def _write(self, records: list) -> bool:
        temp = self.path + ".tmp"
        try:
            with open(temp, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(temp, self.path)
            return True
        except OSError:
            logger.exception("Error writing chat history file %s", self.path)
            return False

    def load_user_chat(self, user_id: str) -> List[ChatTurn]:
        for record in self._read():
            if record.get("userId") == user_id:
                return [turn_from_dict(m) for m in record.get("messages", [])]
        return []

    def append_user_chat(self, user_id: str, turns: List[ChatTurn]) -> bool:
        now = _iso(datetime.now(timezone.utc))
        with self._lock:
            records = self._read()
            record = next((r for r in records if r.get("userId") == user_id), None)
            if record is None:
                record = {"userId": user_id, "messages": [], "createdAt": now, "updatedAt": now}
                records.append(record)
            record["messages"].extend(turn_to_dict(t) for t in turns)
            record["updatedAt"] = now
            return self._write(records)

def chat_store() -> ChatStore:
    """
    Factory picks json or memory based on env flags.
    """
    if settings.STORAGE_PROVIDER == "memory":
        return MemoryChatStore()
    return JsonChatStore(os.path.join(settings.DATA_DIR, "chat_history.json"))
