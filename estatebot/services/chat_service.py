import logging
from datetime import datetime, timezone
from typing import List

from fastapi import HTTPException

from ..core.errors import InvalidInput
from ..core.metrics import INTENT_COUNT, VALUATION_COUNT
from ..data.base import ChatStore, ChatTurn, PropertyDetails
from .dialogue_service import DialogueService, Reply

logger = logging.getLogger(__name__)

class ChatService:
    """
    Host-side wrapper around the dialogue engine:
      reply = dialogue.handle(...) → metrics → transcript append (signed-in users)
    A failed transcript write is logged and never fails the chat request.
    """
    def __init__(self, dialogue: DialogueService, store: ChatStore):
        self.dialogue = dialogue
        self.store = store

    def chat(self, message: str | None, details: PropertyDetails | None, user_id: str | None) -> Reply:
        logger.info("User query: %r", message)
        try:
            reply = self.dialogue.handle(message, details)
        except InvalidInput as exc:
            VALUATION_COUNT.labels(outcome="invalid").inc()
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        INTENT_COUNT.labels(kind=reply.intent.kind.value if reply.intent else "empty").inc()
        if details is not None:
            VALUATION_COUNT.labels(outcome="ok").inc()

        if user_id:
            self._record(user_id, message or "", reply.text)

        logger.info("Sending response: %s...", reply.text[:100])
        return reply

    def _record(self, user_id: str, message: str, reply_text: str) -> None:
        now = datetime.now(timezone.utc)
        turns = [
            ChatTurn(text=message, sender="user", timestamp=now),
            ChatTurn(text=reply_text, sender="bot", timestamp=now),
        ]
        if self.store.append_user_chat(user_id, turns):
            logger.info("Saved chat history for user %s", user_id)
        else:
            logger.error("Error saving chat history for user %s", user_id)

    def history(self, user_id: str) -> List[ChatTurn]:
        return self.store.load_user_chat(user_id)
