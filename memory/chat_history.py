"""Persisted stylist chat history."""
from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from closet_app.logging_config import get_logger, log_event
from logic.messages import message
from memory.local_storage import CHAT_HISTORY_KEY, LocalStorage
from models.clothing_item import new_id
from models.taxonomy import Language

LOGGER = get_logger(__name__)

INTRO_MESSAGE_ID = "init"


@dataclass
class ChatMessage:
    """Represents one conversational turn."""

    role: str
    content: str
    id: str = field(default_factory=new_id)
    image: Optional[str] = None
    created_at: float = field(default_factory=lambda: time.time())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ChatHistory:
    """Ordered list of chat turns mirrored to local storage on every change."""

    def __init__(self, storage: LocalStorage) -> None:
        self.storage = storage
        self._messages: List[ChatMessage] = []

    def load(self, language: Language) -> List[ChatMessage]:
        """Restore history from storage, seeding the intro message when empty."""

        self._messages = self._read_persisted()
        if not self._messages:
            self.reset(language)
        return self.messages

    def _read_persisted(self) -> List[ChatMessage]:
        raw = self.storage.get_item(CHAT_HISTORY_KEY)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
            return [ChatMessage(**entry) for entry in payload]
        except (ValueError, TypeError) as exc:
            log_event(LOGGER, logging.WARNING, "chat_history_unreadable", reason=str(exc))
            return []

    def _save(self) -> None:
        self.storage.set_item(
            CHAT_HISTORY_KEY,
            json.dumps([entry.to_dict() for entry in self._messages], ensure_ascii=False),
        )

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    def append(self, role: str, content: str, image: Optional[str] = None) -> ChatMessage:
        entry = ChatMessage(role=role, content=content, image=image)
        self._messages.append(entry)
        self._save()
        return entry

    def reset(self, language: Language) -> None:
        self._messages = [ChatMessage(role="ai", content=message("lab_intro", language), id=INTRO_MESSAGE_ID)]
        self._save()

    def preceding_user_message(self, content: str) -> Optional[str]:
        """Return the user prompt that produced the AI reply ``content``."""

        for index, entry in enumerate(self._messages):
            if entry.content == content and entry.role == "ai":
                if index > 0 and self._messages[index - 1].role == "user":
                    return self._messages[index - 1].content
                return None
        return None


__all__ = ["ChatMessage", "ChatHistory", "INTRO_MESSAGE_ID"]
