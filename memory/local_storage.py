"""Key-value storage standing in for the browser's local storage."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

USER_KEY = "sc_user"
CHAT_HISTORY_KEY = "sc_lab_messages"


class LocalStorage:
    """Interface for a flat string-to-string store."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class InMemoryStorage(LocalStorage):
    """Process-local storage used by tests and throwaway sessions."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove_item(self, key: str) -> None:
        self._values.pop(key, None)


class JSONFileStorage(LocalStorage):
    """JSON-file-backed storage suitable for local runs.

    The whole store is one JSON object on disk; values stay opaque strings so
    callers own their own encoding, exactly like browser local storage.
    """

    def __init__(self, path: str | Path = "data/local_storage.json") -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _save(self, payload: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        payload = self._load()
        payload[key] = value
        self._save(payload)

    def remove_item(self, key: str) -> None:
        payload = self._load()
        if key in payload:
            del payload[key]
            self._save(payload)


__all__ = ["LocalStorage", "InMemoryStorage", "JSONFileStorage", "USER_KEY", "CHAT_HISTORY_KEY"]
