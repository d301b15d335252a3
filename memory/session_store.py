"""Session store holding the signed-in user profile.

Authentication is a mock: any non-empty identifier/secret pair succeeds. The
profile is mirrored to local storage under :data:`USER_KEY` so that it
survives a restart, and cleared again on logout.
"""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import fields, replace
from typing import Any, Optional

from closet_app.logging_config import get_logger, log_event
from memory.local_storage import USER_KEY, LocalStorage
from models.clothing_item import new_id
from models.user import User

LOGGER = get_logger(__name__)

_PROFILE_FIELDS = {f.name for f in fields(User)} - {"id"}


class SessionStore:
    """Owns the current :class:`User` and its durable copy."""

    def __init__(self, storage: LocalStorage, delay_seconds: float = 0.8) -> None:
        self.storage = storage
        self.delay_seconds = delay_seconds
        self._user: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def load(self) -> Optional[User]:
        """Restore the persisted profile, if any. Call once at start-up."""

        self._user = self._read_persisted()
        return self._user

    def _read_persisted(self) -> Optional[User]:
        raw = self.storage.get_item(USER_KEY)
        if not raw:
            return None
        try:
            payload = json.loads(raw)
            if not isinstance(payload, dict):
                raise ValueError("stored user is not an object")
            return User.from_dict(payload)
        except (ValueError, TypeError) as exc:
            log_event(LOGGER, logging.WARNING, "stored_user_unreadable", reason=str(exc))
            return None

    def _persist(self, user: User) -> None:
        self._user = user
        self.storage.set_item(USER_KEY, json.dumps(user.to_dict(), ensure_ascii=False))

    async def _simulate_latency(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def login(self, identifier: str, secret: str) -> bool:
        await self._simulate_latency()
        if not identifier or not secret:
            log_event(LOGGER, logging.INFO, "login_rejected", reason="missing_credentials")
            return False

        stored = self._read_persisted()
        if stored is not None and stored.email_or_phone == identifier:
            self._user = stored
            log_event(LOGGER, logging.INFO, "login_restored_profile", user_id=stored.id)
            return True

        placeholder = User(
            id=f"user-{new_id()[:8]}",
            name=identifier.split("@", 1)[0] or identifier,
            email_or_phone=identifier,
        )
        self._persist(placeholder)
        log_event(LOGGER, logging.INFO, "login_created_profile", user_id=placeholder.id)
        return True

    async def register(self, name: str, identifier: str, secret: str) -> bool:
        await self._simulate_latency()
        if not name or not identifier or not secret:
            log_event(LOGGER, logging.INFO, "register_rejected", reason="missing_fields")
            return False

        user = User(id=new_id(), name=name, email_or_phone=identifier)
        self._persist(user)
        log_event(LOGGER, logging.INFO, "register_completed", user_id=user.id)
        return True

    def logout(self) -> None:
        self._user = None
        self.storage.remove_item(USER_KEY)
        log_event(LOGGER, logging.INFO, "logout_completed")

    async def update_profile(self, **updates: Any) -> Optional[User]:
        """Merge ``updates`` into the current profile and persist it."""

        if self._user is None:
            return None
        changes = {key: value for key, value in updates.items() if key in _PROFILE_FIELDS}
        updated = replace(self._user, **changes)
        self._persist(updated)
        log_event(LOGGER, logging.INFO, "profile_updated", fields=sorted(changes))
        return updated


__all__ = ["SessionStore"]
