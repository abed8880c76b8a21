"""Decides whether a stored session record may be reused."""

from __future__ import annotations

from typing import Optional

from ..config import SESSION_EXPIRY_MINUTES
from ..errors import SessionRecordError, advisory
from ..log import get_logger
from .store import SessionStore

logger = get_logger(__name__)


class SessionValidityPolicy:
    """Existence, freshness and emptiness checks combined into one decision.

    Errors never escape: a failed check means "log in again".
    """

    def __init__(self, store: SessionStore, default_expiry_minutes: int = SESSION_EXPIRY_MINUTES):
        self._store = store
        self._default_expiry = default_expiry_minutes

    @property
    def store(self) -> SessionStore:
        return self._store

    def _window(self, expiry_minutes: Optional[int]) -> int:
        return self._default_expiry if expiry_minutes is None else expiry_minutes

    @advisory(False, "Error checking session validity")
    async def is_session_valid(self, expiry_minutes: Optional[int] = None) -> bool:
        """True when the record exists, is fresh, and holds a captured session."""
        window = self._window(expiry_minutes)

        if not await self._store.does_auth_state_file_exist():
            logger.info("No session state file exists")
            return False

        if await self._store.is_auth_state_expired(window):
            logger.info(f"Session state is expired (older than {window} minutes)")
            return False

        try:
            if await self._store.is_auth_state_empty():
                logger.info("Session state is an empty placeholder")
                return False
        except SessionRecordError as e:
            logger.warning(f"Session state is corrupt, a new login is required: {e}")
            return False

        return True

    @advisory(None, "[Auth] Error retrieving storage state")
    async def get_storage_state(self, expiry_minutes: Optional[int] = None) -> Optional[str]:
        """Return the record path when it can seed a browser context, else None."""
        storage_path = self._store.path

        if not await self._store.does_auth_state_file_exist():
            logger.warning(f"Auth state file not found at: {storage_path}")
            return None

        if await self.is_session_valid(expiry_minutes):
            logger.info(f"Using existing auth state from: {storage_path}")
            return str(storage_path)

        logger.warning("Auth state file exists but is expired or empty")
        return None
