"""Captures and restores the browser session of a test page."""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Page

from ..config import SESSION_EXPIRY_MINUTES
from ..errors import capture_error
from ..log import get_logger
from .policy import SessionValidityPolicy
from .store import SessionStore

logger = get_logger(__name__)


class BrowserSessionManager:
    """Saves the page's storage state and answers reuse questions about it."""

    def __init__(
        self,
        page: Page,
        store: SessionStore,
        policy: Optional[SessionValidityPolicy] = None,
    ):
        self._page = page
        self._store = store
        self._policy = policy or SessionValidityPolicy(store)

    async def save_session_state(self):
        """Write the current cookies and storage to the session record."""
        storage_path = self._store.path
        try:
            storage_path.parent.mkdir(parents=True, exist_ok=True)
            await self._page.context.storage_state(path=str(storage_path))
            logger.debug(f"Successfully saved browser session state to: {storage_path}")
        except Exception as e:
            capture_error(e, "save_session_state", "Failed to save browser session state")
            raise

    async def is_session_valid(self, expiry_minutes: int = SESSION_EXPIRY_MINUTES) -> bool:
        return await self._policy.is_session_valid(expiry_minutes)

    async def get_storage_state(self, expiry_minutes: int = SESSION_EXPIRY_MINUTES) -> Optional[str]:
        return await self._policy.get_storage_state(expiry_minutes)

    def clear_session_state(self) -> bool:
        """Reset the record to the empty placeholder. Returns False on failure."""
        try:
            return self._store.initialize_empty_auth_state_file()
        except Exception as e:
            logger.error(f"Failed to clear session state: {e}")
            return False
