"""File-backed persistence of the authenticated browser session record."""

from __future__ import annotations

import asyncio
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from ..config import AUTH_STATE_DIR, AUTH_STATE_FILE
from ..constants import EMPTY_STORAGE_STATE, SETUP_TAGS
from ..errors import SessionRecordError, capture_error
from ..log import get_logger
from ..models.session import SessionRecordStatus

logger = get_logger(__name__)


def resolve_auth_state_file_path(
    state_dir: Optional[Path | str] = None, file_name: Optional[str] = None
) -> Path:
    """Return the absolute location of the session record file."""
    directory = Path(state_dir) if state_dir is not None else AUTH_STATE_DIR
    return (directory / (file_name or AUTH_STATE_FILE)).resolve()


def _tags_of(test_context: Any) -> set[str]:
    """Collect static tags from a pytest node or any object carrying tags."""
    tags: set[str] = set()

    iter_markers = getattr(test_context, "iter_markers", None)
    if callable(iter_markers):
        tags.update(marker.name for marker in iter_markers())

    declared: Iterable[str] = getattr(test_context, "tags", None) or ()
    tags.update(tag.lstrip("@") for tag in declared)

    for attr in ("title", "name"):
        text = getattr(test_context, attr, None)
        if isinstance(text, str):
            tags.update(word[1:] for word in text.split() if word.startswith("@"))

    return {tag.lower() for tag in tags}


class SessionStore:
    """Reads, writes and ages the single session record file.

    The path is fixed at construction. Nothing here locks the file: the
    setup step writes it before workers start reading.
    """

    def __init__(self, path: Optional[Path | str] = None, clock: Callable[[], float] = time.time):
        self._path = Path(path).resolve() if path is not None else resolve_auth_state_file_path()
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def initialize_empty_auth_state_file(self) -> bool:
        """Overwrite the record with an empty placeholder.

        Returns False instead of raising when the write fails.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(EMPTY_STORAGE_STATE, indent=2), encoding="utf-8")
            logger.debug(f"Initialized empty auth state file at: {self._path}")
            return True
        except OSError as e:
            capture_error(e, "initialize_empty_auth_state_file", "Failed to initialize auth state file")
            return False

    async def does_auth_state_file_exist(self) -> bool:
        return await asyncio.to_thread(self._path.is_file)

    async def is_auth_state_expired(self, expiry_minutes: int) -> bool:
        """True when the record is older than ``expiry_minutes``.

        The file must exist; a missing record raises FileNotFoundError.
        """
        if expiry_minutes < 0:
            raise ValueError(f"expiry_minutes must be >= 0, got {expiry_minutes}")
        stat = await asyncio.to_thread(self._path.stat)
        age = self._clock() - stat.st_mtime
        return age > expiry_minutes * 60

    async def read_auth_state(self) -> dict:
        """Parse the record, raising SessionRecordError when it is malformed."""
        raw = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        try:
            state = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SessionRecordError(f"Auth state file is not valid JSON: {self._path}") from e

        if not isinstance(state, dict):
            raise SessionRecordError(f"Auth state file must hold an object: {self._path}")
        for key in ("cookies", "origins"):
            if not isinstance(state.get(key, []), list):
                raise SessionRecordError(f"Auth state field '{key}' must be a list: {self._path}")
        return state

    async def is_auth_state_empty(self) -> bool:
        state = await self.read_auth_state()
        return not state.get("cookies") and not state.get("origins")

    async def describe(self, expiry_minutes: int) -> SessionRecordStatus:
        """Summarize the record for diagnostics. Never raises."""
        status = SessionRecordStatus(path=str(self._path))
        try:
            if not await self.does_auth_state_file_exist():
                status.message = "No session record"
                return status

            mtime = (await asyncio.to_thread(self._path.stat)).st_mtime
            status.exists = True
            status.modified_at = datetime.fromtimestamp(mtime).isoformat()
            status.age_seconds = round(self._clock() - mtime, 3)
            status.is_expired = await self.is_auth_state_expired(expiry_minutes)
            status.is_empty = await self.is_auth_state_empty()
            status.is_valid = not status.is_expired and not status.is_empty
            status.message = "Session record is reusable" if status.is_valid else "Session record is stale or empty"
        except (OSError, ValueError, SessionRecordError) as e:
            status.message = f"Session record unreadable: {e}"
        return status

    @staticmethod
    def should_skip_auth_setup(test_context: Any) -> bool:
        """True when the test manages its own login flow (tagged ``setup``)."""
        return bool(_tags_of(test_context) & SETUP_TAGS)
