"""Pydantic models for session record state."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class SessionRecordStatus(BaseModel):
    """Snapshot of the stored browser session record."""

    path: str
    exists: bool = False
    modified_at: Optional[str] = None
    age_seconds: Optional[float] = None
    is_empty: bool = True
    is_expired: bool = True
    is_valid: bool = False
    message: str = ""
