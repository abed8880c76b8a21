"""Pydantic models for login configuration and authentication results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AuthOutcome(str, Enum):
    """Result of probing the UI for an authenticated session."""

    AUTHENTICATED = "authenticated"
    NOT_AUTHENTICATED = "not_authenticated"
    UNKNOWN = "unknown"

    @property
    def is_authenticated(self) -> bool:
        return self is AuthOutcome.AUTHENTICATED


class LoginConfig(BaseModel):
    """Per-test login behaviour.

    ``require_auth``: perform an interactive login when no cached session
    was reused. ``require_auth_state``: probe for an existing session before
    deciding whether to log in.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    require_auth: bool = True
    require_auth_state: bool = True

    def with_overrides(self, **overrides: bool | None) -> LoginConfig:
        """Return a copy with the non-``None`` overrides applied."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return LoginConfig(**values)


class Credentials(BaseModel):
    """Portal login credentials."""

    username: str
    password: str = Field(repr=False)
