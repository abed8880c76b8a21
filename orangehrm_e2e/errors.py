"""Suite exceptions and the central error-capture hook."""

from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, TypeVar

from .log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class SuiteError(Exception):
    """Base class for failures raised by the suite itself."""


class EnvironmentConfigError(SuiteError):
    """Environment variables are missing or the portal is unreachable."""


class NavigationError(SuiteError):
    """The browser could not reach the requested page."""


class SessionRecordError(SuiteError):
    """The stored session record could not be read or written."""


def capture_error(error: BaseException, source: str, message: str) -> None:
    """Log a failure with the operation it came from.

    Callers re-raise afterwards so pytest still records the failure
    (screenshots, traces and report entries hang off that).
    """
    logger.error(f"[{source}] {message}: {type(error).__name__}: {error}")


def advisory(default: Any, message: str) -> Callable:
    """Collapse any exception from an advisory async query into ``default``.

    Used for checks whose failure should send the caller down the safe
    path (log in again) instead of failing the run.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.warning(f"{message}: {e}")
                return default

        return wrapper

    return decorator
