"""One-time setup run before any test of a session."""

from __future__ import annotations

import asyncio
from typing import Optional

from ..errors import SessionRecordError, capture_error
from ..log import get_logger
from ..session_manager.store import SessionStore
from .loader import EnvironmentConfigLoader

logger = get_logger(__name__)


async def initialize_environment(loader: Optional[EnvironmentConfigLoader] = None):
    loader = loader or EnvironmentConfigLoader()
    try:
        await loader.initialize()
    except Exception as e:
        capture_error(e, "initialize_environment", "Failed to initialize environment variables")
        raise


async def reset_auth_state(store: Optional[SessionStore] = None):
    """Start the run from an empty session record."""
    store = store or SessionStore()
    if not store.initialize_empty_auth_state_file():
        raise SessionRecordError(f"Could not reset auth state file at {store.path}")


async def global_setup(
    store: Optional[SessionStore] = None,
    loader: Optional[EnvironmentConfigLoader] = None,
):
    """Load the environment and reset the session record concurrently."""
    try:
        await asyncio.gather(initialize_environment(loader), reset_auth_state(store))
        logger.debug("Global setup completed successfully")
    except Exception as e:
        capture_error(e, "global_setup", "Global setup failed")
        raise
