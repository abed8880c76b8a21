"""Loads and checks the stage environment before a run starts."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import httpx
from dotenv import load_dotenv

from ..config import ENV, PORTAL_PREFLIGHT, PREFLIGHT_TIMEOUT
from ..errors import EnvironmentConfigError
from ..log import get_logger
from .detector import is_running_in_ci
from .variables import PORTAL_BASE_URL_KEY, REQUIRED_KEYS, env_file_path

logger = get_logger(__name__)


class EnvironmentConfigLoader:
    """Loads ``envs/.env.<ENV>`` into the process and validates it.

    Values already present in the process environment win over the file.
    With ``preflight`` the portal URL must answer below HTTP 500.
    """

    def __init__(
        self,
        env_name: str = ENV,
        path: Optional[Path] = None,
        preflight: bool = PORTAL_PREFLIGHT,
        timeout: float = PREFLIGHT_TIMEOUT,
    ):
        self.env_name = env_name
        self.path = path or env_file_path(env_name)
        self.preflight = preflight
        self.timeout = timeout

    async def initialize(self):
        if self.path.is_file():
            load_dotenv(self.path, override=False)
            logger.info(f"Loaded '{self.env_name}' environment from {self.path}")
        elif is_running_in_ci():
            logger.info("Using CI-provided environment variables")
        else:
            raise EnvironmentConfigError(f"Environment file not found: {self.path}")

        missing = [key for key in REQUIRED_KEYS if not os.getenv(key, "").strip()]
        if missing:
            raise EnvironmentConfigError(f"Missing required environment variables: {', '.join(missing)}")

        if self.preflight:
            await self._check_portal_reachable(os.environ[PORTAL_BASE_URL_KEY])

    async def _check_portal_reachable(self, url: str):
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                resp = await client.get(url)
        except httpx.HTTPError as e:
            raise EnvironmentConfigError(f"Portal is not reachable at {url}: {e}") from e

        if resp.status_code >= 500:
            raise EnvironmentConfigError(f"Portal at {url} answered HTTP {resp.status_code}")
        logger.info(f"Portal reachable at {url} (HTTP {resp.status_code})")
