"""Sources of portal URL and credentials: process env (CI) or stage env files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from ..config import ENV, ENVS_DIR
from ..errors import EnvironmentConfigError
from ..models.login import Credentials

PORTAL_BASE_URL_KEY = "PORTAL_BASE_URL"
USERNAME_KEY = "PORTAL_USERNAME"
PASSWORD_KEY = "PORTAL_PASSWORD"
REQUIRED_KEYS = (PORTAL_BASE_URL_KEY, USERNAME_KEY, PASSWORD_KEY)


def env_file_path(env_name: str = ENV, envs_dir: Path = ENVS_DIR) -> Path:
    """Location of the stage file, e.g. ``envs/.env.qa``."""
    return Path(envs_dir) / f".env.{env_name}"


class _VariableSource:
    origin = "environment"

    def _values(self) -> Mapping[str, Optional[str]]:
        raise NotImplementedError

    def _require(self, key: str) -> str:
        value = (self._values().get(key) or "").strip()
        if not value:
            raise EnvironmentConfigError(f"{key} is not set in the {self.origin}")
        return value

    def get_portal_base_url(self) -> str:
        return self._require(PORTAL_BASE_URL_KEY).rstrip("/")

    def get_credentials(self) -> Credentials:
        return Credentials(username=self._require(USERNAME_KEY), password=self._require(PASSWORD_KEY))


class FetchCIEnvironmentVariables(_VariableSource):
    """Reads variables injected by the CI pipeline."""

    origin = "CI environment"

    def _values(self) -> Mapping[str, Optional[str]]:
        return os.environ


class FetchLocalEnvironmentVariables(_VariableSource):
    """Reads variables from the local stage file, process env taking precedence."""

    def __init__(self, path: Optional[Path] = None):
        self._path = path or env_file_path()
        self.origin = f"environment or {self._path}"

    def _values(self) -> Mapping[str, Optional[str]]:
        values: dict[str, Optional[str]] = {}
        if self._path.is_file():
            values.update(dotenv_values(self._path))
        values.update({key: os.environ[key] for key in REQUIRED_KEYS if os.environ.get(key)})
        return values
