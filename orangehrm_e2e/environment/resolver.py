"""Chooses where portal settings come from for the current run."""

from __future__ import annotations

from typing import Optional

from ..models.login import Credentials
from .detector import is_running_in_ci
from .variables import FetchCIEnvironmentVariables, FetchLocalEnvironmentVariables


class EnvironmentResolver:
    """Portal base URL and credentials, from CI variables or the stage file."""

    def __init__(
        self,
        ci_variables: Optional[FetchCIEnvironmentVariables] = None,
        local_variables: Optional[FetchLocalEnvironmentVariables] = None,
    ):
        self._ci_variables = ci_variables or FetchCIEnvironmentVariables()
        self._local_variables = local_variables or FetchLocalEnvironmentVariables()

    def _source(self):
        return self._ci_variables if is_running_in_ci() else self._local_variables

    async def get_portal_base_url(self) -> str:
        return self._source().get_portal_base_url()

    async def get_credentials(self) -> Credentials:
        return self._source().get_credentials()
