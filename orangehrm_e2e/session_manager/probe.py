"""UI probes that report whether the browser is already logged in."""

from __future__ import annotations

from typing import Protocol

from ..log import get_logger
from ..models.login import AuthOutcome
from ..pages.side_menu import SideMenuPage

logger = get_logger(__name__)


class SessionProbe(Protocol):
    async def probe(self) -> AuthOutcome: ...


class DashboardMenuProbe:
    """Treats a visible Dashboard entry in the side menu as proof of login."""

    def __init__(self, side_menu_page: SideMenuPage):
        self._side_menu_page = side_menu_page

    async def probe(self) -> AuthOutcome:
        try:
            visible = await self._side_menu_page.is_dashboard_menu_visible()
        except Exception as e:
            logger.warning(f"Error checking authentication status: {e}")
            return AuthOutcome.UNKNOWN
        return AuthOutcome.AUTHENTICATED if visible else AuthOutcome.NOT_AUTHENTICATED
