"""OrangeHRM side navigation menu."""

from __future__ import annotations

from playwright.async_api import expect

from ..config import TIMEOUTS
from ..constants import SELECTORS, SIDE_MENU_ITEMS
from .base import BasePage


class SideMenuPage(BasePage):
    @property
    def dashboard_menu(self):
        return self.page.locator(SELECTORS["dashboard_menu"])

    async def is_dashboard_menu_visible(self) -> bool:
        return await self.is_visible(self.dashboard_menu)

    async def verify_dashboard_menu_is_visible(self):
        await expect(self.dashboard_menu).to_be_visible(timeout=TIMEOUTS["expect"])

    async def verify_side_menus_are_visible(self):
        await expect(self.page.locator(SELECTORS["side_menu"])).to_be_visible(timeout=TIMEOUTS["expect"])
        items = self.page.locator(SELECTORS["side_menu_item"])
        for name in SIDE_MENU_ITEMS:
            await expect(items.filter(has_text=name).first).to_be_visible()
