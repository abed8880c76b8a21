"""OrangeHRM top bar: page header, upgrade link, and the user profile menu."""

from __future__ import annotations

import re

from playwright.async_api import expect

from ..config import TIMEOUTS
from ..constants import SELECTORS, USER_DROPDOWN_OPTIONS
from .base import BasePage


class TopMenuPage(BasePage):
    @property
    def header_title(self):
        return self.page.locator(SELECTORS["header_title"])

    @property
    def dropdown_options(self):
        return self.page.locator(SELECTORS["user_dropdown_option"])

    async def assert_default_landing_page_is_dashboard(self, expected_title: str):
        await expect(self.header_title).to_have_text(expected_title, timeout=TIMEOUTS["expect"])

    async def verify_and_assert_top_menu_are_visible(
        self, header_title: str, upgrade_href: str, upgrade_title: str
    ):
        await self.assert_default_landing_page_is_dashboard(header_title)
        upgrade = self.page.locator(SELECTORS["upgrade_link"])
        await expect(upgrade).to_be_visible()
        await expect(upgrade).to_have_attribute("href", re.compile(re.escape(upgrade_href)))
        await expect(upgrade.locator("button")).to_have_attribute("title", upgrade_title)

    async def click_user_profile_menu(self):
        await self.page.locator(SELECTORS["user_dropdown"]).click()

    async def verify_user_profile_dropdown_options_are_visible(self):
        await self.click_user_profile_menu()
        for option in USER_DROPDOWN_OPTIONS:
            await expect(self.dropdown_options.filter(has_text=option)).to_be_visible()

    async def click_user_profile_dropdown_option_about(self):
        await self.dropdown_options.filter(has_text="About").click()

    async def verify_and_assert_about_dialog_box(self, *labels: str):
        await expect(self.page.locator(SELECTORS["about_dialog"])).to_be_visible(timeout=TIMEOUTS["expect"])
        dialog_labels = self.page.locator(SELECTORS["about_dialog_label"])
        for label in labels:
            await expect(dialog_labels.filter(has_text=label).first).to_be_visible()
