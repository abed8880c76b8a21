"""OrangeHRM login page."""

from __future__ import annotations

from playwright.async_api import expect

from ..config import TIMEOUTS
from ..constants import LOGIN_ERROR_MESSAGE, SELECTORS
from .base import BasePage


class LoginPage(BasePage):
    @property
    def logo(self):
        return self.page.locator(SELECTORS["login_logo"])

    @property
    def error_message(self):
        return self.page.locator(SELECTORS["login_error"])

    async def login_to_portal(self, username: str, password: str):
        await self.page.locator(SELECTORS["username_input"]).fill(username)
        await self.page.locator(SELECTORS["password_input"]).fill(password)
        await self.page.locator(SELECTORS["login_button"]).click()

    async def verify_logo_is_visible(self):
        await expect(self.logo).to_be_visible(timeout=TIMEOUTS["expect"])

    async def verify_error_message_hidden(self):
        await expect(self.error_message).to_be_hidden(timeout=TIMEOUTS["expect"])

    async def verify_error_message_is_visible(self):
        await expect(self.error_message).to_be_visible(timeout=TIMEOUTS["expect"])
        await expect(self.error_message).to_have_text(LOGIN_ERROR_MESSAGE)
