"""Shared Playwright page-object behaviour."""

from __future__ import annotations

from playwright.async_api import Error as PlaywrightError, Locator, Page

from ..config import TIMEOUTS
from ..errors import NavigationError
from ..log import get_logger

logger = get_logger(__name__)


class BasePage:
    """Wraps a Playwright page; subclasses add selectors and checks."""

    def __init__(self, page: Page):
        self.page = page

    async def navigate_to_url(self, url: str):
        """Open ``url``, retrying with a lighter wait when the DOM is slow."""
        timeout = TIMEOUTS["navigation"]
        try:
            response = await self.page.goto(url, wait_until="domcontentloaded", timeout=timeout)
        except PlaywrightError as e:
            logger.warning(f"Navigation timeout, trying with longer wait: {e}")
            response = await self.page.goto(url, wait_until="commit", timeout=timeout * 2)

        if response is not None and response.status >= 400:
            raise NavigationError(f"Navigation to {url} failed with HTTP {response.status}")
        logger.debug(f"Navigated to {self.page.url}")

    async def is_visible(self, locator: Locator) -> bool:
        try:
            return await locator.is_visible()
        except PlaywrightError:
            return False
