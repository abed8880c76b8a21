"""Fixtures for the live OrangeHRM suite.

Login flags come from ``@pytest.mark.login_config(...)`` (both default to
True). When ``require_auth`` is set, each test's browser context is seeded
with the stored session if it is still valid, so most tests start logged in.
"""

import asyncio
from typing import AsyncGenerator

import pytest
from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from orangehrm_e2e.config import BROWSER_HEADLESS, SESSION_EXPIRY_MINUTES, SLOW_MO, TIMEOUTS, VIEWPORT
from orangehrm_e2e.environment.detector import should_skip_browser_init
from orangehrm_e2e.environment.global_setup import global_setup
from orangehrm_e2e.environment.resolver import EnvironmentResolver
from orangehrm_e2e.log import get_logger
from orangehrm_e2e.models.login import LoginConfig
from orangehrm_e2e.pages.login import LoginPage
from orangehrm_e2e.pages.side_menu import SideMenuPage
from orangehrm_e2e.pages.top_menu import TopMenuPage
from orangehrm_e2e.session_manager.browser import BrowserSessionManager
from orangehrm_e2e.session_manager.context import AuthenticationContext
from orangehrm_e2e.session_manager.policy import SessionValidityPolicy
from orangehrm_e2e.session_manager.store import SessionStore

logger = get_logger(__name__)


def pytest_collection_modifyitems(config, items):
    """Run the session setup tests first; drop them when browser init is skipped."""
    setup_items = [item for item in items if item.get_closest_marker("e2e") and item.get_closest_marker("setup")]
    if not setup_items:
        return

    if should_skip_browser_init():
        config.hook.pytest_deselected(items=setup_items)
        items[:] = [item for item in items if item not in setup_items]
        return

    items[:] = setup_items + [item for item in items if item not in setup_items]


# ── Session-wide ─────────────────────────────────────────────────────────────


@pytest.fixture(scope="session", autouse=True)
def suite_setup():
    """Load the stage environment and reset the session record once per run."""
    asyncio.run(global_setup())


@pytest.fixture(scope="session")
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture(scope="session")
def session_policy(session_store) -> SessionValidityPolicy:
    return SessionValidityPolicy(session_store, SESSION_EXPIRY_MINUTES)


# ── Config ───────────────────────────────────────────────────────────────────


@pytest.fixture
def login_config(request) -> LoginConfig:
    marker = request.node.get_closest_marker("login_config")
    return LoginConfig(**marker.kwargs) if marker else LoginConfig()


@pytest.fixture
def require_auth(login_config) -> bool:
    return login_config.require_auth


@pytest.fixture
def require_auth_state(login_config) -> bool:
    return login_config.require_auth_state


@pytest.fixture
def test_metadata(request):
    return request.node


# ── Browser ──────────────────────────────────────────────────────────────────


@pytest.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=BROWSER_HEADLESS, slow_mo=SLOW_MO)
        yield browser
        await browser.close()


@pytest.fixture
async def context(browser, require_auth, session_policy) -> AsyncGenerator[BrowserContext, None]:
    storage_state = None
    if require_auth:
        storage_state = await session_policy.get_storage_state()
        if storage_state is None:
            status = await session_policy.store.describe(SESSION_EXPIRY_MINUTES)
            logger.info(f"Starting without stored session: {status.message}")

    context = await browser.new_context(storage_state=storage_state, viewport=VIEWPORT)
    context.set_default_timeout(TIMEOUTS["action"])
    context.set_default_navigation_timeout(TIMEOUTS["navigation"])
    yield context
    await context.close()


@pytest.fixture
async def page(context) -> AsyncGenerator[Page, None]:
    page = await context.new_page()
    yield page
    if not page.is_closed():
        await page.close()


# ── Pages & auth ─────────────────────────────────────────────────────────────


@pytest.fixture
def login_page(page) -> LoginPage:
    return LoginPage(page)


@pytest.fixture
def side_menu_page(page) -> SideMenuPage:
    return SideMenuPage(page)


@pytest.fixture
def top_menu_page(page) -> TopMenuPage:
    return TopMenuPage(page)


@pytest.fixture
def environment_resolver() -> EnvironmentResolver:
    return EnvironmentResolver()


@pytest.fixture
def authentication_context(environment_resolver, login_page, side_menu_page) -> AuthenticationContext:
    return AuthenticationContext(environment_resolver, login_page, side_menu_page)


@pytest.fixture
def browser_session_manager(page, session_store, session_policy) -> BrowserSessionManager:
    return BrowserSessionManager(page, session_store, session_policy)
