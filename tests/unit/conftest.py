"""Fakes and fixtures for the session/auth unit tests (no browser needed)."""

import json
import os
import time

import pytest

from orangehrm_e2e.models.login import Credentials
from orangehrm_e2e.session_manager.store import SessionStore

PORTAL_URL = "https://hrm.example.test"

SAMPLE_STATE = {
    "cookies": [
        {
            "name": "orangehrm",
            "value": "3c1f0e9b",
            "domain": "hrm.example.test",
            "path": "/web",
            "expires": -1,
            "httpOnly": True,
            "secure": True,
            "sameSite": "Lax",
        }
    ],
    "origins": [],
}

ENV_KEYS = ("PORTAL_BASE_URL", "PORTAL_USERNAME", "PORTAL_PASSWORD", "CI", "GITHUB_ACTIONS", "TF_BUILD")


class FakeClock:
    def __init__(self):
        self.now = float(int(time.time()))

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeLoginPage:
    def __init__(self):
        self.calls = []
        self.navigation_error = None
        self.show_error = False

    async def navigate_to_url(self, url):
        self.calls.append(("navigate_to_url", url))
        if self.navigation_error:
            raise self.navigation_error

    async def verify_logo_is_visible(self):
        self.calls.append(("verify_logo_is_visible",))

    async def login_to_portal(self, username, password):
        self.calls.append(("login_to_portal", username, password))

    async def verify_error_message_hidden(self):
        self.calls.append(("verify_error_message_hidden",))
        if self.show_error:
            raise AssertionError("Locator expected to be hidden: .oxd-alert-content-text")


class FakeSideMenuPage:
    def __init__(self):
        self.calls = []
        self.authenticated = False
        self.probe_error = None
        self.dashboard_after_login = True

    async def is_dashboard_menu_visible(self):
        self.calls.append(("is_dashboard_menu_visible",))
        if self.probe_error:
            raise self.probe_error
        return self.authenticated

    async def verify_dashboard_menu_is_visible(self):
        self.calls.append(("verify_dashboard_menu_is_visible",))
        if not self.dashboard_after_login:
            raise AssertionError("Locator expected to be visible: dashboard menu")


class FakeResolver:
    def __init__(self):
        self.calls = []

    async def get_portal_base_url(self):
        self.calls.append("get_portal_base_url")
        return PORTAL_URL

    async def get_credentials(self):
        self.calls.append("get_credentials")
        return Credentials(username="Admin", password="admin123")


class FakeBrowserContext:
    """Stands in for ``page.context``; writes a captured session on demand."""

    def __init__(self, state=None, error=None):
        self.state = SAMPLE_STATE if state is None else state
        self.error = error

    async def storage_state(self, path=None):
        if self.error:
            raise self.error
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(self.state, handle)
        return self.state


class FakePage:
    def __init__(self, context):
        self.context = context


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path, clock):
    return SessionStore(tmp_path / ".auth" / "login-auth.json", clock=clock)


@pytest.fixture
def write_record(store, clock):
    """Write a session record whose mtime is ``age_seconds`` behind the clock."""

    def _write(state=None, age_seconds=0.0, raw=None):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text(raw if raw is not None else json.dumps(SAMPLE_STATE if state is None else state))
        mtime = clock.now - age_seconds
        os.utime(store.path, (mtime, mtime))

    return _write


@pytest.fixture
def login_page():
    return FakeLoginPage()


@pytest.fixture
def side_menu_page():
    return FakeSideMenuPage()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def fake_page():
    return FakePage(FakeBrowserContext())


@pytest.fixture
def clean_env(monkeypatch):
    """Remove portal and CI variables for the duration of a test."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
