"""OrangeHRM paths, CSS selectors, and session record defaults."""

# ── Portal paths ─────────────────────────────────────────────────────────────

LOGIN_PATH = "/web/index.php/auth/login"
DASHBOARD_PATH = "/web/index.php/dashboard/index"
UPGRADE_PATH = "/upgrade-to-advanced"

# ── Session record ───────────────────────────────────────────────────────────

# Playwright storage-state layout with nothing captured
EMPTY_STORAGE_STATE = {"cookies": [], "origins": []}

# Test tags that bypass the generic pre-test login hook
SETUP_TAGS = frozenset({"setup", "skip_auth_setup"})

# ── Selectors ────────────────────────────────────────────────────────────────

SELECTORS = {
    # Login page
    "login_logo": ".orangehrm-login-branding img",
    "username_input": "input[name='username']",
    "password_input": "input[name='password']",
    "login_button": "button[type='submit']",
    "login_error": ".oxd-alert-content-text",
    # Side menu
    "side_menu": "nav.oxd-navbar-nav",
    "side_menu_item": "a.oxd-main-menu-item",
    "dashboard_menu": "a.oxd-main-menu-item[href*='/dashboard/index']",
    # Top menu
    "header_title": ".oxd-topbar-header-breadcrumb h6",
    "upgrade_link": "a.orangehrm-upgrade-link",
    "user_dropdown": ".oxd-userdropdown-tab",
    "user_dropdown_option": "ul.oxd-dropdown-menu a.oxd-userdropdown-link",
    "about_dialog": ".oxd-dialog-sheet",
    "about_dialog_label": ".oxd-dialog-sheet p.oxd-text",
}

SIDE_MENU_ITEMS = (
    "Admin",
    "PIM",
    "Leave",
    "Time",
    "Recruitment",
    "My Info",
    "Performance",
    "Dashboard",
    "Directory",
    "Maintenance",
    "Claim",
    "Buzz",
)

USER_DROPDOWN_OPTIONS = ("About", "Support", "Change Password", "Logout")

LOGIN_ERROR_MESSAGE = "Invalid credentials"
