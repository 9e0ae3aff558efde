"""Router web UI selectors, page markers, endpoints and timeouts."""

# ── Endpoints ────────────────────────────────────────────────────────────────

WIFI_INFO_PATH = "modals/overview.lp?status=wifiInfo&auto_update=true"

# ── Selectors ────────────────────────────────────────────────────────────────

SELECTORS = {
    # Login page
    "login_password": "#login-txt-pwd",
    "login_submit": "#login-btn-logIn",

    # Home page
    "home_logout": "#home-form-logout",
}

# Presence of these elements tells the probe which page it is looking at
LOGGED_IN_MARKER = SELECTORS["home_logout"]
LOGIN_FORM_MARKER = SELECTORS["login_password"]

# ── Rate-limit Detection ─────────────────────────────────────────────────────

# Matched case-insensitively against the full page content
RATE_LIMIT_MARKER = "503 service"

# ── Timeouts (ms) ────────────────────────────────────────────────────────────

PROBE_TIMEOUT_MS = 10_000
POST_LOGIN_TIMEOUT_MS = 8_000

# ── Device Groups ────────────────────────────────────────────────────────────

DEVICE_GROUPS = [
    ("Main 2.4GHz", "wifi_list_24"),
    ("Main 5GHz", "wifi_list_5"),
    ("Guest 2.4GHz", "guest_wifi_24"),
    ("Guest 5GHz", "guest_wifi_5"),
]
