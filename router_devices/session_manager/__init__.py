"""Browser session, cookie persistence and router authentication."""

from router_devices.session_manager.authenticator import Authenticator
from router_devices.session_manager.browser import BrowserSession
from router_devices.session_manager.cookies import CookieStore
from router_devices.session_manager.probe import classify_page, is_rate_limited, probe_auth_state

__all__ = [
    "Authenticator",
    "BrowserSession",
    "CookieStore",
    "classify_page",
    "is_rate_limited",
    "probe_auth_state",
]
