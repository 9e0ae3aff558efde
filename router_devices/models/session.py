"""Authentication state of a loaded router page."""

from __future__ import annotations

from enum import Enum


class PageState(str, Enum):
    """What a freshly loaded router page represents.

    Derived from the rendered page at one point in time and never cached.
    """

    RATE_LIMITED = "rate_limited"
    AUTHENTICATED = "authenticated"
    LOGIN_REQUIRED = "login_required"
    INDETERMINATE = "indeterminate"

    @property
    def needs_login(self) -> bool:
        # INDETERMINATE falls back to a login attempt
        return self in (PageState.LOGIN_REQUIRED, PageState.INDETERMINATE)
