"""Log into the router's web UI, reusing saved cookies when they still work."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import Config
from ..constants import POST_LOGIN_TIMEOUT_MS, PROBE_TIMEOUT_MS, SELECTORS
from ..models.session import PageState
from .browser import BrowserSession
from .cookies import CookieStore
from .probe import classify_page

logger = logging.getLogger(__name__)


class Authenticator:
    """Drives one authentication attempt against the router."""

    def __init__(
        self,
        config: Config,
        session: Optional[BrowserSession] = None,
        cookie_store: Optional[CookieStore] = None,
        probe_timeout_ms: int = PROBE_TIMEOUT_MS,
        login_timeout_ms: int = POST_LOGIN_TIMEOUT_MS,
    ):
        self.config = config
        self.session = session or BrowserSession()
        self.cookie_store = cookie_store or CookieStore()
        self.probe_timeout_ms = probe_timeout_ms
        self.login_timeout_ms = login_timeout_ms
        self.last_state: Optional[PageState] = None

    async def authenticate(self) -> Optional[Page]:
        """Return a page logged into the router, or None if it is rate limited.

        Raises:
            playwright.async_api.TimeoutError: if the home page never shows up
                after submitting the login form.
        """
        context = await self.session.get_browser()
        await self.cookie_store.restore(context)

        logger.debug(f"Navigating to {self.config.router_url}")
        page = await self.session.new_page()
        await page.goto(self.config.router_url)

        state = await classify_page(page, self.probe_timeout_ms)
        self.last_state = state

        if state is PageState.RATE_LIMITED:
            # Nothing to do until the router recovers
            return None

        if not state.needs_login:
            return page

        if state is PageState.INDETERMINATE:
            logger.debug("\tAuthentication state is ambiguous, attempting to log in anyway.")

        await self._login(page)
        await self.cookie_store.export(page)
        logger.debug("\t\tAuthenticated.")
        return page

    async def _login(self, page: Page):
        logger.debug("\tAuthenticating now...")
        await page.fill(SELECTORS["login_password"], self.config.router_password)
        await page.click(SELECTORS["login_submit"])
        try:
            await page.wait_for_selector(
                SELECTORS["home_logout"], timeout=self.login_timeout_ms, state="attached"
            )
        except PlaywrightTimeoutError as e:
            raise PlaywrightTimeoutError(
                f"Login failed, the router home page never appeared within {self.login_timeout_ms} ms"
            ) from e

    async def quit(self):
        await self.session.quit()
