"""Classify a loaded router page: rate limited, logged in, or login form."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..constants import LOGGED_IN_MARKER, LOGIN_FORM_MARKER, PROBE_TIMEOUT_MS, RATE_LIMIT_MARKER
from ..models.session import PageState

logger = logging.getLogger(__name__)

_MARKER_STATES = {
    LOGGED_IN_MARKER: PageState.AUTHENTICATED,
    LOGIN_FORM_MARKER: PageState.LOGIN_REQUIRED,
}


async def is_rate_limited(page: Page) -> bool:
    """Check if the router replaced the page with its 503 error document."""
    logger.debug("Checking whether the site has been temporarily blocked with a 503 due to rate limiting...")
    content = await page.content()
    if RATE_LIMIT_MARKER not in content.lower():
        logger.debug("\tYour router service is ok.")
        return False

    logger.error("Your router service is temporarily unavailable and reporting a 503. Please try again later.")
    return True


async def _wait_for_marker(page: Page, selector: str, timeout_ms: int) -> Optional[str]:
    """Return the selector once its element is attached, or None on timeout."""
    try:
        await page.wait_for_selector(selector, timeout=timeout_ms, state="attached")
    except PlaywrightTimeoutError:
        return None
    return selector


async def probe_auth_state(page: Page, timeout_ms: int = PROBE_TIMEOUT_MS) -> PageState:
    """Race the logged-in and login-form markers against each other.

    The first marker to appear decides the state. A branch that times out
    drops out of the race without ending it. If neither appears within
    ``timeout_ms`` the page is INDETERMINATE.
    """
    logger.debug("Checking whether or not the user is already authenticated...")
    pending = {
        asyncio.create_task(_wait_for_marker(page, selector, timeout_ms))
        for selector in _MARKER_STATES
    }
    found = None
    try:
        while pending and found is None:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                selector = task.result()
                if selector is not None and found is None:
                    found = selector
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    if found is None:
        logger.debug("\tCould not check the authentication: neither marker appeared.")
        return PageState.INDETERMINATE

    state = _MARKER_STATES[found]
    if state is PageState.AUTHENTICATED:
        logger.debug("\tAlready authenticated!")
    else:
        logger.debug("\tNot already authenticated!")
    return state


async def classify_page(page: Page, timeout_ms: int = PROBE_TIMEOUT_MS) -> PageState:
    """Full classification: the rate-limit check short-circuits the marker race."""
    if await is_rate_limited(page):
        return PageState.RATE_LIMITED
    return await probe_auth_state(page, timeout_ms)
