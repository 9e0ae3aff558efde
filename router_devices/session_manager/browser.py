"""Camoufox browser lifecycle: lazy launch, page creation, shutdown."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from camoufox.async_api import AsyncCamoufox
from playwright.async_api import BrowserContext, Page

from ..config import BROWSER_HEADLESS, BROWSER_PROFILE_DIR, BROWSER_TIMEOUT, BROWSER_VIEWPORT

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns one browser context for the lifetime of a command.

    The browser is launched on the first ``get_browser()`` call and reused
    afterwards. ``quit()`` releases it and may be called any number of times.
    """

    def __init__(
        self,
        profile_dir: Path = BROWSER_PROFILE_DIR,
        headless: Optional[bool] = None,
    ):
        self._profile_dir = Path(profile_dir)
        self._headless = BROWSER_HEADLESS if headless is None else headless
        self._camoufox: Optional[AsyncCamoufox] = None
        self._context: Optional[BrowserContext] = None

    @property
    def is_running(self) -> bool:
        return self._context is not None

    async def get_browser(self) -> BrowserContext:
        """Return the browser context, launching it on first use."""
        if self._context is not None:
            return self._context

        self._profile_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Launching Camoufox (headless={self._headless}, profile={self._profile_dir})...")

        self._camoufox = AsyncCamoufox(
            headless=self._headless,
            persistent_context=True,
            user_data_dir=str(self._profile_dir),
            viewport=BROWSER_VIEWPORT,
        )
        self._context = await self._camoufox.__aenter__()
        self._context.set_default_timeout(BROWSER_TIMEOUT)
        return self._context

    async def new_page(self) -> Page:
        context = await self.get_browser()
        return await context.new_page()

    async def quit(self):
        """Close the browser if one was launched. Close errors are only logged."""
        if self._camoufox is None:
            return

        logger.debug("Closing browser...")
        try:
            await self._camoufox.__aexit__(None, None, None)
        except Exception as e:
            logger.warning(f"Error closing camoufox: {e}")
        finally:
            self._camoufox = None
            self._context = None
        logger.debug("Browser closed.")
