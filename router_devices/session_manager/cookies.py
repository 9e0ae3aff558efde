"""Persist the router session cookies between runs."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from playwright.async_api import BrowserContext, Page
from playwright.async_api import Error as PlaywrightError

from ..config import COOKIES_PATH

logger = logging.getLogger(__name__)


class CookieStore:
    """Reads and writes the browser's cookie jar as JSON on disk."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else COOKIES_PATH

    @property
    def path(self) -> Path:
        return self._path

    async def restore(self, context: BrowserContext) -> None:
        """Inject saved cookies into the browser context.

        Best effort: a missing or corrupt file just means there is nothing
        to restore.
        """
        logger.debug("Attempting to restore cookies...")
        cookies = self._load()
        if not cookies:
            logger.debug("\tDid not restore any cookies.")
            return

        try:
            await context.add_cookies(cookies)
        except PlaywrightError as e:
            logger.debug(f"\tDid not restore any cookies: {e}")
            return
        logger.debug(f"\tRestored {len(cookies)} cookies from {self._path}.")

    async def export(self, page: Page) -> None:
        """Save every cookie of the page's browser context, replacing the file."""
        logger.debug("Exporting cookies to a file...")
        cookies = await page.context.cookies()
        logger.debug(f"\tFound {len(cookies)} cookies to export")

        serialized = json.dumps(cookies)
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".cookies-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(serialized)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"\tCookies saved to {self._path}.")

    def _load(self) -> list[dict]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"\tNo cookie file at {self._path}")
            return []
        except (OSError, ValueError) as e:
            logger.debug(f"\tFailed to read cookie file: {e}")
            return []

        if not isinstance(data, list) or not all(_is_cookie(c) for c in data):
            logger.debug("\tCookie file does not hold a list of cookies")
            return []
        return data


def _is_cookie(record) -> bool:
    return isinstance(record, dict) and "name" in record and "value" in record
