"""Shared plumbing for CLI commands: config, authentication, cleanup."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable

import typer
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import Config, ConfigError, load_config
from ..session_manager.authenticator import Authenticator
from ..utils.console import print_error, print_warning

logger = logging.getLogger(__name__)


class ApplicationCommand(ABC):
    """A CLI verb that runs against an authenticated router page.

    Subclasses set ``name``/``help`` and implement ``handle``. The browser is
    always released once the command finishes, whatever the outcome.
    """

    name: str
    help: str = ""
    aliases: tuple[str, ...] = ()

    def __init__(self, authenticator_factory: Callable[[Config], Authenticator] = Authenticator):
        self._authenticator_factory = authenticator_factory

    def register(self, app: typer.Typer) -> None:
        app.command(self.name, help=self.help)(self.run)
        for alias in self.aliases:
            app.command(alias, help=self.help, hidden=True)(self.run)

    def run(self) -> None:
        """Typer entry point: load config eagerly, then drive the async command."""
        try:
            config = load_config()
        except ConfigError as e:
            print_error(str(e))
            raise typer.Exit(1)

        try:
            asyncio.run(self.execute(config))
        except PlaywrightTimeoutError as e:
            print_error(f"Timed out waiting for the router: {e}")
            raise typer.Exit(1)
        except PlaywrightError as e:
            print_error(f"Browser error: {e}")
            raise typer.Exit(1)
        except OSError as e:
            print_error(f"Could not save the session cookies: {e}")
            raise typer.Exit(1)

    async def execute(self, config: Config) -> None:
        authenticator = self._authenticator_factory(config)
        try:
            page = await authenticator.authenticate()
            if page is None:
                print_warning("The router is temporarily unavailable. Please try again later.")
                return
            await self.handle(page, config)
        finally:
            await authenticator.quit()

    @abstractmethod
    async def handle(self, page: Page, config: Config) -> None:
        """Do the command's work with an authenticated page."""
