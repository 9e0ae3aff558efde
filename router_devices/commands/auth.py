from __future__ import annotations

from playwright.async_api import Page

from ..config import Config
from ..utils.console import print_success
from .base import ApplicationCommand


class AuthCommand(ApplicationCommand):
    name = "auth"
    help = "Set up router authentication and cache the session."

    async def handle(self, page: Page, config: Config) -> None:
        print_success(f"Authenticated with {config.router_url}")
