"""List the devices connected to the router's wifi networks."""

from __future__ import annotations

import logging

from playwright.async_api import Page

from ..config import Config
from ..constants import DEVICE_GROUPS, WIFI_INFO_PATH
from ..models.wifi import WifiInfo
from ..utils.console import print_device_table, print_info
from .base import ApplicationCommand

logger = logging.getLogger(__name__)

# Runs inside the page so the router session cookies ride along
_FETCH_JSON_JS = """
async (url) => {
    const response = await fetch(url);
    return await response.json();
}
"""


async def fetch_wifi_info(page: Page, config: Config) -> WifiInfo:
    url = f"{config.base_url}/{WIFI_INFO_PATH}"
    logger.debug(f"Fetching wifi info from {url}")
    payload = await page.evaluate(_FETCH_JSON_JS, url)
    return WifiInfo.model_validate(payload)


def print_wifi_info(wifi_info: WifiInfo) -> None:
    for title, field in DEVICE_GROUPS:
        print_device_table(title, getattr(wifi_info, field))

    print_info(
        f"{wifi_info.wifi_active_count} active wifi devices "
        f"({wifi_info.main_wifi_active_count} main, {wifi_info.guest_active_count} guest)"
    )


class ListCommand(ApplicationCommand):
    name = "list"
    help = "List all connected devices."
    aliases = ("ls",)

    async def handle(self, page: Page, config: Config) -> None:
        wifi_info = await fetch_wifi_info(page, config)
        print_wifi_info(wifi_info)
