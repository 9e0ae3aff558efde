"""Application configuration loaded from environment variables."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

APP_NAME = "router-devices"


class RouterDevicesError(Exception):
    """Base exception for router-devices."""


class ConfigError(RouterDevicesError):
    """Required configuration is missing or invalid."""


def get_user_config_dir() -> Path:
    """Get the per-user config directory based on OS conventions."""
    if os.name == "nt":  # Windows
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Preferences" / APP_NAME
    # Linux and friends follow the XDG Base Directory Specification
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


# Paths
CONFIG_DIR = Path(os.getenv("ROUTER_DEVICES_CONFIG_DIR", get_user_config_dir())).expanduser()
COOKIES_PATH = CONFIG_DIR / "cookies.txt"
BROWSER_PROFILE_DIR = CONFIG_DIR / "browser_profile"

# Router
DEFAULT_ROUTER_URL = "http://192.168.1.1"

# Browser
BROWSER_HEADLESS = os.getenv("BROWSER_HEADLESS", "true").lower() == "true"
BROWSER_TIMEOUT = int(os.getenv("BROWSER_TIMEOUT", "30000"))
BROWSER_VIEWPORT = {"width": 1280, "height": 720}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class Config(BaseModel):
    """Per-run router settings. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    router_url: str = DEFAULT_ROUTER_URL
    router_password: str

    @property
    def base_url(self) -> str:
        return self.router_url.rstrip("/")


def load_config() -> Config:
    """Build the router config from the environment.

    Raises:
        ConfigError: if ROUTER_PASSWORD is not set.
    """
    password = os.getenv("ROUTER_PASSWORD")
    if not password:
        raise ConfigError(
            "ROUTER_PASSWORD is not set. Export it or add it to a .env file."
        )
    return Config(
        router_url=os.getenv("ROUTER_URL") or DEFAULT_ROUTER_URL,
        router_password=password,
    )
