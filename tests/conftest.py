"""Shared fixtures for the router-devices tests."""

from __future__ import annotations

import pytest

from router_devices.config import Config


@pytest.fixture
def config() -> Config:
    return Config(router_url="http://192.168.1.1", router_password="hunter2")


@pytest.fixture
def cookies_path(tmp_path):
    return tmp_path / "router-devices" / "cookies.txt"


@pytest.fixture
def sample_cookies() -> list[dict]:
    return [
        {
            "name": "sessionID",
            "value": "abc123",
            "domain": "192.168.1.1",
            "path": "/",
            "expires": -1,
            "httpOnly": True,
            "secure": False,
            "sameSite": "Lax",
        },
        {
            "name": "lang",
            "value": "en",
            "domain": "192.168.1.1",
            "path": "/",
            "expires": 1893456000,
            "httpOnly": False,
            "secure": False,
            "sameSite": "Lax",
        },
    ]
