"""
tests/test_authenticator.py
===========================
Unit tests for session_manager/authenticator.py

Covers the whole state machine: rate limit abort, reused session, login,
ambiguous probe fallback and failed login.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from router_devices.constants import LOGGED_IN_MARKER, LOGIN_FORM_MARKER, SELECTORS
from router_devices.models.session import PageState
from router_devices.session_manager.authenticator import Authenticator
from router_devices.session_manager.cookies import CookieStore

from .fakes import FakeContext, FakePage, FakeSession

FAST_MS = 50


def _authenticator(config, page, cookies_path, context=None):
    context = context or FakeContext()
    context.pages.append(page)
    session = FakeSession(context)
    auth = Authenticator(
        config,
        session=session,
        cookie_store=CookieStore(cookies_path),
        probe_timeout_ms=FAST_MS,
        login_timeout_ms=FAST_MS,
    )
    return auth, session, context


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_rate_limited_returns_none(self, config, cookies_path) -> None:
        page = FakePage(
            content="<h1>503 Service unavailable</h1>",
            present={LOGGED_IN_MARKER, LOGIN_FORM_MARKER},
        )
        auth, _, _ = _authenticator(config, page, cookies_path)

        assert await auth.authenticate() is None
        assert auth.last_state is PageState.RATE_LIMITED
        page.fill.assert_not_awaited()
        page.click.assert_not_awaited()
        assert not cookies_path.exists()

    @pytest.mark.asyncio
    async def test_navigates_to_router_url(self, config, cookies_path) -> None:
        page = FakePage(present={LOGGED_IN_MARKER})
        auth, _, _ = _authenticator(config, page, cookies_path)

        await auth.authenticate()

        page.goto.assert_awaited_once_with("http://192.168.1.1")

    @pytest.mark.asyncio
    async def test_existing_session_skips_login(self, config, cookies_path) -> None:
        page = FakePage(present={LOGGED_IN_MARKER})
        auth, _, _ = _authenticator(config, page, cookies_path)

        assert await auth.authenticate() is page
        assert auth.last_state is PageState.AUTHENTICATED
        page.fill.assert_not_awaited()
        page.click.assert_not_awaited()
        assert not cookies_path.exists()

    @pytest.mark.asyncio
    async def test_login_form_submits_password_and_saves_cookies(self, config, cookies_path, sample_cookies) -> None:
        page = FakePage(present={LOGIN_FORM_MARKER})
        auth, _, _ = _authenticator(config, page, cookies_path, FakeContext(sample_cookies))

        assert await auth.authenticate() is page
        assert auth.last_state is PageState.LOGIN_REQUIRED
        page.fill.assert_awaited_once_with(SELECTORS["login_password"], "hunter2")
        page.click.assert_awaited_once_with(SELECTORS["login_submit"])
        assert json.loads(cookies_path.read_text()) == sample_cookies

    @pytest.mark.asyncio
    async def test_indeterminate_page_falls_back_to_login(self, config, cookies_path) -> None:
        page = FakePage()
        auth, _, _ = _authenticator(config, page, cookies_path)

        assert await auth.authenticate() is page
        assert auth.last_state is PageState.INDETERMINATE
        page.fill.assert_awaited_once_with(SELECTORS["login_password"], "hunter2")
        page.click.assert_awaited_once()
        assert cookies_path.exists()

    @pytest.mark.asyncio
    async def test_failed_login_raises_and_saves_nothing(self, config, cookies_path) -> None:
        page = FakePage(present={LOGIN_FORM_MARKER}, login_succeeds=False)
        auth, _, _ = _authenticator(config, page, cookies_path)

        with pytest.raises(PlaywrightTimeoutError, match="Login failed"):
            await auth.authenticate()

        assert not cookies_path.exists()

    @pytest.mark.asyncio
    async def test_saved_cookies_restored_before_navigation(self, config, cookies_path, sample_cookies) -> None:
        cookies_path.parent.mkdir(parents=True)
        cookies_path.write_text(json.dumps(sample_cookies))
        page = FakePage(present={LOGGED_IN_MARKER})
        auth, _, context = _authenticator(config, page, cookies_path)

        async def goto(url):
            # Cookies must already be in the jar when the page loads
            assert await context.cookies() == sample_cookies

        page.goto.side_effect = goto

        assert await auth.authenticate() is page
        context.add_cookies.assert_awaited_once_with(sample_cookies)

    @pytest.mark.asyncio
    async def test_hidden_logout_marker_reuses_session(self, config, cookies_path) -> None:
        page = FakePage(hidden={LOGGED_IN_MARKER})
        auth, _, _ = _authenticator(config, page, cookies_path)

        assert await auth.authenticate() is page
        assert auth.last_state is PageState.AUTHENTICATED
        page.fill.assert_not_awaited()
        assert not cookies_path.exists()

    @pytest.mark.asyncio
    async def test_login_succeeds_when_home_marker_is_hidden(self, config, cookies_path, sample_cookies) -> None:
        page = FakePage(present={LOGIN_FORM_MARKER}, hidden_after_login=True)
        auth, _, _ = _authenticator(config, page, cookies_path, FakeContext(sample_cookies))

        assert await auth.authenticate() is page
        assert page.waited[-1] == LOGGED_IN_MARKER
        assert page.wait_states[-1] == "attached"
        assert json.loads(cookies_path.read_text()) == sample_cookies

    @pytest.mark.asyncio
    async def test_page_is_opened_through_the_session(self, config, cookies_path) -> None:
        page = FakePage(present={LOGGED_IN_MARKER})
        auth, session, _ = _authenticator(config, page, cookies_path)
        session.new_page = AsyncMock(return_value=page)

        assert await auth.authenticate() is page
        session.new_page.assert_awaited_once()


class TestQuit:
    @pytest.mark.asyncio
    async def test_quit_releases_session(self, config, cookies_path) -> None:
        auth, session, _ = _authenticator(config, FakePage(), cookies_path)

        await auth.quit()

        session.quit.assert_awaited_once()
