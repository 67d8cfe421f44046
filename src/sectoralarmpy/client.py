"""Sector Alarm portal client."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import aiohttp
from yarl import URL

from .const import (
    BASE_URL,
    DEFAULT_TIMEOUT,
    LOGIN_PATH,
    LOGIN_SUCCESS_STATUS,
    OVERVIEW_PATH,
    PANEL_LIST_PATH,
    TEMPERATURES_PATH,
    USER_AGENT,
    VERSION_PATH,
    VERSION_PATTERN,
)
from .exceptions import (
    SectorAlarmApiError,
    SectorAlarmAuthError,
    SectorAlarmConnectionError,
    SectorAlarmResponseError,
    SectorAlarmVersionNotFoundError,
)
from .models import Overview, Panel, Temperature

_LOGGER = logging.getLogger(__name__)

_VERSION_RE = re.compile(VERSION_PATTERN)

VersionSource = Callable[[], Awaitable[str]]


def extract_version_token(html: str) -> str:
    """Extract the version token from the portal landing page.

    The portal exposes no endpoint for it; the token only shows up as a
    cache-busting suffix on the main script reference, e.g.
    ``"/Scripts/main.js?vAB12_CD"``.

    Raises:
        SectorAlarmVersionNotFoundError: If the script reference is missing.
    """
    match = _VERSION_RE.search(html)
    if match is None:
        raise SectorAlarmVersionNotFoundError(
            "Can't find version string on the landing page"
        )
    return match.group(1)


@dataclass(frozen=True)
class _Response:
    """Status and raw body of a finished request."""

    status: int
    reason: str | None
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def status_text(self) -> str:
        if self.reason:
            return f"{self.status} {self.reason}"
        return str(self.status)


def _expect_list(data: Any, path: str) -> list[dict[str, Any]]:
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(i, dict) for i in data):
        raise SectorAlarmResponseError(f"Expected a list of objects from {path}")
    return data


class SectorAlarmClient:
    """Async client for the Sector Alarm web portal.

    Each client keeps its own cookie jar, so pass a session that does not
    store cookies itself if it is shared between clients:

        async with aiohttp.ClientSession(
            cookie_jar=aiohttp.DummyCookieJar()
        ) as session:
            client = SectorAlarmClient(session, "user@example.com", "secret")
            await client.async_login()
            for panel in await client.async_get_panel_list():
                overview = await client.async_get_overview(panel.panel_id)
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        user_id: str,
        password: str,
        *,
        base_url: str = BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
        version_source: VersionSource | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp client session (caller manages lifecycle). It
                should be created with aiohttp.DummyCookieJar(); a session
                that stores cookies replays them on the unauthenticated
                version lookup and to other clients sharing it.
            user_id: Portal user id, usually an e-mail address.
            password: Portal password.
            base_url: Portal base URL.
            timeout: Total timeout per request in seconds, None to disable.
            version_source: Coroutine function returning the version token.
                Defaults to scraping the portal landing page.
        """
        self._session = session
        if isinstance(getattr(session, "cookie_jar", None), aiohttp.CookieJar):
            _LOGGER.debug(
                "Session stores cookies itself, they will be shared with "
                "every client using it; use aiohttp.DummyCookieJar()"
            )
        self._user_id = user_id
        self._password = password
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._version_source = version_source or self._async_discover_version

        # Allocated on first request, aiohttp wants a running loop for it
        self._cookie_jar: aiohttp.CookieJar | None = None
        self._version: str | None = None

    # ── Public properties ────────────────────────────────────────────

    @property
    def user_id(self) -> str:
        """Portal user id."""
        return self._user_id

    @property
    def base_url(self) -> str:
        """Portal base URL."""
        return self._base_url

    @property
    def version(self) -> str | None:
        """Version token discovered at login, None before login."""
        return self._version

    @property
    def is_logged_in(self) -> bool:
        """Return True once login and version discovery have succeeded."""
        return self._version is not None

    @property
    def cookies(self) -> dict[str, str]:
        """Snapshot of the session cookies held by this client."""
        if self._cookie_jar is None:
            return {}
        return {morsel.key: morsel.value for morsel in self._cookie_jar}

    # ── Session ──────────────────────────────────────────────────────

    async def async_login(self) -> None:
        """Log in and discover the version token.

        The portal accepts credentials by answering with a redirect, so
        redirects are never followed here.

        Raises:
            SectorAlarmAuthError: If the portal rejects the credentials.
            SectorAlarmVersionNotFoundError: If the version token is missing.
            SectorAlarmConnectionError: If unable to reach the portal.
        """
        resp = await self._request(
            "POST",
            LOGIN_PATH,
            data={"userID": self._user_id, "password": self._password},
        )
        if resp.status != LOGIN_SUCCESS_STATUS:
            raise SectorAlarmAuthError(
                f"Login rejected for {self._user_id}: {resp.status_text}"
            )
        _LOGGER.debug("Login accepted for %s", self._user_id)

        self._version = await self._version_source()
        _LOGGER.debug("Version token acquired: %s", self._version)

    async def _async_discover_version(self) -> str:
        """Scrape the version token from the landing page."""
        resp = await self._request(
            "GET", VERSION_PATH, authenticated=False, allow_redirects=True
        )
        return extract_version_token(resp.text)

    # ── HTTP helpers ─────────────────────────────────────────────────

    def _jar(self) -> aiohttp.CookieJar:
        if self._cookie_jar is None:
            self._cookie_jar = aiohttp.CookieJar()
        return self._cookie_jar

    async def _request(
        self,
        method: str,
        path: str,
        *,
        data: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        authenticated: bool = True,
        allow_redirects: bool = False,
    ) -> _Response:
        """Make a request, replaying and collecting this client's cookies."""
        url = f"{self._base_url}{path}"
        jar = self._jar()
        headers = {"User-Agent": USER_AGENT}
        if json_data is not None:
            headers["Accept"] = "application/json"
        cookies = jar.filter_cookies(URL(url)) if authenticated else None

        try:
            async with self._session.request(
                method,
                url,
                headers=headers,
                data=data,
                json=json_data,
                cookies=cookies,
                allow_redirects=allow_redirects,
                timeout=self._timeout,
            ) as resp:
                jar.update_cookies(resp.cookies, resp.url)
                body = await resp.read()
                result = _Response(resp.status, resp.reason, body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise SectorAlarmConnectionError(
                f"Connection error: {method} {path}: {err}"
            ) from err

        _LOGGER.debug("%s %s -> %s", method, path, result.status)
        return result

    @staticmethod
    def _decode(resp: _Response, path: str) -> Any:
        try:
            return json.loads(resp.body)
        except ValueError as err:
            raise SectorAlarmResponseError(
                f"Malformed response from {path} ({resp.status_text}): {err}"
            ) from err

    def _panel_payload(self, panel_id: str) -> dict[str, Any]:
        return {"id": panel_id, "Version": self._version}

    # ── Panels ───────────────────────────────────────────────────────

    async def async_get_panel_list(self) -> list[Panel]:
        """Get all panels on the account, in the order the portal returns them."""
        resp = await self._request("GET", PANEL_LIST_PATH)
        items = _expect_list(self._decode(resp, PANEL_LIST_PATH), PANEL_LIST_PATH)
        _LOGGER.debug("Got %d panels", len(items))
        try:
            return [Panel.from_api(item) for item in items]
        except (AttributeError, TypeError) as err:
            raise SectorAlarmResponseError(f"Unexpected panel layout: {err}") from err

    async def async_get_overview(self, panel_id: str) -> Overview:
        """Get the panel status together with its devices.

        The status code is not checked; an error page fails to decode and
        raises SectorAlarmResponseError.

        Args:
            panel_id: The panel id, see Panel.panel_id.
        """
        resp = await self._request(
            "POST", OVERVIEW_PATH, json_data=self._panel_payload(panel_id)
        )
        data = self._decode(resp, OVERVIEW_PATH)
        if not isinstance(data, dict):
            raise SectorAlarmResponseError(f"Expected an object from {OVERVIEW_PATH}")
        try:
            return Overview.from_api(data)
        except (AttributeError, TypeError) as err:
            raise SectorAlarmResponseError(
                f"Unexpected overview layout for panel {panel_id}: {err}"
            ) from err

    # ── Temperatures ─────────────────────────────────────────────────

    async def async_get_temperatures(self, panel_id: str) -> list[Temperature]:
        """Get the current readings of all temperature sensors on a panel.

        Args:
            panel_id: The panel id, see Panel.panel_id.

        Raises:
            SectorAlarmApiError: If the portal doesn't answer with 200. The
                message is the status line, e.g. "500 Internal Server Error".
        """
        resp = await self._request(
            "POST", TEMPERATURES_PATH, json_data=self._panel_payload(panel_id)
        )
        if resp.status != 200:
            raise SectorAlarmApiError(resp.status_text, status_code=resp.status)
        items = _expect_list(
            self._decode(resp, TEMPERATURES_PATH), TEMPERATURES_PATH
        )
        _LOGGER.debug("Got %d temperatures for panel %s", len(items), panel_id)
        return [Temperature.from_api(item) for item in items]
