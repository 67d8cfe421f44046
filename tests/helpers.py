"""Fake aiohttp session and responses shared by the tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http.cookies import SimpleCookie
from typing import Any

from yarl import URL

from sectoralarmpy.const import BASE_URL

LANDING_PAGE = (
    "<html><head>"
    '<script src="/Scripts/jquery.js"></script>'
    '<script src="/Scripts/main.js?vAB12_CD"></script>'
    "</head><body></body></html>"
)


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(
        self,
        status: int = 200,
        body: Any = "",
        *,
        reason: str | None = "OK",
        cookies: tuple[str, ...] = (),
        path: str = "/",
    ) -> None:
        self.status = status
        self.reason = reason
        if isinstance(body, bytes):
            self._body = body
        elif isinstance(body, str):
            self._body = body.encode()
        else:
            self._body = json.dumps(body).encode()
        self.cookies: SimpleCookie = SimpleCookie()
        for cookie in cookies:
            self.cookies.load(cookie)
        self.url = URL(f"{BASE_URL}{path}")

    async def read(self) -> bytes:
        return self._body

    async def text(self) -> str:
        return self._body.decode("utf-8")

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


@dataclass
class Call:
    method: str
    url: str
    kwargs: dict[str, Any]

    @property
    def sent_cookies(self) -> dict[str, str]:
        cookies = self.kwargs.get("cookies")
        if cookies is None:
            return {}
        return {key: morsel.value for key, morsel in cookies.items()}


@dataclass
class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    cookie_jar: Any = None
    responses: list[FakeResponse | Exception] = field(default_factory=list)
    calls: list[Call] = field(default_factory=list)

    def queue(self, *responses: FakeResponse | Exception) -> None:
        self.responses.extend(responses)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(Call(method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def login_responses(version: str = "vAB12_CD") -> list[FakeResponse]:
    """Responses for a successful login followed by version discovery."""
    return [
        FakeResponse(
            302,
            "",
            reason="Found",
            cookies=(
                "ASP.NET_SessionId=session-1; Path=/",
                ".ASPXAUTH=auth-1; Path=/",
            ),
            path="/User/Login",
        ),
        FakeResponse(200, LANDING_PAGE.replace("vAB12_CD", version)),
    ]

