from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Awaitable, Callable

import httpx
import pytest
import pytest_asyncio

from rocketchat_client import ClientOptions, RocketChatClient

AUTH_TOKEN = "token-abc"
USER_ID = "user-1"

LOGIN_OK = {
    "status": "success",
    "data": {"authToken": AUTH_TOKEN, "userId": USER_ID, "me": {"username": "alice"}},
}
LOGOUT_OK = {"status": "success", "data": {"message": "You've been logged out!"}}

Handler = Callable[[httpx.Request], "httpx.Response | Awaitable[httpx.Response]"]


@dataclass
class Route:
    status: int = 200
    json: Any = None
    content: bytes | None = None
    raises: type[httpx.HTTPError] | None = None
    handler: Handler | None = None


@dataclass
class FakeRocketChat:
    """In-memory Rocket.Chat REST service that records every request."""

    requests: list[httpx.Request] = field(default_factory=list)
    routes: dict[tuple[str, str], list[Route]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.route("POST", "v1/login", json=LOGIN_OK)
        self.route("POST", "v1/logout", json=LOGOUT_OK)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def route(self, method: str, path: str, **kwargs: Any) -> None:
        """Replace the responses for ``path`` with a single route."""
        self.routes[(method, "/api/" + path)] = [Route(**kwargs)]

    def queue(self, method: str, path: str, **kwargs: Any) -> None:
        """Append a one-shot response that is used before the standing route."""
        self.routes.setdefault((method, "/api/" + path), []).insert(-1, Route(**kwargs))

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/" + path]

    def logins(self) -> list[httpx.Request]:
        return self.calls_to("v1/login")

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        routes = self.routes.get((request.method, request.url.path))
        if not routes:
            return httpx.Response(404, json={"success": False})

        route = routes.pop(0) if len(routes) > 1 else routes[0]
        if route.raises is not None:
            raise route.raises("connection refused", request=request)
        if route.handler is not None:
            result = route.handler(request)
            if not isinstance(result, httpx.Response):
                result = await result
            return result
        if route.content is not None:
            return httpx.Response(route.status, content=route.content)
        if route.json is not None:
            return httpx.Response(route.status, json=route.json)
        return httpx.Response(route.status)


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.fixture
def service() -> FakeRocketChat:
    return FakeRocketChat()


@pytest_asyncio.fixture
async def http_client(service: FakeRocketChat) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=service.transport) as http:
        yield http


@pytest_asyncio.fixture
async def client(http_client: httpx.AsyncClient) -> AsyncIterator[RocketChatClient]:
    """Fixture that creates an unauthenticated client against the fake service."""
    c = RocketChatClient("alice", "secret", http_client=http_client)
    yield c
    await c.close()


@pytest.fixture
def make_client(
    http_client: httpx.AsyncClient,
) -> Callable[..., RocketChatClient]:
    def factory(**options: Any) -> RocketChatClient:
        return RocketChatClient(
            "alice", "secret", ClientOptions(**options), http_client=http_client
        )

    return factory
