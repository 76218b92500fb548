from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

AuthState: TypeAlias = Literal["unauthenticated", "authenticated"]

DEFAULT_PROTOCOL = "http"
DEFAULT_HOST = "demo.rocket.chat"
DEFAULT_PORT = 80
DEFAULT_REQUEST_TIMEOUT_MS = 10_000

API_BASE_PATH = "/api/"

AUTH_TOKEN_HEADER = "X-Auth-Token"
USER_ID_HEADER = "X-User-Id"


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class Session:
    auth_token: str
    user_id: str


@dataclass(frozen=True)
class ClientOptions:
    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    # Re-login once and resend when a dispatched call is answered with 401.
    reauthenticate_on_401: bool = False
