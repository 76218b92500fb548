from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from ..config import (
    AUTH_TOKEN_HEADER,
    USER_ID_HEADER,
    AuthState,
    Credentials,
    Session,
)
from ..errors import AuthenticationError, TransportError
from ..protocol.call import CallDescriptor, Outcome, failure, success
from ..protocol.response import classify_response
from ..transport.transport import HttpTransport

logger = logging.getLogger("rocketchat_client")

LOGIN_PATH = "v1/login"
LOGOUT_PATH = "v1/logout"


class SessionManager:
    """Owns the single authenticated session of a client.

    The stored session changes only through :meth:`login`, :meth:`logout`
    and :meth:`invalidate`. A failed exchange never leaves a partial session
    behind.
    """

    def __init__(
        self,
        transport: HttpTransport,
        credentials: Credentials,
        *,
        on_change: Callable[[Session | None], None] | None = None,
    ) -> None:
        self._transport = transport
        self._credentials = credentials
        self._on_change = on_change
        self._session: Session | None = None

    # ── State ─────────────────────────────────────────────────────

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def current_session(self) -> Session | None:
        return self._session

    @property
    def state(self) -> AuthState:
        return "authenticated" if self._session is not None else "unauthenticated"

    def apply_headers(self, call: CallDescriptor) -> bool:
        """Attach the session headers to ``call``. Returns False without a session."""
        session = self._session
        if session is None:
            return False
        call.headers[AUTH_TOKEN_HEADER] = session.auth_token
        call.headers[USER_ID_HEADER] = session.user_id
        return True

    # ── Exchanges ─────────────────────────────────────────────────

    async def login(self) -> Outcome:
        call = CallDescriptor(
            method="POST",
            path=LOGIN_PATH,
            operation="login",
            not_found_message="login failed",
            json={
                "user": self._credentials.username,
                "password": self._credentials.password,
            },
        )
        logger.debug("Logging in as %s", self._credentials.username)

        try:
            response = await self._transport.send(call)
        except TransportError as e:
            return failure(e)

        if response.status_code != 200:
            return failure(
                AuthenticationError(
                    f"Login rejected with status {response.status_code}: "
                    f"{_error_message(response)}",
                    status_code=response.status_code,
                )
            )

        try:
            body = response.json()
        except ValueError:
            body = None

        session = _parse_session(body)
        if session is None:
            return failure(
                AuthenticationError(
                    "Login response did not contain a session",
                    status_code=response.status_code,
                )
            )

        self._set_session(session)
        logger.debug("Logged in as user %s", session.user_id)
        return success(session)

    async def logout(self) -> Outcome:
        call = CallDescriptor(
            method="POST",
            path=LOGOUT_PATH,
            operation="logout",
            not_found_message="logout failed",
        )
        if not self.apply_headers(call):
            return failure(AuthenticationError("Cannot log out without a session"))

        try:
            response = await self._transport.send(call)
        except TransportError as e:
            return failure(e)

        outcome = classify_response(call, response)
        if outcome.error is None:
            self._set_session(None)
            logger.debug("Logged out")
        return outcome

    def invalidate(self) -> None:
        """Forget the stored session without contacting the server."""
        self._set_session(None)

    def _set_session(self, session: Session | None) -> None:
        self._session = session
        if self._on_change is not None:
            self._on_change(session)


def _parse_session(body: Any) -> Session | None:
    if not isinstance(body, dict) or body.get("status") != "success":
        return None

    data = body.get("data")
    if not isinstance(data, dict):
        return None

    auth_token = data.get("authToken")
    user_id = data.get("userId")
    if not isinstance(auth_token, str) or not isinstance(user_id, str):
        return None
    if not auth_token or not user_id:
        return None

    return Session(auth_token=auth_token, user_id=user_id)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "no body"
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str):
            return message
    return "unknown error"
