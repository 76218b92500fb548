from __future__ import annotations

import asyncio
import logging

import httpx

from ..config import AUTH_TOKEN_HEADER, USER_ID_HEADER, Session
from ..errors import AuthenticationError, TransportError
from ..session.session_manager import SessionManager
from ..transport.transport import HttpTransport
from .call import CallDescriptor, Outcome, failure
from .response import classify_response

logger = logging.getLogger("rocketchat_client")


class Dispatcher:
    """Sends call descriptors, logging in first when there is no session.

    Implicit logins are single-flight: callers that find the client
    unauthenticated at the same time wait on one login exchange instead of
    each starting their own.
    """

    def __init__(
        self,
        transport: HttpTransport,
        session_manager: SessionManager,
        *,
        reauthenticate_on_401: bool = False,
    ) -> None:
        self._transport = transport
        self._session_manager = session_manager
        self._reauthenticate_on_401 = reauthenticate_on_401
        self._login_lock = asyncio.Lock()

    async def dispatch(self, call: CallDescriptor) -> Outcome:
        """Execute ``call`` with session headers and classify the response."""
        result = await self._send_authenticated(call)
        if isinstance(result, Outcome):
            return result

        if result.status_code == 401 and self._reauthenticate_on_401:
            logger.debug("401 during %s, logging in again", call.operation)
            if self._session_manager.current_session == _sent_session(call):
                self._session_manager.invalidate()
            result = await self._send_authenticated(call)
            if isinstance(result, Outcome):
                return result

        return classify_response(call, result)

    async def _send_authenticated(
        self, call: CallDescriptor
    ) -> httpx.Response | Outcome:
        login_error = await self._ensure_session()
        if login_error is not None:
            return login_error

        if not self._session_manager.apply_headers(call):
            return failure(
                AuthenticationError(
                    f"Session was closed before {call.operation} could be sent"
                )
            )

        try:
            return await self._transport.send(call)
        except TransportError as e:
            return failure(e)

    async def _ensure_session(self) -> Outcome | None:
        """Log in if needed. Returns the failed login outcome, or None."""
        if self._session_manager.is_authenticated:
            return None

        async with self._login_lock:
            if self._session_manager.is_authenticated:
                return None

            outcome = await self._session_manager.login()
            if outcome.error is not None:
                logger.warning("Implicit login failed: %s", outcome.error)
                return outcome
            return None


def _sent_session(call: CallDescriptor) -> Session:
    return Session(
        auth_token=call.headers.get(AUTH_TOKEN_HEADER, ""),
        user_id=call.headers.get(USER_ID_HEADER, ""),
    )
