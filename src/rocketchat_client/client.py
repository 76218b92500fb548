from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from .api.channels import ChannelsAPI
from .api.chat import ChatAPI
from .api.miscellaneous import MiscellaneousAPI
from .api.rooms import RoomsAPI
from .config import AuthState, ClientOptions, Credentials, Session
from .protocol.call import Outcome
from .protocol.dispatcher import Dispatcher
from .session.session_manager import SessionManager
from .transport.transport import HttpTransport

logger = logging.getLogger("rocketchat_client")

Unsubscribe = Callable[[], None]


class RocketChatClient:
    """Async Python client for the Rocket.Chat REST API.

    Every operation returns an :class:`Outcome`. Operations log in on
    demand, so calling :meth:`login` up front is optional.
    """

    def __init__(
        self,
        username: str,
        password: str,
        options: ClientOptions | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._options = options or ClientOptions()
        self._credentials = Credentials(username=username, password=password)

        self._listeners: dict[str, list[Callable[..., Any]]] = {}

        self._transport = HttpTransport(self._options, http_client=http_client)
        self._session_manager = SessionManager(
            self._transport,
            self._credentials,
            on_change=self._on_session_change,
        )
        self._dispatcher = Dispatcher(
            self._transport,
            self._session_manager,
            reauthenticate_on_401=self._options.reauthenticate_on_401,
        )

        self._chat = ChatAPI(self._dispatcher.dispatch)
        self._channels = ChannelsAPI(self._dispatcher.dispatch)
        self._rooms = RoomsAPI(self._dispatcher.dispatch)
        self._misc = MiscellaneousAPI(self._dispatcher.dispatch)

    # ── State ─────────────────────────────────────────────────────

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def username(self) -> str:
        return self._credentials.username

    @property
    def state(self) -> AuthState:
        return self._session_manager.state

    @property
    def is_authenticated(self) -> bool:
        return self._session_manager.is_authenticated

    @property
    def session(self) -> Session | None:
        return self._session_manager.current_session

    def make_uri(self, path: str) -> str:
        return self._transport.make_uri(path)

    # ── Authentication ────────────────────────────────────────────

    async def login(self) -> Outcome:
        """Log in explicitly. Outcome data is the new :class:`Session`."""
        return await self._session_manager.login()

    async def logout(self) -> Outcome:
        return await self._session_manager.logout()

    # ── Operations ────────────────────────────────────────────────

    async def version(self) -> Outcome:
        return await self._misc.version()

    async def send_msg(self, room_id: str, message: str) -> Outcome:
        return await self._chat.post_message(room_id, message)

    async def create_room(self, room_name: str) -> Outcome:
        return await self._channels.create(room_name)

    async def get_public_rooms(self) -> Outcome:
        return await self._channels.list()

    async def join_room(self, room_id: str) -> Outcome:
        return await self._channels.join(room_id)

    async def leave_room(self, room_id: str) -> Outcome:
        return await self._channels.leave(room_id)

    async def get_unread_msg(self, room_id: str) -> Outcome:
        return await self._rooms.unread_messages(room_id)

    # ── Events ────────────────────────────────────────────────────

    def on(self, event: str, handler: Callable[..., Any]) -> Unsubscribe:
        """Register an event handler. Returns a function to unsubscribe."""
        listeners = self._listeners.setdefault(event, [])
        listeners.append(handler)

        def unsub() -> None:
            try:
                listeners.remove(handler)
            except ValueError:
                pass

        return unsub

    # ── Lifecycle ─────────────────────────────────────────────────

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        await self._transport.close()

    async def __aenter__(self) -> RocketChatClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    # ── Private ───────────────────────────────────────────────────

    def _on_session_change(self, session: Session | None) -> None:
        if session is None:
            self._emit_event("logout")
        else:
            self._emit_event("login", session)

    def _emit_event(self, event: str, *args: Any) -> None:
        for handler in self._listeners.get(event, []):
            try:
                handler(*args)
            except Exception:
                logger.exception("Event handler error for %s", event)
