from .api.channels import ChannelsAPI
from .api.chat import ChatAPI
from .api.miscellaneous import MiscellaneousAPI
from .api.rooms import RoomsAPI
from .client import RocketChatClient
from .config import (
    AUTH_TOKEN_HEADER,
    USER_ID_HEADER,
    AuthState,
    ClientOptions,
    Credentials,
    Session,
)
from .errors import (
    AuthenticationError,
    EmptyBodyError,
    MalformedBodyError,
    NotFoundError,
    RocketChatError,
    TransportError,
    UnexpectedStatusError,
)
from .protocol.call import CallDescriptor, Outcome
from .protocol.dispatcher import Dispatcher
from .session.session_manager import SessionManager

__all__ = [
    "RocketChatClient",
    "ChatAPI",
    "ChannelsAPI",
    "RoomsAPI",
    "MiscellaneousAPI",
    "ClientOptions",
    "Credentials",
    "Session",
    "AuthState",
    "AUTH_TOKEN_HEADER",
    "USER_ID_HEADER",
    "CallDescriptor",
    "Outcome",
    "Dispatcher",
    "SessionManager",
    "RocketChatError",
    "TransportError",
    "AuthenticationError",
    "NotFoundError",
    "UnexpectedStatusError",
    "EmptyBodyError",
    "MalformedBodyError",
]
