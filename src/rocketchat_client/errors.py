from __future__ import annotations


class RocketChatError(Exception):
    """Base error for all rocketchat client errors."""

    def __init__(self, code: str, message: str, details: object = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class TransportError(RocketChatError):
    """Network or connection failure before a response was received."""

    def __init__(self, message: str, details: object = None) -> None:
        super().__init__("TRANSPORT", message, details)


class AuthenticationError(RocketChatError):
    """Login exchange was rejected or could not produce a session."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("AUTHENTICATION", message)
        self.status_code = status_code


class NotFoundError(RocketChatError):
    """Remote service answered 404."""

    def __init__(self, message: str) -> None:
        super().__init__("NOT_FOUND", message)


class UnexpectedStatusError(RocketChatError):
    """Remote service answered with a status other than 200 or 404."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__("UNEXPECTED_STATUS", message)
        self.status_code = status_code


class EmptyBodyError(RocketChatError):
    """Success status without a response body."""

    def __init__(self, message: str = "Response body was undefined.") -> None:
        super().__init__("EMPTY_BODY", message)


class MalformedBodyError(RocketChatError):
    """Response body could not be parsed into the expected structure."""

    def __init__(self, message: str, details: object = None) -> None:
        super().__init__("MALFORMED_BODY", message, details)
