from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ..errors import RocketChatError


@dataclass
class CallDescriptor:
    """A fully specified, not-yet-sent request to the REST API."""

    method: str
    path: str
    operation: str
    not_found_message: str
    headers: dict[str, str] = field(default_factory=dict)
    form: dict[str, str] | None = None
    json: dict[str, Any] | None = None

    def failure_message(self, status_code: int) -> str:
        return (
            f"{status_code}: Unable to connect to rocket chat during "
            f"{self.operation}."
        )


class Outcome(NamedTuple):
    """Uniform ``(error, data)`` result of every public operation.

    Check ``error`` before trusting ``data``.
    """

    error: RocketChatError | None
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return ``data``, raising ``error`` if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.data


def failure(error: RocketChatError) -> Outcome:
    return Outcome(error, None)


def success(data: Any) -> Outcome:
    return Outcome(None, data)
