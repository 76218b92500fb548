from __future__ import annotations

from typing import Awaitable, Callable

from ..protocol.call import CallDescriptor, Outcome

DispatchFn = Callable[[CallDescriptor], Awaitable[Outcome]]


class RoomsAPI:
    """Room message history."""

    def __init__(self, dispatch: DispatchFn) -> None:
        self._dispatch = dispatch

    async def unread_messages(self, room_id: str) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="GET",
                path=f"rooms/{room_id}/messages",
                operation="getting unread messages",
                not_found_message="get unread messages failed",
            )
        )
