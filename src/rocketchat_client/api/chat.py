from __future__ import annotations

from typing import Awaitable, Callable

from ..protocol.call import CallDescriptor, Outcome

DispatchFn = Callable[[CallDescriptor], Awaitable[Outcome]]


class ChatAPI:
    """Message posting."""

    def __init__(self, dispatch: DispatchFn) -> None:
        self._dispatch = dispatch

    async def post_message(self, room_id: str, text: str) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="POST",
                path="v1/chat.postMessage",
                operation="sending a message",
                not_found_message="send message failed",
                json={"roomId": room_id, "text": text},
            )
        )
