from __future__ import annotations

from typing import Awaitable, Callable

from ..protocol.call import CallDescriptor, Outcome

DispatchFn = Callable[[CallDescriptor], Awaitable[Outcome]]


class ChannelsAPI:
    """Public channels — create, list, join, leave."""

    def __init__(self, dispatch: DispatchFn) -> None:
        self._dispatch = dispatch

    async def create(self, name: str) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="POST",
                path="v1/channels.create",
                operation="room create. Room may already exist",
                not_found_message="create room failed",
                form={"name": name},
            )
        )

    async def list(self) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="GET",
                path="v1/channels.list",
                operation="listing public rooms",
                not_found_message="get public rooms failed",
            )
        )

    async def join(self, room_id: str) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="POST",
                path="v1/channels.join",
                operation="joining a room",
                not_found_message="join room failed",
                json={"roomId": room_id},
            )
        )

    async def leave(self, room_id: str) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="POST",
                path="v1/channels.leave",
                operation="leaving a room",
                not_found_message="leave room failed",
                json={"roomId": room_id},
            )
        )
