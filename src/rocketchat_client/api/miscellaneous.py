from __future__ import annotations

from typing import Any, Awaitable, Callable

from ..errors import MalformedBodyError
from ..protocol.call import CallDescriptor, Outcome, failure, success

DispatchFn = Callable[[CallDescriptor], Awaitable[Outcome]]


class MiscellaneousAPI:
    """Server information."""

    def __init__(self, dispatch: DispatchFn) -> None:
        self._dispatch = dispatch

    async def info(self) -> Outcome:
        return await self._dispatch(
            CallDescriptor(
                method="GET",
                path="info",
                operation="getting server info",
                not_found_message="get server info failed",
            )
        )

    async def version(self) -> Outcome:
        """Return ``{status, versions: {api, rocketchat}}`` from the info query."""
        outcome = await self.info()
        if outcome.error is not None:
            return outcome

        body: Any = outcome.data
        info = body.get("info") if isinstance(body, dict) else None
        version = info.get("version") if isinstance(info, dict) else None
        if not isinstance(version, str):
            return failure(
                MalformedBodyError(
                    "Server info response has no version", details=body
                )
            )

        return success(
            {
                "status": "success" if body.get("success") else "error",
                "versions": {"api": version, "rocketchat": version},
            }
        )
