from __future__ import annotations

import httpx

from ..errors import (
    EmptyBodyError,
    MalformedBodyError,
    NotFoundError,
    UnexpectedStatusError,
)
from .call import CallDescriptor, Outcome, failure, success


def classify_response(call: CallDescriptor, response: httpx.Response) -> Outcome:
    """Map an HTTP response onto the uniform outcome for ``call``."""
    if response.status_code == 404:
        return failure(NotFoundError(call.not_found_message))

    if response.status_code != 200:
        return failure(
            UnexpectedStatusError(
                response.status_code, call.failure_message(response.status_code)
            )
        )

    if not response.content.strip():
        return failure(EmptyBodyError())

    try:
        body = response.json()
    except ValueError:
        return failure(
            MalformedBodyError(
                f"Response body during {call.operation} is not valid JSON",
                details=response.text,
            )
        )

    return success(body)
