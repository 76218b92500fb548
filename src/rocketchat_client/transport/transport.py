from __future__ import annotations

import logging
from urllib.parse import unquote

import httpx

from ..config import API_BASE_PATH, ClientOptions
from ..errors import TransportError
from ..protocol.call import CallDescriptor

logger = logging.getLogger("rocketchat_client")


class HttpTransport:
    """Low-level httpx wrapper that turns call descriptors into responses."""

    def __init__(
        self,
        options: ClientOptions,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._options = options
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=options.request_timeout_ms / 1000
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def make_uri(self, path: str) -> str:
        """Compose the full REST address, e.g. ``http://host:80/api/v1/login``."""
        uri = (
            f"{self._options.protocol}://{self._options.host}:"
            f"{self._options.port}{API_BASE_PATH}{path}"
        )
        return unquote(uri)

    async def send(self, call: CallDescriptor) -> httpx.Response:
        url = self.make_uri(call.path)
        logger.debug("%s %s", call.method, url)
        try:
            return await self._client.request(
                call.method,
                url,
                headers=call.headers,
                data=call.form,
                json=call.json,
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timeout during {call.operation}", details=e
            ) from e
        except httpx.InvalidURL as e:
            # Percent-decoded paths can carry control characters.
            raise TransportError(
                f"Invalid address for {call.operation}: {e}", details=e
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, details=e) from e

    async def close(self) -> None:
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
