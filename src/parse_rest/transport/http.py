"""
HTTP transport for the Parse REST API.

A transport performs exactly one HTTP exchange per call. Retrying, status
classification and error shaping belong to the dispatcher.
"""

import logging
from typing import Any, Optional, Protocol

import httpx

from parse_rest import __version__
from parse_rest.errors import TransportError
from parse_rest.models.envelope import TransportResponse
from parse_rest.transport.envelope import decode_body

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def perform(
        self, url: str, method: str, data: Any, headers: dict[str, str],
    ) -> TransportResponse:
        """Send one request. Raise ``TransportError`` if the call itself fails."""
        ...


class HttpTransport:
    """``Transport`` backed by ``httpx.AsyncClient``.

    A refused or dropped connection is reported as ``status == 0`` so the
    dispatcher can retry it; any other httpx failure raises ``TransportError``.
    """

    def __init__(self, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": f"parse-rest-sdk/{__version__}", "Accept": "application/json"},
            timeout=timeout,
        )

    async def perform(
        self, url: str, method: str, data: Any, headers: dict[str, str],
    ) -> TransportResponse:
        try:
            resp = await self._client.request(method, url, content=data, headers=headers)
        except (httpx.ConnectError, httpx.RemoteProtocolError) as e:
            logger.debug("No connection to %s: %s", url, e)
            return TransportResponse(status=0)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, {"type": type(e).__name__, "url": url})
        return TransportResponse(status=resp.status_code, body=decode_body(resp.text))

    async def close(self) -> None:
        await self._client.aclose()
