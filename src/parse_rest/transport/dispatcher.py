"""
Dispatcher: sends one logical request over a transport, retrying transient
failures with randomized exponential backoff.

Outcome of each attempt:
  200 + structured body      -> done
  status 0 or >= 500         -> retry until ``request_attempt_limit`` attempts
  anything else              -> AjaxError straight away
  transport raised           -> AjaxError straight away
"""

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Optional

from parse_rest.config import ParseConfig
from parse_rest.errors import AjaxError, TransportError
from parse_rest.models.envelope import AjaxResponse, TransportResponse
from parse_rest.models.options import RequestOptions
from parse_rest.transport.envelope import is_structured, safe_dumps
from parse_rest.transport.http import Transport

logger = logging.getLogger(__name__)

CONNECTION_FAILURE_REASON = "Unable to connect to the Parse API"
BACKOFF_BASE_MS = 125


class Dispatcher:
    def __init__(
        self,
        config: ParseConfig,
        transport: Transport,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        rng: Callable[[], float] = random.random,
    ):
        self._config = config
        self._transport = transport
        self._sleep = sleep
        self._rng = rng

    def backoff_delay(self, attempts: int) -> int:
        """Retry delay in milliseconds after ``attempts`` failed attempts."""
        return int(self._rng() * BACKOFF_BASE_MS * 2 ** attempts)

    def _headers(self, headers: Optional[dict[str, str]]) -> dict[str, str]:
        merged = dict(headers or {})
        if not isinstance(merged.get("Content-Type"), str):
            merged["Content-Type"] = "text/plain"  # no CORS pre-flight
        auth = self._config.server_auth_header
        if auth:
            merged["Authorization"] = auth
        return merged

    async def ajax(
        self,
        method: str,
        url: str,
        body: Any,
        headers: Optional[dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> AjaxResponse:
        """Send ``body`` to ``url`` and return the decoded response.

        ``options`` carries the caller's pass-through fields; the dispatcher
        itself does not interpret them.
        """
        headers = self._headers(headers)
        attempts = 0
        while True:
            logger.debug("%s %s (attempt %d)", method, url, attempts + 1)
            try:
                result = await self._transport.perform(url, method, body, headers)
            except TransportError as e:
                raise AjaxError(reason=safe_dumps({"error": str(e), **(e.details or {})})) from e

            if result.status == 200 and is_structured(result.body):
                return AjaxResponse(response=result.body, status=result.status)

            if result.status >= 500 or result.status == 0:
                attempts += 1
                if attempts < self._config.request_attempt_limit:
                    delay = self.backoff_delay(attempts)
                    logger.warning(
                        "%s %s failed with status %d, retry %d in %d ms",
                        method, url, result.status, attempts, delay,
                    )
                    await self._sleep(delay / 1000)
                    continue
                if result.status == 0:
                    raise AjaxError(reason=CONNECTION_FAILURE_REASON, status=0)

            raise _status_error(result)


def _status_error(result: TransportResponse) -> AjaxError:
    text = safe_dumps(result.body) if result.body not in (None, "") else None
    return AjaxError(response_text=text, reason={"status": result.status}, status=result.status)
