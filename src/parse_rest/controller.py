"""
REST controller: builds the authenticated payload for a Parse API call,
sends it through the dispatcher and turns every failure into a ParseError.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Optional, Union

from parse_rest.config import ParseConfig
from parse_rest.errors import ConfigurationError, ParseError
from parse_rest.identity import InstallationController, UserController
from parse_rest.models.envelope import AjaxResponse, RequestEnvelope
from parse_rest.models.options import RequestOptions
from parse_rest.transport.dispatcher import Dispatcher
from parse_rest.transport.envelope import join_url, safe_dumps

logger = logging.getLogger(__name__)

WRITE_METHOD = "POST"

Options = Union[RequestOptions, dict[str, Any], None]


def normalize_error(failure: BaseException) -> ParseError:
    """Map any failure of the request chain onto a single ``ParseError``."""
    if isinstance(failure, ParseError):
        return failure

    text = getattr(failure, "response_text", None)
    if text:
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            code = parsed.get("code")
            if not isinstance(code, int) or isinstance(code, bool):
                code = ParseError.OTHER_CAUSE
            message = parsed.get("error", text)
            return ParseError(code, message if isinstance(message, str) else safe_dumps(message))
        return ParseError(
            ParseError.INVALID_JSON,
            f"Received an error with invalid JSON from Parse: {text}",
        )

    reason = getattr(failure, "reason", None)
    if reason is None:
        reason = str(failure) or type(failure).__name__
    return ParseError(ParseError.CONNECTION_FAILED, f"Request failed: {safe_dumps(reason)}")


class RESTController:
    def __init__(
        self,
        config: ParseConfig,
        dispatcher: Dispatcher,
        installation_controller: InstallationController,
        user_controller: Optional[UserController] = None,
    ):
        self._config = config
        self._dispatcher = dispatcher
        self._installations = installation_controller
        self._users = user_controller

    def request(
        self, method: str, path: str, data: Any = None, options: Options = None,
    ) -> Awaitable[Any]:
        """Call the Parse API and return an awaitable of the decoded response body.

        Configuration problems raise ``ConfigurationError`` right here, before
        the awaitable exists. Everything after that surfaces as ``ParseError``
        when awaited.
        """
        opts = RequestOptions.coerce(options)
        envelope = self.build_envelope(method, path, data, opts)
        return self._send(envelope, opts)

    def ajax(
        self,
        method: str,
        url: str,
        body: Any,
        headers: Optional[dict[str, str]] = None,
        options: Options = None,
    ) -> Awaitable[AjaxResponse]:
        """Low-level send of an already-built body; failures are not normalized."""
        return self._dispatcher.ajax(method, url, body, headers, RequestOptions.coerce(options))

    def build_envelope(
        self, method: str, path: str, data: Any, options: RequestOptions,
    ) -> RequestEnvelope:
        """Everything about the payload that needs no I/O."""
        config = self._config
        payload: dict[str, Any] = dict(data) if isinstance(data, dict) else {}

        if method != WRITE_METHOD:
            payload["_method"] = method
            method = WRITE_METHOD

        payload["_ApplicationId"] = config.application_id
        if config.javascript_key:
            payload["_JavaScriptKey"] = config.javascript_key
        payload["_ClientVersion"] = config.version

        use_master_key = options.use_master_key
        if use_master_key is None:
            use_master_key = config.use_master_key
        if use_master_key:
            if not config.master_key:
                raise ConfigurationError("Cannot use the Master Key, it has not been provided.")
            payload.pop("_JavaScriptKey", None)
            payload["_MasterKey"] = config.master_key

        if config.force_revocable_session:
            payload["_RevocableSession"] = "1"

        return RequestEnvelope(method=method, url=join_url(config.server_url, path), payload=payload)

    async def _send(self, envelope: RequestEnvelope, options: RequestOptions) -> Any:
        try:
            installation_id, session_token = await asyncio.gather(
                self._installation_id(options),
                self._session_token(options),
            )
            payload = dict(envelope.payload, _InstallationId=installation_id)
            if session_token:
                payload["_SessionToken"] = session_token

            result = await self._dispatcher.ajax(
                envelope.method, envelope.url, json.dumps(payload), {}, options,
            )
            return result.response
        except Exception as e:
            error = normalize_error(e)
            logger.debug("%s %s failed: [%s] %s", envelope.method, envelope.url, error.code, error.message)
            if error is e:
                raise
            raise error from e

    async def _installation_id(self, options: RequestOptions) -> str:
        if options.installation_id and isinstance(options.installation_id, str):
            return options.installation_id
        return await self._installations.current_installation_id()

    async def _session_token(self, options: RequestOptions) -> Optional[str]:
        if isinstance(options.session_token, str):
            return options.session_token
        if self._users is None:
            return None
        user = await self._users.current_user_async()
        if user is None:
            return None
        return user.get_session_token()
