"""
AsyncParse / Parse: main SDK clients.
"""

import asyncio
from typing import Any, Awaitable, Optional

from parse_rest.config import ParseConfig
from parse_rest.controller import Options, RESTController
from parse_rest.identity import (
    FileInstallationController,
    InstallationController,
    MemoryUserController,
    UserController,
)
from parse_rest.models.envelope import AjaxResponse
from parse_rest.models.user import ParseUser
from parse_rest.transport.dispatcher import Dispatcher
from parse_rest.transport.http import HttpTransport, Transport


class AsyncParse:
    """Async Parse REST client (primary)."""

    def __init__(
        self,
        config: Optional[ParseConfig] = None,
        transport: Optional[Transport] = None,
        installation_controller: Optional[InstallationController] = None,
        user_controller: Optional[UserController] = None,
    ):
        self.config = config or ParseConfig.from_env()
        self._owns_transport = transport is None
        self.transport = transport or HttpTransport()
        self.installations = installation_controller or FileInstallationController()
        self.users = user_controller or MemoryUserController()
        self.dispatcher = Dispatcher(self.config, self.transport)
        self.rest = RESTController(self.config, self.dispatcher, self.installations, self.users)

    def request(self, method: str, path: str, data: Any = None, options: Options = None) -> Awaitable[Any]:
        """See ``RESTController.request``."""
        return self.rest.request(method, path, data, options)

    def ajax(
        self, method: str, url: str, body: Any,
        headers: Optional[dict[str, str]] = None, options: Options = None,
    ) -> Awaitable[AjaxResponse]:
        return self.rest.ajax(method, url, body, headers, options)

    def become(self, user: ParseUser) -> None:
        """Make ``user`` the current user; its session token signs later requests."""
        if not isinstance(self.users, MemoryUserController):
            raise TypeError("become() needs the default in-memory user controller")
        self.users.become(user)

    async def close(self) -> None:
        if self._owns_transport and isinstance(self.transport, HttpTransport):
            await self.transport.close()

    async def __aenter__(self) -> "AsyncParse":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class Parse:
    """Sync wrapper around AsyncParse. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncParse(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> ParseConfig:
        return self._async.config

    def request(self, method: str, path: str, data: Any = None, options: Options = None) -> Any:
        awaitable = self._async.request(method, path, data, options)
        return self._run(awaitable)

    def ajax(self, method: str, url: str, body: Any, **kwargs: Any) -> AjaxResponse:
        return self._run(self._async.ajax(method, url, body, **kwargs))

    def become(self, user: ParseUser) -> None:
        self._async.become(user)

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
