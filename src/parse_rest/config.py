"""
Client configuration.

One ``ParseConfig`` is built per client and handed to the controller and the
dispatcher; neither mutates it.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import BaseModel

from parse_rest import __version__

DEFAULT_SERVER_URL = "https://api.parse.com/1"
DEFAULT_REQUEST_ATTEMPT_LIMIT = 5

_ENV_PREFIX = "PARSE_"
_TRUTHY = {"1", "true", "yes", "on"}


class ParseConfig(BaseModel):
    server_url: str = DEFAULT_SERVER_URL
    application_id: Optional[str] = None
    javascript_key: Optional[str] = None
    master_key: Optional[str] = None
    version: str = f"py{__version__}"
    server_auth_type: Optional[str] = None
    server_auth_token: Optional[str] = None
    use_master_key: bool = False
    force_revocable_session: bool = False
    request_attempt_limit: int = DEFAULT_REQUEST_ATTEMPT_LIMIT

    model_config = {"frozen": True}

    @property
    def server_auth_header(self) -> Optional[str]:
        """``Authorization`` value when both halves of the server auth pair are set."""
        if self.server_auth_type and self.server_auth_token:
            return f"{self.server_auth_type} {self.server_auth_token}"
        return None

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None, **overrides: Any) -> "ParseConfig":
        """Build a config from ``PARSE_*`` environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            raw = env.get(_ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if field.annotation is bool:
                values[name] = raw.strip().lower() in _TRUTHY
            else:
                values[name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)

    def masked(self) -> dict[str, Any]:
        """Dump with secrets shortened, for display."""
        data = self.model_dump()
        for key in ("javascript_key", "master_key", "server_auth_token"):
            if data.get(key):
                data[key] = data[key][:4] + "…"
        return data
