"""
Wire helpers: URL joining, body decoding and failure serialization.
"""

import json
from typing import Any

from pydantic import BaseModel


def join_url(server_url: str, path: str) -> str:
    """Join the server URL and a path with exactly one separating slash."""
    return server_url.rstrip("/") + "/" + path.lstrip("/")


def decode_body(raw: Any) -> Any:
    """Decode a response body: JSON when it parses, raw text otherwise."""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def is_structured(body: Any) -> bool:
    return isinstance(body, (dict, list))


def safe_dumps(value: Any) -> str:
    """Serialize ``value`` to JSON, falling back to ``str()``. Never raises."""
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump()
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
