"""
Request / response envelopes exchanged between the controller, the dispatcher
and a transport.
"""

from typing import Any
from pydantic import BaseModel, Field


class RequestEnvelope(BaseModel):
    method: str
    url: str
    payload: dict[str, Any] = Field(default_factory=dict)


class TransportResponse(BaseModel):
    """What a transport hands back for one attempt. ``status == 0`` means no connection."""
    status: int
    body: Any = None


class AjaxResponse(BaseModel):
    """Settled dispatcher result: the decoded body plus the final status."""
    response: Any
    status: int
