"""
Per-call request options.
"""

from __future__ import annotations

from typing import Any, Optional, Union
from pydantic import BaseModel, Field


class RequestOptions(BaseModel):
    """Options recognized by ``RESTController.request``.

    Values are kept as given: a non-string session token or installation id
    is ignored by the controller, which then asks its resolvers instead.
    ``batch_size``, ``include`` and ``progress`` are passed through to the
    transport layer untouched. Unknown keys are kept as extras.
    """
    use_master_key: Optional[Any] = Field(default=None, alias="useMasterKey")
    session_token: Optional[Any] = Field(default=None, alias="sessionToken")
    installation_id: Optional[Any] = Field(default=None, alias="installationId")
    batch_size: Optional[Any] = Field(default=None, alias="batchSize")
    include: Optional[Any] = None
    progress: Optional[Any] = None

    model_config = {"populate_by_name": True, "extra": "allow", "frozen": True}

    @classmethod
    def coerce(cls, options: Union["RequestOptions", dict[str, Any], None]) -> "RequestOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
