"""
Minimal user model: only what the request pipeline reads.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ParseUser(BaseModel):
    object_id: Optional[str] = Field(default=None, alias="objectId")
    username: Optional[str] = None
    session_token: Optional[str] = Field(default=None, alias="sessionToken")

    model_config = {"populate_by_name": True, "extra": "allow"}

    def get_session_token(self) -> Optional[str]:
        return self.session_token
