"""
Identity collaborators: installation id and current user lookups.
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Optional, Protocol

from parse_rest.models.user import ParseUser

INSTALLATION_ID_FILE = Path.home() / ".parse" / "installation_id"


class InstallationController(Protocol):
    async def current_installation_id(self) -> str:
        ...


class UserController(Protocol):
    async def current_user_async(self) -> Optional[ParseUser]:
        ...


class FileInstallationController:
    """Stable installation id cached on disk, created on first use."""

    def __init__(self, path: Path = INSTALLATION_ID_FILE):
        self._path = path
        self._iid: Optional[str] = None

    async def current_installation_id(self) -> str:
        if self._iid is None:
            self._iid = self._load_or_create()
        return self._iid

    def _load_or_create(self) -> str:
        try:
            existing = self._path.read_text().strip()
            if existing:
                return existing
        except OSError:
            pass
        iid = str(uuid.uuid4())
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(iid)
        except OSError:
            pass
        return iid


class MemoryUserController:
    """Holds the logged-in user for the lifetime of the process."""

    def __init__(self, user: Optional[ParseUser] = None):
        self._user = user

    async def current_user_async(self) -> Optional[ParseUser]:
        return self._user

    def become(self, user: ParseUser) -> None:
        self._user = user

    def log_out(self) -> None:
        self._user = None
