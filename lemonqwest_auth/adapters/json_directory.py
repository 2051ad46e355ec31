"""
JSON File User Directory Adapter - Users loaded from disk.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional, Union
from lemonqwest_auth.ports.user_directory_port import UserDirectoryPort
from lemonqwest_auth.adapters.memory_directory import MemoryUserDirectoryAdapter
from lemonqwest_auth.domain.user import User, UserRole
from lemonqwest_auth.domain.errors import UserDirectoryError

logger = logging.getLogger(__name__)


class JsonFileUserDirectoryAdapter(UserDirectoryPort):
    """
    Read-only directory backed by a JSON file.

    File format:
        {"users": [{"user_id": "...", "name": "...", "role": "caregiver",
                    "pin": "1234", "is_admin": true, ...}, ...]}

    The file is read on first lookup and cached. A missing file is
    treated as an empty directory.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize JSON directory.

        Args:
            path: Path to the users file
        """
        self._path = Path(path)
        self._directory: Optional[MemoryUserDirectoryAdapter] = None

    async def _load(self) -> MemoryUserDirectoryAdapter:
        """Lazy load users from disk; the read runs in a worker thread."""
        if self._directory is not None:
            return self._directory

        if not self._path.exists():
            logger.warning("Users file %s not found; directory is empty", self._path)
            self._directory = MemoryUserDirectoryAdapter()
            return self._directory

        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
            data = json.loads(text)
            users = [User.from_dict(item) for item in data.get("users", [])]
        except (OSError, json.JSONDecodeError, KeyError, ValueError, TypeError, AttributeError) as e:
            raise UserDirectoryError(f"Cannot read users file {self._path}: {e}") from e

        self._directory = MemoryUserDirectoryAdapter(users)
        logger.info("Loaded %d users from %s", len(users), self._path)
        return self._directory

    def reload(self) -> None:
        """Drop the cache; the file is re-read on the next lookup."""
        self._directory = None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        directory = await self._load()
        return await directory.find_by_id(user_id)

    async def find_by_pin(self, pin: str) -> Optional[User]:
        """Find the user whose PIN exactly matches."""
        directory = await self._load()
        return await directory.find_by_pin(pin)

    async def find_by_role(self, role: UserRole) -> Optional[User]:
        """Find the first user of a role."""
        directory = await self._load()
        return await directory.find_by_role(role)
