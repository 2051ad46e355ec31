"""
Memory User Directory Adapter - In-memory user lookup.
"""

from typing import Dict, Iterable, List, Optional
from lemonqwest_auth.ports.user_directory_port import UserDirectoryPort
from lemonqwest_auth.domain.user import User, UserRole
from lemonqwest_auth.domain.errors import DuplicatePinError


class MemoryUserDirectoryAdapter(UserDirectoryPort):
    """
    In-memory user directory.

    Users are kept in insertion order, so find_by_role returns the
    first user added with that role. PINs are unique across users.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        """
        Initialize in-memory storage.

        Args:
            users: Optional initial users
        """
        self._users: Dict[str, User] = {}
        for user in users or []:
            self.add(user)

    def add(self, user: User) -> None:
        """
        Add or replace a user.

        Raises:
            DuplicatePinError: If another user already holds the same PIN
        """
        if user.pin is not None:
            for existing in self._users.values():
                if existing.user_id != user.user_id and existing.pin == user.pin:
                    raise DuplicatePinError(user.user_id, existing.user_id)

        self._users[user.user_id] = user

    def remove(self, user_id: str) -> bool:
        """Remove a user. Returns False if not found."""
        return self._users.pop(user_id, None) is not None

    def users(self) -> List[User]:
        """All users in insertion order."""
        return list(self._users.values())

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        return self._users.get(user_id)

    async def find_by_pin(self, pin: str) -> Optional[User]:
        """Find the user whose PIN exactly matches."""
        for user in self._users.values():
            if user.pin is not None and user.pin.matches(pin):
                return user
        return None

    async def find_by_role(self, role: UserRole) -> Optional[User]:
        """Find the first user of a role."""
        for user in self._users.values():
            if user.role == role:
                return user
        return None
