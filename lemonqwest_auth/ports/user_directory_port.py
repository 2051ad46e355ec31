"""
User Directory Port - Interface for user lookup.

Implementations:
- MemoryUserDirectoryAdapter: In-memory users (testing, embedding)
- JsonFileUserDirectoryAdapter: Users loaded from a JSON file
"""

from abc import ABC, abstractmethod
from typing import Optional
from lemonqwest_auth.domain.user import User, UserRole


class UserDirectoryPort(ABC):
    """Port: Resolve household users."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by id.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise

        Raises:
            UserDirectoryError: If the underlying storage fails
        """
        pass

    @abstractmethod
    async def find_by_pin(self, pin: str) -> Optional[User]:
        """
        Find the user holding a PIN (exact match).

        Args:
            pin: Raw PIN string as entered

        Returns:
            User if a PIN matches, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_role(self, role: UserRole) -> Optional[User]:
        """
        Find the user of a role (first match).

        Args:
            role: Role to look up

        Returns:
            User if one exists, None otherwise
        """
        pass
