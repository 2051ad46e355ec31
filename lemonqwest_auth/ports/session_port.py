"""
Session Port - Interface for the current session slot.

Implementations:
- MemorySessionAdapter: In-process slot
- RedisSessionAdapter: Redis hash
- DynamoDBSessionAdapter: DynamoDB item
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional
from lemonqwest_auth.domain.session import SessionState
from lemonqwest_auth.domain.user import UserRole

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[str]], None]


class SessionPort(ABC):
    """
    Port: Hold the currently authenticated user.

    The current user id is an observable value: listeners registered
    with subscribe() receive the new id (or None) after every write
    made through this store.
    """

    def __init__(self):
        self._listeners: List[SessionListener] = []

    @abstractmethod
    async def current_session(self) -> Optional[SessionState]:
        """
        Get the current session.

        Returns:
            SessionState if a user is signed in, None otherwise
        """
        pass

    async def current_user_id(self) -> Optional[str]:
        """
        Get the latest current user id.

        Returns:
            User ID if a user is signed in, None otherwise
        """
        session = await self.current_session()
        return session.user_id if session else None

    @abstractmethod
    async def set_current_user(self, user_id: str, role: UserRole, is_admin: bool) -> None:
        """
        Replace the session with a new user.

        All three fields are written as one atomic unit.

        Args:
            user_id: User ID
            role: User's role
            is_admin: User's admin flag
        """
        pass

    @abstractmethod
    async def clear_current_user(self) -> None:
        """
        Clear the session. Clearing an empty session is a no-op.
        """
        pass

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Observe changes to the current user id.

        Args:
            listener: Called with the new user id (None after clear)

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, user_id: Optional[str]) -> None:
        """Notify listeners of a new current user id."""
        for listener in list(self._listeners):
            try:
                listener(user_id)
            except Exception:
                logger.exception("Session listener %r failed", listener)
