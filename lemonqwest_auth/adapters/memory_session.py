"""
Memory Session Adapter - In-process session slot.
"""

import asyncio
from typing import Optional
from lemonqwest_auth.ports.session_port import SessionPort
from lemonqwest_auth.domain.session import SessionState
from lemonqwest_auth.domain.user import UserRole


class MemorySessionAdapter(SessionPort):
    """
    In-memory session slot.

    WARNING: The session is lost on restart.
    """

    def __init__(self):
        """Initialize empty slot."""
        super().__init__()
        self._session: Optional[SessionState] = None
        self._lock = asyncio.Lock()

    async def current_session(self) -> Optional[SessionState]:
        """Get the current session."""
        return self._session

    async def set_current_user(self, user_id: str, role: UserRole, is_admin: bool) -> None:
        """Replace the session."""
        async with self._lock:
            self._session = SessionState(user_id=user_id, role=role, is_admin=is_admin)
        self._publish(user_id)

    async def clear_current_user(self) -> None:
        """Clear the session."""
        async with self._lock:
            self._session = None
        self._publish(None)
