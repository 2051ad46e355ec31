"""
Authentication Domain Service - PIN login, role switching and session access.
"""

import logging
from typing import Optional
from lemonqwest_auth.ports.user_directory_port import UserDirectoryPort
from lemonqwest_auth.ports.session_port import SessionPort
from lemonqwest_auth.domain.user import User, UserRole
from lemonqwest_auth.domain.auth_result import AuthResult, Success, InvalidPin, UserNotFound

logger = logging.getLogger(__name__)


class AuthenticationDomainService:
    """
    Authentication and session rules for the household.

    Holds no state: every call reads the session store and the user
    directory afresh. Expected failures are returned as AuthResult
    variants; collaborator errors propagate unchanged.

    Example:
        from lemonqwest_auth import AuthenticationDomainService
        from lemonqwest_auth.adapters import MemoryUserDirectoryAdapter, MemorySessionAdapter

        service = AuthenticationDomainService(
            user_directory=MemoryUserDirectoryAdapter(users),
            session_store=MemorySessionAdapter(),
        )

        result = await service.authenticate_with_pin("1234")
        if result.is_success:
            await service.switch_role(UserRole.CHILD)

        await service.logout()
    """

    def __init__(self, user_directory: UserDirectoryPort, session_store: SessionPort):
        """
        Initialize service with adapters.

        Args:
            user_directory: User lookup adapter
            session_store: Current session adapter
        """
        self._users = user_directory
        self._session = session_store

    async def authenticate_with_pin(self, pin: str) -> AuthResult:
        """
        Sign in the user holding a PIN.

        Args:
            pin: Raw PIN as entered; matched exactly by the directory

        Returns:
            Success(user) and a new session, or InvalidPin with the
            session untouched
        """
        user = await self._users.find_by_pin(pin)
        if user is None:
            logger.debug("PIN authentication failed")
            return InvalidPin()

        await self._start_session(user)
        logger.info("User %s authenticated with PIN", user.user_id)
        return Success(user)

    async def switch_role(self, target_role: UserRole) -> AuthResult:
        """
        Switch the session to the user of another role.

        Only a signed-in caregiver may switch. A child session gets
        UserNotFound, the same as a missing session or target user.

        Args:
            target_role: Role of the user to switch to

        Returns:
            Success(target_user) or UserNotFound
        """
        current_user_id = await self._session.current_user_id()
        if current_user_id is None:
            logger.debug("Role switch rejected: no active session")
            return UserNotFound()

        current_user = await self._users.find_by_id(current_user_id)
        if current_user is None:
            logger.debug("Role switch rejected: session user %s not found", current_user_id)
            return UserNotFound()

        if current_user.role != UserRole.CAREGIVER:
            logger.debug("Role switch rejected: user %s is not a caregiver", current_user_id)
            return UserNotFound()

        target_user = await self._users.find_by_role(target_role)
        if target_user is None:
            logger.debug("Role switch rejected: no %s user", target_role.value)
            return UserNotFound()

        await self._start_session(target_user)
        logger.info(
            "User %s switched to %s user %s",
            current_user_id, target_role.value, target_user.user_id,
        )
        return Success(target_user)

    async def authenticate_as_child(self) -> AuthResult:
        """
        Sign in the child without a PIN.

        Returns:
            Success(child) or UserNotFound if there is no child
        """
        child = await self._users.find_by_role(UserRole.CHILD)
        if child is None:
            logger.debug("Child authentication failed: no child user")
            return UserNotFound()

        await self._start_session(child)
        logger.info("Child %s authenticated", child.user_id)
        return Success(child)

    async def get_current_user(self) -> Optional[User]:
        """
        Resolve the signed-in user.

        Returns:
            User, or None if there is no session or its id no longer
            resolves (the session is left as is)
        """
        user_id = await self._session.current_user_id()
        if user_id is None:
            return None

        return await self._users.find_by_id(user_id)

    async def is_authenticated(self) -> bool:
        """True iff get_current_user() resolves a user."""
        return await self.get_current_user() is not None

    async def logout(self) -> None:
        """Clear the session. Safe to call without a session."""
        await self._session.clear_current_user()
        logger.info("Session cleared")

    async def _start_session(self, user: User) -> None:
        await self._session.set_current_user(user.user_id, user.role, user.is_admin)
