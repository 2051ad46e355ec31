"""
LemonQwest Auth - PIN authentication & role switching

Hexagonal architecture for the household authentication core:
a domain service over a user directory port and a session port.

Usage:
    from lemonqwest_auth import AuthenticationDomainService, UserRole
    from lemonqwest_auth.adapters import MemoryUserDirectoryAdapter, RedisSessionAdapter

    service = AuthenticationDomainService(
        user_directory=MemoryUserDirectoryAdapter(users),
        session_store=RedisSessionAdapter(redis_url="redis://localhost"),
    )

    # Authenticate
    result = await service.authenticate_with_pin("1234")

    # Hand the device to the child
    result = await service.switch_role(UserRole.CHILD)
"""

__version__ = "0.1.0"

from lemonqwest_auth.services.authentication_service import AuthenticationDomainService
from lemonqwest_auth.domain.user import User, UserRole
from lemonqwest_auth.domain.pin import PIN
from lemonqwest_auth.domain.auth_result import AuthResult, Success, InvalidPin, UserNotFound

__all__ = [
    "AuthenticationDomainService",
    "User",
    "UserRole",
    "PIN",
    "AuthResult",
    "Success",
    "InvalidPin",
    "UserNotFound",
]
