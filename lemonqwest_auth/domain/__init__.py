"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from lemonqwest_auth.domain.user import User, UserRole, AvatarType
from lemonqwest_auth.domain.pin import PIN
from lemonqwest_auth.domain.auth_result import AuthResult, Success, InvalidPin, UserNotFound
from lemonqwest_auth.domain.session import SessionState
from lemonqwest_auth.domain.errors import (
    LemonQwestAuthError,
    InvalidPinFormatError,
    UserDirectoryError,
    DuplicatePinError,
    SessionStoreError,
)

__all__ = [
    "User",
    "UserRole",
    "AvatarType",
    "PIN",
    "AuthResult",
    "Success",
    "InvalidPin",
    "UserNotFound",
    "SessionState",
    "LemonQwestAuthError",
    "InvalidPinFormatError",
    "UserDirectoryError",
    "DuplicatePinError",
    "SessionStoreError",
]
