"""
AuthResult - Outcome of an authentication or role switch.

A closed set of variants. Expected failures are returned, never raised:

    result = await service.authenticate_with_pin("1234")
    if isinstance(result, Success):
        user = result.user
    elif isinstance(result, InvalidPin):
        ...
    elif isinstance(result, UserNotFound):
        ...
"""

from dataclasses import dataclass

from lemonqwest_auth.domain.user import User


@dataclass(frozen=True)
class AuthResult:
    """Base of the three outcome variants. Not instantiated directly."""

    @property
    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(AuthResult):
    """Authentication or switch succeeded; carries the session user."""
    user: User

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidPin(AuthResult):
    """The supplied PIN matched no user."""


@dataclass(frozen=True)
class UserNotFound(AuthResult):
    """
    A required user could not be resolved.

    Also returned when a child session attempts to switch roles;
    forbidden and absent are intentionally indistinguishable.
    """
