"""
Domain Errors - Faults raised by collaborators.

Expected authentication failures are never raised; they are
returned as AuthResult variants. These exceptions cover genuine
storage failures and invalid input at construction time.
"""


class LemonQwestAuthError(Exception):
    """Base class for all lemonqwest_auth errors."""


class InvalidPinFormatError(LemonQwestAuthError, ValueError):
    """A PIN value does not match the required format."""


class UserDirectoryError(LemonQwestAuthError):
    """The user directory could not be read or written."""


class DuplicatePinError(UserDirectoryError):
    """Two users would share the same PIN."""

    def __init__(self, user_id: str, existing_user_id: str):
        self.user_id = user_id
        self.existing_user_id = existing_user_id
        super().__init__(
            f"PIN for user {user_id} is already assigned to user {existing_user_id}"
        )


class SessionStoreError(LemonQwestAuthError):
    """The session store could not be read or written."""
