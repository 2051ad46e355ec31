"""
PIN Domain Model - Credential value object.
"""

from dataclasses import dataclass
import hmac

from lemonqwest_auth.domain.errors import InvalidPinFormatError


@dataclass(frozen=True)
class PIN:
    """
    PIN value object - a fixed-format numeric secret.

    Domain rules:
    - exactly LENGTH ASCII digits
    - immutable once created
    - never rendered in repr/str
    """
    value: str

    LENGTH = 4

    def __post_init__(self):
        if not self.is_valid_format(self.value):
            raise InvalidPinFormatError(f"PIN must be exactly {self.LENGTH} digits")

    @classmethod
    def create(cls, value: str) -> "PIN":
        """
        Create a PIN after validating its format.

        Args:
            value: Raw PIN string (e.g. "1234")

        Returns:
            New PIN instance

        Raises:
            InvalidPinFormatError: If value is not LENGTH digits
        """
        return cls(value=value)

    @classmethod
    def is_valid_format(cls, value) -> bool:
        """Check format without raising."""
        return (
            isinstance(value, str)
            and len(value) == cls.LENGTH
            and value.isascii()
            and value.isdigit()
        )

    def matches(self, candidate: str) -> bool:
        """Constant-time comparison against a raw PIN string."""
        if not isinstance(candidate, str):
            return False
        return hmac.compare_digest(self.value.encode(), candidate.encode())

    def __repr__(self) -> str:
        return "PIN(****)"

    def __str__(self) -> str:
        return "*" * self.LENGTH
