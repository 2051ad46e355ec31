"""
Session Domain Model - The current authentication slot.
"""

from dataclasses import dataclass
from typing import Dict, Any

from lemonqwest_auth.domain.user import UserRole


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of the single session slot.

    Domain rules:
    - user_id, role and is_admin are written and cleared together
    - one slot per device; no expiry
    """
    user_id: str
    role: UserRole
    is_admin: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "user_id": self.user_id,
            "role": self.role.value,
            "is_admin": self.is_admin,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionState":
        """Deserialize from dict."""
        is_admin = data.get("is_admin", False)
        if isinstance(is_admin, str):
            is_admin = is_admin.lower() in ("1", "true")
        return cls(
            user_id=data["user_id"],
            role=UserRole(data["role"]),
            is_admin=bool(is_admin),
        )
