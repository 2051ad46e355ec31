"""
User Domain Model - Pure business entity.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum
import uuid

from lemonqwest_auth.domain.pin import PIN


class UserRole(Enum):
    """Household roles."""
    CHILD = "child"            # Completes tasks, earns and spends tokens
    CAREGIVER = "caregiver"    # Manages tasks and rewards, may switch roles


class AvatarType(Enum):
    """Avatar source."""
    PREDEFINED = "predefined"  # Built-in avatar id
    CUSTOM = "custom"          # Base64 image data


DEFAULT_AVATAR_ID = "default_child"


@dataclass
class User:
    """
    User entity - a member of the household.

    Domain rules:
    - user_id is immutable
    - pin is optional (children usually have none)
    - is_admin is only meaningful for caregivers
    - token balance, avatar and display preferences are passthrough data
    """
    name: str
    role: UserRole = UserRole.CHILD
    user_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    pin: Optional[PIN] = None
    is_admin: bool = False

    # Passthrough attributes
    token_balance: int = 0
    display_name: Optional[str] = None
    avatar_type: AvatarType = AvatarType.PREDEFINED
    avatar_data: str = DEFAULT_AVATAR_ID
    favorite_color: Optional[str] = None

    @property
    def is_child(self) -> bool:
        return self.role == UserRole.CHILD

    @property
    def is_caregiver(self) -> bool:
        return self.role == UserRole.CAREGIVER

    @property
    def has_pin(self) -> bool:
        return self.pin is not None

    def to_dict(self, include_pin: bool = False) -> Dict[str, Any]:
        """
        Serialize to dict.

        Args:
            include_pin: If True, includes the raw PIN (storage use only)

        Returns:
            Dict representation
        """
        data = {
            "user_id": self.user_id,
            "name": self.name,
            "role": self.role.value,
            "is_admin": self.is_admin,
            "has_pin": self.has_pin,
            "token_balance": self.token_balance,
            "display_name": self.display_name,
            "avatar_type": self.avatar_type.value,
            "avatar_data": self.avatar_data,
            "favorite_color": self.favorite_color,
        }
        if include_pin:
            data["pin"] = self.pin.value if self.pin else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Deserialize from dict."""
        is_admin = data.get("is_admin", False)
        if isinstance(is_admin, str):
            is_admin = is_admin.lower() in ("1", "true")
        return cls(
            user_id=data["user_id"],
            name=data["name"],
            role=UserRole(data.get("role", "child")),
            pin=PIN.create(data["pin"]) if data.get("pin") else None,
            is_admin=bool(is_admin),
            token_balance=data.get("token_balance", 0),
            display_name=data.get("display_name"),
            avatar_type=AvatarType(data.get("avatar_type", "predefined")),
            avatar_data=data.get("avatar_data", DEFAULT_AVATAR_ID),
            favorite_color=data.get("favorite_color"),
        )
