"""
Unit tests for SessionState domain model.
"""

import pytest
from lemonqwest_auth.domain.session import SessionState
from lemonqwest_auth.domain.user import UserRole


def test_session_state_creation():
    state = SessionState(user_id="cg_1", role=UserRole.CAREGIVER, is_admin=True)

    assert state.user_id == "cg_1"
    assert state.role == UserRole.CAREGIVER
    assert state.is_admin is True


def test_session_state_serialization():
    """Test to_dict and from_dict."""
    state = SessionState(user_id="kid_1", role=UserRole.CHILD)

    data = state.to_dict()
    assert data == {"user_id": "kid_1", "role": "child", "is_admin": False}

    assert SessionState.from_dict(data) == state


@pytest.mark.parametrize("raw,expected", [
    ("true", True),
    ("True", True),
    ("1", True),
    ("false", False),
    ("0", False),
    (True, True),
    (False, False),
])
def test_session_state_from_string_flags(raw, expected):
    """Test admin flag decoding from string stores (e.g. Redis hashes)."""
    state = SessionState.from_dict({"user_id": "u", "role": "caregiver", "is_admin": raw})
    assert state.is_admin is expected


def test_session_state_from_dict_missing_fields():
    with pytest.raises(KeyError):
        SessionState.from_dict({"role": "child"})
