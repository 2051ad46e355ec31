"""Shared fixtures for lemonqwest_auth tests."""

import pytest
from lemonqwest_auth.domain.pin import PIN
from lemonqwest_auth.domain.user import User, UserRole


@pytest.fixture
def caregiver():
    """Family admin caregiver with PIN 1234."""
    return User(
        user_id="cg_1",
        name="Parent",
        role=UserRole.CAREGIVER,
        pin=PIN.create("1234"),
        is_admin=True,
    )


@pytest.fixture
def second_caregiver():
    """Non-admin caregiver with PIN 4321."""
    return User(
        user_id="cg_2",
        name="Grandparent",
        role=UserRole.CAREGIVER,
        pin=PIN.create("4321"),
    )


@pytest.fixture
def child():
    """Child without a PIN."""
    return User(
        user_id="kid_1",
        name="Lemmy",
        role=UserRole.CHILD,
        token_balance=50,
    )
