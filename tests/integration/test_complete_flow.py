"""
Integration test for the household sign-in flow.

Uses the in-memory directory and session adapters end to end:
1. Caregiver signs in with PIN
2. Caregiver hands the device to the child
3. Child cannot switch back without a caregiver PIN
4. Logout
"""

import pytest
from lemonqwest_auth import AuthenticationDomainService, Success, InvalidPin, UserNotFound, UserRole
from lemonqwest_auth.adapters import MemoryUserDirectoryAdapter, MemorySessionAdapter
from lemonqwest_auth.domain.session import SessionState


@pytest.fixture
def session_store():
    return MemorySessionAdapter()


@pytest.fixture
def service(caregiver, child, session_store):
    directory = MemoryUserDirectoryAdapter([caregiver, child])
    return AuthenticationDomainService(directory, session_store)


@pytest.mark.asyncio
async def test_complete_household_flow(service, session_store, caregiver, child):
    """Test PIN sign-in, switch to child, blocked switch back, logout."""

    # Step 1: Caregiver PIN
    result = await service.authenticate_with_pin("1234")
    assert result == Success(caregiver)
    assert await session_store.current_session() == SessionState("cg_1", UserRole.CAREGIVER, True)

    # Step 2: Switch to child
    result = await service.switch_role(UserRole.CHILD)
    assert result == Success(child)
    assert await session_store.current_session() == SessionState("kid_1", UserRole.CHILD, False)

    # Step 3: Child may not switch
    result = await service.switch_role(UserRole.CAREGIVER)
    assert isinstance(result, UserNotFound)
    assert await session_store.current_user_id() == "kid_1"

    # Step 4: Logout
    await service.logout()
    assert await session_store.current_session() is None
    assert await service.get_current_user() is None
    assert await service.is_authenticated() is False


@pytest.mark.asyncio
async def test_wrong_pin_keeps_existing_session(service, session_store, child):
    await service.authenticate_as_child()

    result = await service.authenticate_with_pin("0000")

    assert isinstance(result, InvalidPin)
    assert await service.get_current_user() == child


@pytest.mark.asyncio
async def test_child_sign_in_then_caregiver_pin(service, caregiver, child):
    """A caregiver PIN replaces a child session directly."""
    assert await service.authenticate_as_child() == Success(child)

    assert await service.authenticate_with_pin("1234") == Success(caregiver)
    assert await service.get_current_user() == caregiver


@pytest.mark.asyncio
async def test_logout_is_idempotent(service):
    await service.logout()
    await service.logout()

    assert await service.is_authenticated() is False


@pytest.mark.asyncio
async def test_listener_follows_flow(service, session_store):
    seen = []
    session_store.subscribe(seen.append)

    await service.authenticate_with_pin("1234")
    await service.switch_role(UserRole.CHILD)
    await service.switch_role(UserRole.CAREGIVER)
    await service.logout()

    assert seen == ["cg_1", "kid_1", None]
