"""
Household Login Example - PIN sign-in and role switching with in-memory adapters.
"""

import asyncio

from lemonqwest_auth import AuthenticationDomainService, User, UserRole, PIN, Success
from lemonqwest_auth.adapters import MemoryUserDirectoryAdapter, MemorySessionAdapter
from lemonqwest_auth.bootstrap import configure_logging


async def main():
    configure_logging()

    # Set up the household
    parent = User(name="Parent", role=UserRole.CAREGIVER, pin=PIN.create("1234"), is_admin=True)
    kid = User(name="Lemmy", role=UserRole.CHILD, token_balance=50)

    sessions = MemorySessionAdapter()
    sessions.subscribe(lambda user_id: print(f"  [session] current user -> {user_id}"))

    service = AuthenticationDomainService(
        user_directory=MemoryUserDirectoryAdapter([parent, kid]),
        session_store=sessions,
    )

    # Wrong PIN
    result = await service.authenticate_with_pin("9999")
    print(f"PIN 9999: {type(result).__name__}")

    # Caregiver PIN
    result = await service.authenticate_with_pin("1234")
    if isinstance(result, Success):
        print(f"Signed in: {result.user.name} (admin={result.user.is_admin})")

    # Hand the device to the child
    result = await service.switch_role(UserRole.CHILD)
    if isinstance(result, Success):
        print(f"Switched to: {result.user.name} ({result.user.token_balance} tokens)")

    # Children cannot switch back
    result = await service.switch_role(UserRole.CAREGIVER)
    print(f"Child switching to caregiver: {type(result).__name__}")

    # Logout
    await service.logout()
    print(f"Authenticated after logout: {await service.is_authenticated()}")


if __name__ == "__main__":
    asyncio.run(main())
