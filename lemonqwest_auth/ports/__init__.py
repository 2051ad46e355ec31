"""
Ports - Interfaces for the user directory and the session store.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from lemonqwest_auth.ports.user_directory_port import UserDirectoryPort
from lemonqwest_auth.ports.session_port import SessionPort, SessionListener

__all__ = [
    "UserDirectoryPort",
    "SessionPort",
    "SessionListener",
]
