"""
Services - Domain services composed from ports.
"""

from lemonqwest_auth.services.authentication_service import AuthenticationDomainService

__all__ = [
    "AuthenticationDomainService",
]
