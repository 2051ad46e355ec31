"""
Bootstrap - Build adapters and the service from Settings.
"""

import logging
import sys
from typing import Optional

from lemonqwest_auth.config import Settings, get_settings
from lemonqwest_auth.ports.session_port import SessionPort
from lemonqwest_auth.ports.user_directory_port import UserDirectoryPort
from lemonqwest_auth.services.authentication_service import AuthenticationDomainService

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging (level defaults to settings.log_level)."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def create_session_store(settings: Settings) -> SessionPort:
    """
    Create the configured session store.

    Args:
        settings: Auth settings

    Returns:
        SessionPort implementation
    """
    if settings.session_backend == "redis":
        from lemonqwest_auth.adapters.redis_session import RedisSessionAdapter
        return RedisSessionAdapter(
            redis_url=settings.redis_url,
            prefix=settings.redis_key_prefix,
        )

    if settings.session_backend == "dynamodb":
        from lemonqwest_auth.adapters.dynamodb_session import DynamoDBSessionAdapter
        return DynamoDBSessionAdapter(
            table_name=settings.dynamodb_table,
            region_name=settings.aws_region,
            slot_id=settings.session_slot_id,
        )

    from lemonqwest_auth.adapters.memory_session import MemorySessionAdapter
    return MemorySessionAdapter()


def create_user_directory(settings: Settings) -> UserDirectoryPort:
    """
    Create the configured user directory.

    Args:
        settings: Auth settings

    Returns:
        UserDirectoryPort implementation
    """
    if settings.users_file is not None:
        from lemonqwest_auth.adapters.json_directory import JsonFileUserDirectoryAdapter
        return JsonFileUserDirectoryAdapter(settings.users_file)

    from lemonqwest_auth.adapters.memory_directory import MemoryUserDirectoryAdapter
    return MemoryUserDirectoryAdapter()


def create_authentication_service(
    settings: Optional[Settings] = None,
) -> AuthenticationDomainService:
    """
    Wire an AuthenticationDomainService from settings.

    Args:
        settings: Auth settings (defaults to get_settings())

    Returns:
        Ready-to-use service
    """
    settings = settings or get_settings()
    logger.info(
        "Creating authentication service (session backend: %s, users file: %s)",
        settings.session_backend, settings.users_file,
    )
    return AuthenticationDomainService(
        user_directory=create_user_directory(settings),
        session_store=create_session_store(settings),
    )
