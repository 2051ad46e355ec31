"""
Redis Session Adapter - Redis-backed session slot.
"""

from typing import Optional
import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from lemonqwest_auth.ports.session_port import SessionPort
from lemonqwest_auth.domain.session import SessionState
from lemonqwest_auth.domain.user import UserRole
from lemonqwest_auth.domain.errors import SessionStoreError

logger = logging.getLogger(__name__)


class RedisSessionAdapter(SessionPort):
    """
    Redis-backed session slot.

    The session is one hash (user_id, role, is_admin) written inside a
    MULTI/EXEC transaction, so readers never see a partial update.
    Sessions do not expire.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "lemonqwest:session:",
    ):
        """
        Initialize Redis session adapter.

        Args:
            redis_client: redis.asyncio.Redis instance (created from redis_url if None)
            redis_url: Connection URL used when no client is given
            prefix: Key prefix for the session hash
        """
        super().__init__()
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            self._redis = aioredis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    @property
    def key(self) -> str:
        """Redis key of the session hash."""
        return f"{self._prefix}current"

    async def current_session(self) -> Optional[SessionState]:
        """Read the session hash."""
        try:
            data = await self._get_redis().hgetall(self.key)
        except RedisError as e:
            raise SessionStoreError(f"Cannot read session from Redis: {e}") from e

        if not data:
            return None

        try:
            return SessionState.from_dict(data)
        except (KeyError, ValueError) as e:
            raise SessionStoreError(f"Malformed session hash at {self.key}: {e}") from e

    async def set_current_user(self, user_id: str, role: UserRole, is_admin: bool) -> None:
        """Replace the session hash atomically."""
        state = SessionState(user_id=user_id, role=role, is_admin=is_admin)
        mapping = {
            "user_id": state.user_id,
            "role": state.role.value,
            "is_admin": "true" if state.is_admin else "false",
        }

        try:
            async with self._get_redis().pipeline(transaction=True) as pipe:
                pipe.delete(self.key)
                pipe.hset(self.key, mapping=mapping)
                await pipe.execute()
        except RedisError as e:
            raise SessionStoreError(f"Cannot write session to Redis: {e}") from e

        logger.debug("Session %s set to user %s", self.key, user_id)
        self._publish(user_id)

    async def clear_current_user(self) -> None:
        """Delete the session hash."""
        try:
            await self._get_redis().delete(self.key)
        except RedisError as e:
            raise SessionStoreError(f"Cannot clear session in Redis: {e}") from e

        logger.debug("Session %s cleared", self.key)
        self._publish(None)

    async def close(self) -> None:
        """Close the Redis connection pool."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None
