"""Redis caching service."""
import logging
from typing import Optional, Type, TypeVar
import redis
from fastapi import Request
from pydantic import BaseModel
from app.config import Settings

logger = logging.getLogger(__name__)
T = TypeVar("T", bound=BaseModel)


class RedisCache:
    """Redis caching service with Pydantic model support.

    A disabled cache (``client`` is None) misses on every read and drops
    every write, so callers never need to branch on configuration.
    """

    def __init__(self, client: Optional[redis.Redis] = None):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisCache":
        """Build the cache described by ``settings`` (disabled when cache_enabled is off)."""
        if not settings.cache_enabled:
            return cls(None)
        return cls(redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            decode_responses=True
        ))

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def health_check(self) -> tuple[bool, Optional[str]]:
        """Check if Redis connection is healthy."""
        if not self.enabled:
            return True, None
        try:
            self.client.ping()
            return True, None
        except redis.RedisError as e:
            return False, str(e)

    def get(self, key: str, model: Type[T]) -> Optional[T]:
        """Get cached item and deserialize to Pydantic model."""
        if not self.enabled:
            return None
        try:
            data = self.client.get(key)
            if data:
                return model.model_validate_json(data)
            return None
        except (redis.RedisError, ValueError) as e:
            logger.warning(f"Cache get error for {key}: {e}")
            return None

    def set(self, key: str, value: BaseModel, ttl_seconds: int) -> bool:
        """Cache Pydantic model with TTL."""
        if not self.enabled:
            return False
        try:
            self.client.setex(key, ttl_seconds, value.model_dump_json())
            return True
        except redis.RedisError as e:
            logger.warning(f"Cache set error for {key}: {e}")
            return False

    def close(self) -> None:
        if self.enabled:
            self.client.close()


class CacheKeys:
    """Cache key builders."""

    @staticmethod
    def report(report_id: int) -> str:
        return f"report:{report_id}"


def get_cache(request: Request) -> RedisCache:
    """Return the cache attached to the running application."""
    return request.app.state.cache
