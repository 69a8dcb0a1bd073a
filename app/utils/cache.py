"""
Redis cache utility for per-user recommendation payloads
"""
import redis
import json
import logging
from typing import Optional, Any
from uuid import UUID
from app.config import settings

logger = logging.getLogger(__name__)


class CacheService:
    """Redis-based caching; every call degrades to a no-op when Redis is unreachable"""

    KEY_PREFIX = "recommendations"

    def __init__(self):
        try:
            self.redis_client = redis.from_url(
                settings.REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=2
            )
            # Test connection
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.warning(f"Redis connection failed: {str(e)}. Caching disabled.")
            self.redis_client = None

    def recommendation_key(self, user_id: UUID) -> str:
        """Cache key for a user's recommendation payload"""
        return f"{self.KEY_PREFIX}:{user_id}"

    def get(self, key: str) -> Optional[Any]:
        """Return the decoded cached value, or None on miss or error"""
        if not self.redis_client:
            return None

        try:
            value = self.redis_client.get(key)
            if value:
                logger.info(f"Cache hit: {key}")
                return json.loads(value)
            logger.info(f"Cache miss: {key}")
            return None
        except Exception as e:
            logger.error(f"Cache get error: {str(e)}")
            return None

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Store a JSON-serializable value

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (default RECOMMENDATION_CACHE_TTL)
        """
        if not self.redis_client:
            return False

        try:
            ttl = ttl or settings.RECOMMENDATION_CACHE_TTL
            self.redis_client.setex(key, ttl, json.dumps(value, default=str))
            logger.info(f"Cache set: {key} (TTL: {ttl}s)")
            return True
        except Exception as e:
            logger.error(f"Cache set error: {str(e)}")
            return False

    def invalidate_user(self, user_id: UUID) -> bool:
        """Drop cached recommendations after the user's materials or style change"""
        if not self.redis_client:
            return False

        key = self.recommendation_key(user_id)
        try:
            self.redis_client.delete(key)
            logger.info(f"Cache delete: {key}")
            return True
        except Exception as e:
            logger.error(f"Cache delete error: {str(e)}")
            return False


# Global instance
cache_service = CacheService()
