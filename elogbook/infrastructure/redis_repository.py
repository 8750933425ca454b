"""
Redis Repository Base Class

Thin wrapper over a redis client with JSON helpers and key prefixing.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisRepository:
    """Base Redis repository with JSON and sorted-set helpers."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = ""):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        """Create a prefixed key for Redis storage."""
        return f"{self.key_prefix}:{key}" if self.key_prefix else key

    def set_json(self, key: str, data: Dict[str, Any], ttl: Optional[int] = None) -> bool:
        """
        Set JSON data with optional TTL.

        Args:
            key: Redis key
            data: Dictionary to store as JSON
            ttl: Time to live in seconds

        Returns:
            True if successful, False otherwise
        """
        try:
            redis_key = self._make_key(key)
            json_data = json.dumps(data)

            if ttl:
                return bool(self.redis.setex(redis_key, ttl, json_data))
            return bool(self.redis.set(redis_key, json_data))
        except (RedisError, TypeError) as e:
            logger.error(f"Error setting JSON data for key {key}: {e}")
            return False

    def get_json(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Get JSON data from Redis.

        Returns:
            Dictionary if found and valid JSON, None otherwise
        """
        try:
            data = self.redis.get(self._make_key(key))
            if data is None:
                return None
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return json.loads(data)
        except (RedisError, json.JSONDecodeError) as e:
            logger.error(f"Error getting JSON data for key {key}: {e}")
            return None

    def delete(self, key: str) -> bool:
        try:
            return self.redis.delete(self._make_key(key)) > 0
        except RedisError as e:
            logger.error(f"Error deleting key {key}: {e}")
            return False

    def exists(self, key: str) -> bool:
        try:
            return self.redis.exists(self._make_key(key)) > 0
        except RedisError as e:
            logger.error(f"Error checking existence of key {key}: {e}")
            return False

    def add_to_index(self, index: str, member: str, score: float) -> bool:
        """
        Add a member to a sorted-set index.

        Returns:
            True if successful, False otherwise
        """
        try:
            self.redis.zadd(self._make_key(index), {member: score})
            return True
        except RedisError as e:
            logger.error(f"Error adding {member} to index {index}: {e}")
            return False

    def range_index_desc(self, index: str, start: int, stop: int) -> List[str]:
        """
        Members of a sorted-set index by descending score, inclusive range.

        Returns:
            List of members (empty on error)
        """
        try:
            members = self.redis.zrevrange(self._make_key(index), start, stop)
        except RedisError as e:
            logger.error(f"Error reading index {index}: {e}")
            return []
        return [m.decode("utf-8") if isinstance(m, bytes) else m for m in members]


class RedisConnectionManager:
    """Manages Redis connection with connection pooling."""

    def __init__(self, host: str = 'localhost', port: int = 6379, db: int = 0,
                 max_connections: int = 20, decode_responses: bool = False,
                 password: Optional[str] = None):
        self.connection_pool = redis.ConnectionPool(
            host=host,
            port=port,
            db=db,
            password=password,
            max_connections=max_connections,
            decode_responses=decode_responses,
            retry_on_timeout=True,
            socket_keepalive=True,
        )
        self._client = None

    @property
    def client(self) -> redis.Redis:
        """Get Redis client instance with connection pooling."""
        if self._client is None:
            self._client = redis.Redis(connection_pool=self.connection_pool)
        return self._client

    def health_check(self) -> bool:
        """Check if Redis connection is healthy."""
        try:
            return bool(self.client.ping())
        except RedisConnectionError:
            return False

    def close(self):
        """Close the connection pool."""
        if self.connection_pool:
            self.connection_pool.disconnect()
