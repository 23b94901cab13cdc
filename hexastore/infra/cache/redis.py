"""
Redis Sorted-Set Adapter

SortedSetStorePort implementation on redis-py (asyncio).

Features:
- Lazy client initialization
- Byte-exact ZRANGEBYLEX bounds
- RedisError -> StoreError, chained with `from`

Requirements:
    pip install redis
"""

import asyncio
from collections.abc import Mapping, Sequence

from redis.asyncio import Redis
from redis.exceptions import RedisError

from hexastore.common.exceptions import StoreError
from hexastore.common.observability import get_logger

logger = get_logger(__name__)


class RedisSortedSetAdapter:
    """
    Sorted-set store backed by Redis.

    No retries: every failure is raised to the caller as StoreError.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        password: str | None = None,
        db: int = 0,
        client: Redis | None = None,
    ) -> None:
        """
        Initialize Redis adapter.

        Args:
            host: Redis host (default: localhost)
            port: Redis port (default: 6379)
            password: Optional Redis password
            db: Redis database number (default: 0)
            client: Already configured client; host/port/password/db are then ignored
        """
        self.host = host
        self.port = port
        self.password = password
        self.db = db
        self._client = client
        self._lock = asyncio.Lock()

    async def _get_client(self) -> Redis:
        """
        Get or create Redis client (lazy initialization).

        Returns:
            Redis client instance
        """
        if self._client is not None:
            return self._client

        async with self._lock:
            # Double-check locking
            if self._client is None:
                self._client = Redis(
                    host=self.host,
                    port=self.port,
                    password=self.password,
                    db=self.db,
                    decode_responses=True,
                )
            return self._client

    async def add_members(self, set_key: str, members: Mapping[str, float]) -> int:
        """
        ZADD members with their scores.

        Returns:
            Number of members that were not present before

        Raises:
            StoreError: If Redis operation fails
        """
        if not members:
            return 0
        try:
            client = await self._get_client()
            return await client.zadd(set_key, dict(members))

        except RedisError as e:
            logger.error(f"Failed to add {len(members)} members to {set_key}: {e}")
            raise StoreError("add members", set_key, e) from e

    async def remove_members(self, set_key: str, members: Sequence[str]) -> int:
        """
        ZREM members.

        Returns:
            Number of members actually removed

        Raises:
            StoreError: If Redis operation fails
        """
        if not members:
            return 0
        try:
            client = await self._get_client()
            return await client.zrem(set_key, *members)

        except RedisError as e:
            logger.error(f"Failed to remove {len(members)} members from {set_key}: {e}")
            raise StoreError("remove members", set_key, e) from e

    async def range_by_lex(self, set_key: str, start: bytes, end: bytes) -> list[str]:
        """
        ZRANGEBYLEX between two bounds.

        Args:
            set_key: Sorted set name
            start: Lower bound, "[" (inclusive), "(" (exclusive) or "-"
            end: Upper bound, "[" (inclusive), "(" (exclusive) or "+"

        Returns:
            Members in ascending byte order

        Raises:
            StoreError: If Redis operation fails
        """
        try:
            client = await self._get_client()
            return list(await client.zrangebylex(set_key, start, end))

        except RedisError as e:
            logger.error(f"Failed to scan {set_key} from {start!r} to {end!r}: {e}")
            raise StoreError("range by lex", set_key, e) from e

    async def delete(self, set_key: str) -> bool:
        """
        Delete the sorted set.

        Returns:
            True if the set existed

        Raises:
            StoreError: If Redis operation fails
        """
        try:
            client = await self._get_client()
            deleted = await client.delete(set_key)
            return deleted > 0

        except RedisError as e:
            logger.error(f"Failed to delete {set_key}: {e}")
            raise StoreError("delete", set_key, e) from e

    async def ping(self) -> bool:
        """
        Check Redis connection health.

        Returns:
            True if Redis is reachable, False otherwise
        """
        try:
            client = await self._get_client()
            await client.ping()
            return True

        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        """
        Close Redis connection.

        Should be called during application shutdown.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Redis connection closed")
