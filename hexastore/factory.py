"""
Wiring: settings -> logging, Redis adapter and index.
"""

from hexastore.common.observability import configure_logging, get_logger
from hexastore.core.index import HexastoreIndex
from hexastore.infra.cache.redis import RedisSortedSetAdapter
from hexastore.infra.config.settings import Settings

logger = get_logger(__name__)


def create_redis_store(settings: Settings) -> RedisSortedSetAdapter:
    redis = settings.redis
    return RedisSortedSetAdapter(
        host=redis.host,
        port=redis.port,
        password=redis.password,
        db=redis.db,
    )


def create_hexastore_index(settings: Settings | None = None, configure_logs: bool = True) -> HexastoreIndex:
    """
    Build a HexastoreIndex on Redis from settings.

    The Redis client is created on first use; call `index.store.close()` on shutdown.

    Args:
        settings: Settings to use (default: read from environment)
        configure_logs: Apply settings.logging to structlog

    Returns:
        Index on settings.index_key
    """
    if settings is None:
        settings = Settings()

    if configure_logs:
        configure_logging(level=settings.logging.level, json_format=settings.logging.json_format)

    store = create_redis_store(settings)
    redis = settings.redis
    logger.info(f"Hexastore index {settings.index_key} on redis {redis.host}:{redis.port}/{redis.db}")
    return HexastoreIndex(settings.index_key, store)
