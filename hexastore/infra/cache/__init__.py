from hexastore.infra.cache.redis import RedisSortedSetAdapter

__all__ = ["RedisSortedSetAdapter"]
