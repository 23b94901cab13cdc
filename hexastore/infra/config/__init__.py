from hexastore.infra.config.groups import LoggingConfig, RedisConfig
from hexastore.infra.config.settings import Settings

__all__ = ["Settings", "RedisConfig", "LoggingConfig"]
