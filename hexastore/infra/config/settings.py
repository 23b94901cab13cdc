from functools import cached_property

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexastore.common.observability import LOG_LEVELS
from hexastore.infra.config.groups import LoggingConfig, RedisConfig


class Settings(BaseSettings):
    """
    Hexastore Settings

    Environment variables use the HEXASTORE_ prefix.
    Example: HEXASTORE_REDIS_HOST, HEXASTORE_INDEX_KEY

    그룹화된 설정 접근:
        settings.redis    # RedisConfig
        settings.logging  # LoggingConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HEXASTORE_",
        extra="ignore",  # 알 수 없는 환경 변수 무시
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def redis(self) -> RedisConfig:
        """Redis 설정 그룹."""
        return RedisConfig(
            host=self.redis_host,
            port=self.redis_port,
            db=self.redis_db,
            password=self.redis_password,
        )

    @cached_property
    def logging(self) -> LoggingConfig:
        """로깅 설정 그룹."""
        return LoggingConfig(level=self.log_level, json_format=self.log_json)

    # ========================================================================
    # Cache (Redis)
    # ========================================================================
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str | None = None

    # ========================================================================
    # Index
    # ========================================================================
    index_key: str = Field(default="hexastore", min_length=1, description="Sorted set holding the index")

    # ========================================================================
    # Observability
    # ========================================================================
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

