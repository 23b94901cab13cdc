"""
Grouped configuration models.
"""

from pydantic import BaseModel, ConfigDict, Field


class RedisConfig(BaseModel):
    """Redis 연결 설정."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="localhost", description="Redis 호스트")
    port: int = Field(default=6379, ge=1, le=65535, description="Redis 포트")
    db: int = Field(default=0, ge=0, le=15, description="Redis DB 번호")
    password: str | None = Field(default=None, description="Redis 비밀번호")


class LoggingConfig(BaseModel):
    """로깅 설정."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="로그 레벨")
    json_format: bool = Field(default=False, description="JSON 로그 출력")
