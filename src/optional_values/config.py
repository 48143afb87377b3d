from functools import lru_cache
from typing import Final

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVEL_DEFAULT: Final[str] = "WARNING"


class Settings(BaseSettings):
    """
    라이브러리 전역 설정.
    Global library settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="OPTIONAL_VALUES_",
        extra="ignore",
    )

    log_level: str = Field(
        default=LOG_LEVEL_DEFAULT,
        description=(
            "패키지 로거의 로그 레벨(DEBUG/INFO/WARNING 등) / "
            "Log level of the package logger (DEBUG/INFO/WARNING, etc.)."
        ),
    )
    debug: bool = Field(
        default=False,
        description="디버그 모드 활성화 여부 / Whether to enable debug mode.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def effective_log_level(self) -> str:
        """
        debug 가 켜져 있으면 log_level 과 관계없이 DEBUG 를 사용한다.
        DEBUG when debug mode is on, otherwise the configured log level.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()
