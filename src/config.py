"""Application configuration loaded from environment variables and .env file."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PerkSampling = Literal["rejection", "shuffle"]


class Settings(BaseSettings):
    """Generator settings.

    Values are loaded from FORGE_-prefixed environment variables first,
    then from a .env file in the project root as fallback.
    CLI flags override these per run.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "WARNING"

    # 생성 기본값 (-ngen, -nperk 미지정 시)
    DEFAULT_NGEN: int = 1
    DEFAULT_NPERK: int = 1

    # None이면 실행마다 다른 결과
    RNG_SEED: Optional[int] = None
    PERK_SAMPLING: PerkSampling = "rejection"


settings = Settings()
