"""
Settings loaded from ``APICRYPT_*`` environment variables (or ``.env``)
using `pydantic-settings`.

Nothing in the codec reads these implicitly; hand them over explicitly,
e.g. ``TimeBoxedCipher.from_settings(get_settings())``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # process-wide salt for time-boxed encryption; immutable after start
    GLOBAL_SALT: str = ""

    # DEBUG/INFO/WARNING/ERROR
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="APICRYPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        frozen=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
