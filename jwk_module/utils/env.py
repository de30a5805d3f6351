from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(message)s"
    export_private: bool = False

    model_config = SettingsConfigDict(env_prefix="JWK_", env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Settings read on first use, not at import."""
    return Settings()
