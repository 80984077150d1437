from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="CLINICA_", extra="ignore")

    log_level: str = "INFO"
    current_user_id: str | None = None  # usuario fijo para StaticAuthService


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
