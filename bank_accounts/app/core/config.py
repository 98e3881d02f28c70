from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Bank Account API"
    database_url: str = "sqlite:///bank_accounts.db"
    log_level: str = "INFO"
    customers_base_url: str = "http://localhost:8081"
    customers_timeout_seconds: float = 5.0
    account_number_max_attempts: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BANK_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
