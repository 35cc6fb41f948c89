# helprob/core/settings.py
import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Algemene app settings ===
    app_env: str = "local"  # local | development | production
    host: str = "0.0.0.0"
    port: int = 8070

    # Basis-domein voor de gegenereerde links (subdomein.<domain>)
    domain: str = Field("0.0.0.0:8070", description="Domain used to build decoy links")

    # === Telemetry ledger ===
    # Leeg = telemetry inert (er wordt niets weggeschreven)
    log_file_dir: str = Field("./logs/helprob", description="Root directory of the daily ledger")
    flush_interval_seconds: float = 10.0

    # === Logging ===
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance met simpele env-overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"
    elif env == "development":
        s.log_level = "DEBUG"

    return s


settings = get_settings()
