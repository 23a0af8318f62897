"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    log_level: str = "INFO"
    default_region: str = "I"
    baseline_regime: str = "2025"
    proposed_regime: str = "2026"
    default_exempt_allowance: int = 730_000
    extra_regimes_file: str = ""

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
