from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_title: str = "Metric-Imperial Converter"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Per-IP limit applied to every route
    rate_limit: str = "100/minute"

    # CORS
    cors_origins: list[str] = ["*"]


settings = Settings()
