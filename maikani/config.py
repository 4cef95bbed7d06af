from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # API Settings
    app_name: str = "Maikani"
    app_version: str = "1.0.0"
    debug: bool = False

    # Upstream Settings
    wanikani_api_url: str = "https://api.wanikani.com/v2"
    wanikani_api_revision: str = "20170710"
    critical_percentage: int = Field(default=75, ge=1, le=100)
    upstream_timeout: float = 30.0  # seconds

    # Logging Settings
    log_level: str = "INFO"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 1234

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


settings = Settings()
