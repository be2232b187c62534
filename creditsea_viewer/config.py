"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Viewer configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Backend collaborator (parsing + storage service)
    backend_base_url: str = "http://localhost:3000"

    # Service
    service_name: str = "creditsea-viewer"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 30.0

    # Upload
    accepted_upload_extension: str = ".xml"

    # Presentation
    currency_symbol: str = "₹"
    date_format: str = "%d/%m/%Y"

    # Notifications (auto-dismiss after TTL)
    success_notification_ttl_seconds: float = 2.0
    error_notification_ttl_seconds: float = 4.0


settings = Settings()
