from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    error_field: str = "error_message"

    payload_fallback_message: str = "An error occurred."
    unknown_request_detail: str = "unknown request error"
    unknown_client_detail: str = "unknown error"
