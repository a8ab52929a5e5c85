"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    dhis2_base_url: str
    # Personal access token takes precedence over basic auth
    dhis2_api_token: str | None = None
    dhis2_username: str | None = None
    dhis2_password: str | None = None
    http_timeout_seconds: float = 30.0

    programs_page_size: int = 5
    org_unit_level: int = 1
    metadata_retry_attempts: int = 3

    metrics_enabled: bool = False
    prometheus_port: int = 9300

    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )

    @property
    def api_url(self) -> str:
        """Base URL of the DHIS2 Web API."""
        return self.dhis2_base_url.rstrip("/") + "/api"
