"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Settings are frozen: they are built once at startup and passed explicitly
    to the message builders and the Slack relay.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Slack incoming webhook
    slack_webhook_host: str = "hooks.slack.com"
    slack_webhook_path: str = ""  # e.g. /services/T000/B000/XXXX
    slack_timeout_seconds: float = 10.0

    # Bitbucket username -> Slack handle, JSON object in the environment
    user_map: dict[str, str] = {}

    # Message formatting
    mention_reviewers: bool = True
    rebase_alert_handle: str = ""  # pinged on forced pushes when set
    comment_preview_length: int = 100

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080

    @property
    def slack_webhook_url(self) -> str:
        """Full HTTPS URL of the configured Slack incoming webhook."""
        return f"https://{self.slack_webhook_host}{self.slack_webhook_path}"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
