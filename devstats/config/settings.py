import re

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from devstats.core.exceptions import ConfigurationError

REPO_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")

SUPPORTED_LOCALES = ("en", "ru")
WINDOW_FILTER_MODES = ("legacy", "inclusive")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Required - the process refuses to start without these
    webhook_url: str = ""
    github_token: str = ""
    github_repo: str = ""  # "owner/name"

    # GitHub - override for GitHub Enterprise
    github_api_url: str = "https://api.github.com"

    # Report
    report_locale: str = "en"
    # Fixed offset used for week boundaries (default: UTC+3, Moscow)
    report_utc_offset_minutes: int = 180
    # "legacy" keeps the historical inverted window predicate, "inclusive" keeps
    # items with since <= timestamp <= until
    window_filter: str = "legacy"

    # Scheduler settings
    # Crontab expression for the recurring run (default: Sundays at noon)
    schedule_cron: str = "0 12 * * sun"
    schedule_timezone: str = "Europe/Moscow"
    # Run one report immediately when the process starts
    run_on_startup: bool = True

    log_level: str = "INFO"

    @field_validator("report_locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_LOCALES:
            raise ValueError(f"report_locale must be one of {SUPPORTED_LOCALES}")
        return value

    @field_validator("window_filter")
    @classmethod
    def _check_window_filter(cls, value: str) -> str:
        value = value.lower()
        if value not in WINDOW_FILTER_MODES:
            raise ValueError(f"window_filter must be one of {WINDOW_FILTER_MODES}")
        return value

    @field_validator("report_utc_offset_minutes")
    @classmethod
    def _check_offset(cls, value: int) -> int:
        if not -14 * 60 <= value <= 14 * 60:
            raise ValueError("report_utc_offset_minutes must be within +/- 14 hours")
        return value

    @property
    def missing_required(self) -> list[str]:
        """Names of the required environment variables that are unset."""
        required = {
            "WEBHOOK_URL": self.webhook_url,
            "GITHUB_TOKEN": self.github_token,
            "GITHUB_REPO": self.github_repo,
        }
        return [name for name, value in required.items() if not value.strip()]

    def validate_required(self) -> None:
        """Raise ConfigurationError unless every required setting is usable."""
        missing = self.missing_required
        if missing:
            raise ConfigurationError(
                f"missing environment variables: {', '.join(missing)}",
                missing=missing,
            )
        if not REPO_PATTERN.match(self.github_repo):
            raise ConfigurationError(
                f"GITHUB_REPO must look like owner/name, got {self.github_repo!r}"
            )


def load_settings(**overrides: object) -> Settings:
    """
    Build and validate the settings for this process.

    Called once at process entry; the result is passed explicitly to the
    pipeline and the scheduler.

    Raises:
        ConfigurationError: If a required setting is missing or a value is invalid
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e

    settings.validate_required()
    return settings
