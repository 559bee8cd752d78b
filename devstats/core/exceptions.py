"""Exceptions shared across the report pipeline."""


class DevStatsError(Exception):
    """Base class for all devstats errors."""


class ConfigurationError(DevStatsError):
    """Raised when a required setting is missing or malformed."""

    def __init__(self, message: str, missing: list[str] | None = None):
        self.missing = missing or []
        super().__init__(message)


class FetchError(DevStatsError):
    """Raised when commits or pull requests could not be retrieved."""


class DeliveryError(DevStatsError):
    """Raised when the webhook request could not be performed at all."""

    def __init__(self, message: str, webhook_host: str | None = None):
        self.webhook_host = webhook_host
        super().__init__(message)
