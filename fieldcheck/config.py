"""
Runtime configuration for fieldcheck.

Settings are read from environment variables; any value passed to the
constructor takes precedence over the environment.

Environment variables:
    FIELDCHECK_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    FIELDCHECK_LOG_FORMAT: "json" or "text" (default json)
    FIELDCHECK_METRICS_ENABLED: record Prometheus metrics (default true)
    FIELDCHECK_DATE_LAYOUT: strptime layout used by date() without a layout
                            (default %Y-%m-%d)
"""

import os

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default

    raw = raw.strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of {_TRUE_VALUES + _FALSE_VALUES}, got '{raw}'")


class Settings:
    """
    fieldcheck settings.

    Attributes:
        log_level: Logger level name
        log_format: "json" or "text"
        metrics_enabled: Whether the facade records Prometheus metrics
        date_layout: Default layout for the date rule
    """

    def __init__(
        self,
        log_level: str | None = None,
        log_format: str | None = None,
        metrics_enabled: bool | None = None,
        date_layout: str | None = None,
    ):
        self.log_level = (log_level or os.getenv("FIELDCHECK_LOG_LEVEL", "INFO")).upper()
        self.log_format = (log_format or os.getenv("FIELDCHECK_LOG_FORMAT", "json")).lower()
        self.metrics_enabled = (
            metrics_enabled
            if metrics_enabled is not None
            else _env_flag("FIELDCHECK_METRICS_ENABLED", True)
        )
        self.date_layout = date_layout or os.getenv("FIELDCHECK_DATE_LAYOUT", "%Y-%m-%d")

        if self.log_format not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got '{self.log_format}'")

    def __repr__(self) -> str:
        return (
            f"Settings(log_level={self.log_level}, log_format={self.log_format}, "
            f"metrics_enabled={self.metrics_enabled}, date_layout={self.date_layout})"
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the process-wide settings, loading them on first use.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
