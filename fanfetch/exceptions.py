"""Custom exception hierarchy for fanfetch."""


class FanfetchError(Exception):
    """Base exception for all fanfetch errors."""


class FetchError(FanfetchError):
    """A data source stage failed to produce its value."""


class ConfigError(FanfetchError):
    """Invalid configuration."""


class ReportError(FanfetchError, ValueError):
    """Report contents violate a report invariant."""
