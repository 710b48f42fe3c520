"""Exception types raised by the log client."""


class LogClientError(Exception):
    """Base class for all log client errors."""


class UsageError(LogClientError):
    """Command-line arguments are missing or malformed."""


class ConfigError(LogClientError):
    """A configuration value (template, YAML file) is invalid."""
