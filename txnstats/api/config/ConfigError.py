"""Configuration error."""


class ConfigError(Exception):
    """Raised for an invalid option combination or an unreadable config file."""
