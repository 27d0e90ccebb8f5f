class ConfigError(Exception):
    """Raised when server config loading or validation fails."""


class UnexpectedResponseFormat(Exception):
    """Raised when a model reply is valid JSON but not the expected shape."""
