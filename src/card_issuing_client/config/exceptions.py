"""Exceptions raised while building client configuration.

Example:
    ```python
    from card_issuing_client.config import ClientConfig, MissingAPIKeyError

    try:
        config = ClientConfig.from_env()
    except MissingAPIKeyError as e:
        print(f"Set {e.env_var_name} first")
    ```
"""


class ConfigurationError(Exception):
    """Base exception for invalid or incomplete client configuration."""

    pass


class MissingAPIKeyError(ConfigurationError):
    """Raised when no API key can be resolved from any source.

    Attributes:
        env_var_name: The environment variable that was checked.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class UnknownEnvironmentError(ConfigurationError):
    """Raised when the configured environment name is not recognised."""

    def __init__(self, environment: str):
        super().__init__(f"Unknown environment {environment!r}, expected one of: production, sandbox")
        self.environment = environment
