"""Client configuration.

Values are resolved from explicit arguments, environment variables and a
``.env`` file (python-dotenv), in that order.

Example:
    ```python
    from card_issuing_client.config import ClientConfig

    config = ClientConfig.from_env(environment="sandbox")
    ```
"""

from card_issuing_client.config.exceptions import (
    ConfigurationError,
    MissingAPIKeyError,
    UnknownEnvironmentError,
)
from card_issuing_client.config.settings import ENVIRONMENTS, ClientConfig

__all__ = [
    "ENVIRONMENTS",
    "ClientConfig",
    "ConfigurationError",
    "MissingAPIKeyError",
    "UnknownEnvironmentError",
]
