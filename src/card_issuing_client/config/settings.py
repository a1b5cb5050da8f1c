"""Client configuration resolved from several sources.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from card_issuing_client.config import ClientConfig

    # Reads CARD_ISSUING_API_KEY / CARD_ISSUING_ENVIRONMENT, loading .env first
    config = ClientConfig.from_env()

    # Explicit values win over the environment
    config = ClientConfig.from_env(api_key="sk-test", environment="sandbox")
    ```

Security Considerations:
    - The API key is never logged (masked with ***)
    - Only the source of each value is logged
"""

import logging
import os
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv as _load_dotenv

from card_issuing_client.config.exceptions import MissingAPIKeyError, UnknownEnvironmentError
from card_issuing_client.query.settings import DEFAULT_SETTINGS, QuerySettings

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "CARD_ISSUING_API_KEY"
BASE_URL_ENV_VAR = "CARD_ISSUING_BASE_URL"
ENVIRONMENT_ENV_VAR = "CARD_ISSUING_ENVIRONMENT"
TIMEOUT_ENV_VAR = "CARD_ISSUING_TIMEOUT"

ENVIRONMENTS: dict[str, str] = {
    "production": "https://api.lithic.com/v1",
    "sandbox": "https://sandbox.lithic.com/v1",
}

DEFAULT_TIMEOUT = 60.0

_dotenv_lock = Lock()
_dotenv_loaded_paths: set[str | None] = set()


def _ensure_dotenv_loaded(dotenv_path: str | None) -> None:
    """Load a .env file into the environment once per path (thread-safe)."""
    if dotenv_path in _dotenv_loaded_paths:
        return

    with _dotenv_lock:
        if dotenv_path in _dotenv_loaded_paths:
            return
        try:
            _load_dotenv(dotenv_path=dotenv_path)
            logger.debug("Loaded .env file for client configuration")
        except OSError as e:
            logger.warning(f"Failed to load .env file: {e}")
        _dotenv_loaded_paths.add(dotenv_path)


def _resolve(value: str | None, env_var_name: str, default: str | None = None) -> tuple[str | None, str]:
    """Return the first available value and a description of its source."""
    if value is not None:
        return value, "explicit parameter"
    if env_var_name in os.environ:
        return os.environ[env_var_name], f"environment variable '{env_var_name}'"
    return default, "default value"


@dataclass(frozen=True)
class ClientConfig:
    """Settings the client needs to talk to the API.

    Attributes:
        api_key: Secret API key sent in the ``Authorization`` header.
        base_url: API root, including the version segment.
        timeout: Request timeout in seconds.
        query_settings: Formatting rules for query-string encoding.
    """

    api_key: str = field(repr=False)
    base_url: str = ENVIRONMENTS["production"]
    timeout: float = DEFAULT_TIMEOUT
    query_settings: QuerySettings = DEFAULT_SETTINGS

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        environment: str | None = None,
        timeout: float | None = None,
        query_settings: QuerySettings = DEFAULT_SETTINGS,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ) -> "ClientConfig":
        """Build a configuration from explicit values, the environment and .env.

        Explicit arguments win over environment variables. Within each of
        those, ``base_url`` wins over ``environment``. With none set, the
        production environment is used.

        Raises:
            MissingAPIKeyError: If no API key is found in any source.
            UnknownEnvironmentError: If the environment name is not known.
        """
        if load_dotenv:
            _ensure_dotenv_loaded(dotenv_path)

        resolved_key, key_source = _resolve(api_key, API_KEY_ENV_VAR)
        if not resolved_key:
            raise MissingAPIKeyError(
                f"API key not found (checked env var: {API_KEY_ENV_VAR})",
                env_var_name=API_KEY_ENV_VAR,
            )
        logger.debug(f"Resolved API key from {key_source}: ***")

        # Explicit arguments outrank the environment, whichever of the two is given
        if base_url is None and environment is not None:
            if environment not in ENVIRONMENTS:
                raise UnknownEnvironmentError(environment)
            resolved_url, url_source = ENVIRONMENTS[environment], "explicit parameter"
        else:
            resolved_url, url_source = _resolve(base_url, BASE_URL_ENV_VAR)
        if resolved_url is None:
            env_name, url_source = _resolve(environment, ENVIRONMENT_ENV_VAR, default="production")
            if env_name not in ENVIRONMENTS:
                raise UnknownEnvironmentError(env_name)
            resolved_url = ENVIRONMENTS[env_name]
        logger.debug(f"Resolved base URL from {url_source}: {resolved_url}")

        raw_timeout, _ = _resolve(None if timeout is None else str(timeout), TIMEOUT_ENV_VAR, str(DEFAULT_TIMEOUT))
        try:
            resolved_timeout = float(raw_timeout)
        except ValueError:
            logger.warning(f"Ignoring invalid {TIMEOUT_ENV_VAR} value {raw_timeout!r}")
            resolved_timeout = DEFAULT_TIMEOUT

        return cls(
            api_key=resolved_key,
            base_url=resolved_url.rstrip("/"),
            timeout=resolved_timeout,
            query_settings=query_settings,
        )
