"""Configuration module for the envoi resolver."""

# Standard library imports
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Optional

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from envoi_resolver import constants
from envoi_resolver.utils.errors import ConfigurationError
from envoi_resolver.utils.validation import is_valid_address

# Load environment variables from .env file
load_dotenv()


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ConfigurationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ConfigurationError(
                f"Required environment variable '{key}' not found",
                details={"setting": key}
            )
        return default

    if validator:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {str(e)}",
                details={"setting": key, "value": value}
            )

    return value


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Args:
        value: String value to convert

    Returns:
        Integer value

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def float_validator(value: str) -> float:
    """Validate and convert string to float."""
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number")


def url_validator(value: str) -> str:
    """Validate URL format.

    Args:
        value: URL to validate

    Returns:
        The validated URL without a trailing slash

    Raises:
        ValueError: If not a valid URL format
    """
    url_pattern = re.compile(
        r'^(https?):\/\/'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
        r'localhost|'  # localhost
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    if not url_pattern.match(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value.rstrip("/")


def address_validator(value: str) -> str:
    """Validate a Voi address.

    Raises:
        ValueError: If the address is not structurally valid
    """
    if not is_valid_address(value):
        raise ValueError(f"'{value}' is not a valid address")
    return value


def log_level_validator(value: str) -> str:
    """Validate log level.

    Args:
        value: Log level to validate

    Returns:
        The validated log level

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


@dataclass
class AlgodConfig:
    """Configuration for the algod node used for contract calls."""

    url: str
    token: str = ""
    port: Optional[int] = None

    @property
    def address(self) -> str:
        """Get the node address in the form the algod client expects.

        Returns:
            The URL, with the port appended when one is configured
        """
        if self.port:
            return f"{self.url.rstrip('/')}:{self.port}"
        return self.url.rstrip("/")


@lru_cache()
def get_algod_config() -> AlgodConfig:
    """Get algod configuration from environment variables.

    Returns:
        AlgodConfig instance, pointing at Voi mainnet by default

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    return AlgodConfig(
        url=get_env_var("ENVOI_ALGOD_URL", constants.MAINNET_ALGOD_URL,
                        validator=url_validator),
        token=get_env_var("ENVOI_ALGOD_TOKEN", constants.MAINNET_ALGOD_TOKEN),
        port=get_env_var("ENVOI_ALGOD_PORT", constants.MAINNET_ALGOD_PORT,
                         validator=int_validator)
    )


@dataclass
class ResolverSettings:
    """Settings shared by the chain and HTTP resolvers."""

    api_base_url: str = constants.API_BASE_URL
    http_timeout: float = constants.DEFAULT_HTTP_TIMEOUT  # seconds
    resolver_app_id: int = constants.RESOLVER_APP_ID
    token_app_id: int = constants.VNS_TOKEN_APP_ID
    query_address: str = constants.QUERY_ADDRESS
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.http_timeout <= 0:
            raise ConfigurationError(
                "HTTP timeout must be positive",
                details={"setting": "http_timeout", "value": self.http_timeout}
            )

        for setting in ("resolver_app_id", "token_app_id"):
            if getattr(self, setting) <= 0:
                raise ConfigurationError(
                    f"Invalid application id for {setting}",
                    details={"setting": setting, "value": getattr(self, setting)}
                )

        if not is_valid_address(self.query_address):
            raise ConfigurationError(
                f"Invalid query address: {self.query_address}",
                details={"setting": "query_address", "value": self.query_address}
            )

        self.api_base_url = self.api_base_url.rstrip("/")


@lru_cache()
def get_resolver_settings() -> ResolverSettings:
    """Get resolver settings from environment variables.

    Returns:
        ResolverSettings instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    return ResolverSettings(
        api_base_url=get_env_var("ENVOI_API_URL", constants.API_BASE_URL,
                                 validator=url_validator),
        http_timeout=get_env_var("ENVOI_HTTP_TIMEOUT", constants.DEFAULT_HTTP_TIMEOUT,
                                 validator=float_validator),
        resolver_app_id=get_env_var("ENVOI_RESOLVER_APP_ID", constants.RESOLVER_APP_ID,
                                    validator=int_validator),
        token_app_id=get_env_var("ENVOI_TOKEN_APP_ID", constants.VNS_TOKEN_APP_ID,
                                 validator=int_validator),
        query_address=get_env_var("ENVOI_QUERY_ADDRESS", constants.QUERY_ADDRESS,
                                  validator=address_validator),
        log_level=get_env_var("ENVOI_LOG_LEVEL", "WARNING",
                              validator=log_level_validator)
    )
