"""
Configuration module for the SMSGATE client.

Loads configuration from environment variables with sensible defaults.
Uses python-dotenv to load from .env file if present.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from dotenv import find_dotenv, load_dotenv

from smsgate.domain.models import DEFAULT_API_PATH


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_env_required(key: str) -> str:
    """
    Get required environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ValueError: If environment variable not set
    """
    value = os.getenv(key)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' not set. "
            f"Please set it in .env file or environment."
        )
    return value


def get_env_float(key: str, default: float) -> float:
    """Get environment variable as float, falling back to default on bad input."""
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


# =============================================================================
# Gateway Configuration
# =============================================================================


@dataclass(frozen=True)
class GatewaySettings:
    """
    Connection settings for the gateway.

    Environment Variables:
        SMSGATE_HOST: Gateway scheme and host, e.g. https://192.168.0.1:8080
        SMSGATE_USER: Gateway username (REQUIRED)
        SMSGATE_PASSWORD: Gateway password (may be empty)
        SMSGATE_PATH: API path (default: /rest.api)
        SMSGATE_TIMEOUT: Request timeout in seconds (default: 30)
    """
    host: Optional[str]
    user: str
    password: str = field(default="", repr=False)
    path: str = DEFAULT_API_PATH
    timeout: float = 30.0

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        **overrides: Any,
    ) -> "GatewaySettings":
        """
        Build settings from the environment.

        Args:
            env_file: .env file to load first (default: .env in the working directory)
            **overrides: Field values that take precedence over the environment

        Returns:
            GatewaySettings instance

        Raises:
            ValueError: If no username is given and SMSGATE_USER is not set
        """
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv(find_dotenv(usecwd=True))

        values = {
            "host": get_env("SMSGATE_HOST") or None,
            "password": get_env("SMSGATE_PASSWORD", ""),
            "path": get_env("SMSGATE_PATH") or DEFAULT_API_PATH,
            "timeout": get_env_float("SMSGATE_TIMEOUT", 30.0),
        }
        values.update(overrides)
        if "user" not in values:
            values["user"] = get_env_required("SMSGATE_USER")

        return cls(**values)
