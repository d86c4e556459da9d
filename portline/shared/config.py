"""Centralized configuration management for Portline."""

import os
from typing import Optional
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration class with all environment variables."""

    # Server Configuration (the listening port is fixed)
    HTTP_PORT: int = 3000
    KEEP_ALIVE_TIMEOUT: int = 60
    READ_TIMEOUT: int = 15

    def __init__(self) -> None:
        # Authentication
        self.API_KEY: str = os.getenv('API_KEY', '')

        # Server Configuration
        self.SERVER_HOST: str = os.getenv('SERVER_HOST', '0.0.0.0')
        self.SHUTDOWN_GRACE_PERIOD: float = float(os.getenv('SHUTDOWN_GRACE_PERIOD', '10'))

        # Container runtime
        self.DOCKER_HOST: Optional[str] = os.getenv('DOCKER_HOST') or None
        self.RUNTIME_TIMEOUT: float = float(os.getenv('RUNTIME_TIMEOUT', '10'))

        # Logging
        self.LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()

    def validate(self) -> None:
        """Validate required configuration values."""
        errors = []

        if not self.API_KEY:
            errors.append(
                "API_KEY environment variable is required. "
                "Please set it in .env file or export it"
            )

        if not self.SERVER_HOST:
            errors.append("SERVER_HOST is required")

        if self.LOG_LEVEL not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.LOG_LEVEL}")

        if self.RUNTIME_TIMEOUT <= 0:
            errors.append(f"RUNTIME_TIMEOUT must be positive, got {self.RUNTIME_TIMEOUT}")

        if self.SHUTDOWN_GRACE_PERIOD <= 0:
            errors.append(f"SHUTDOWN_GRACE_PERIOD must be positive, got {self.SHUTDOWN_GRACE_PERIOD}")

        if errors:
            raise ConfigurationError(f"Configuration errors: {'; '.join(errors)}")

    @property
    def bind(self) -> str:
        """Address hypercorn binds to."""
        return f"{self.SERVER_HOST}:{self.HTTP_PORT}"


@lru_cache()
def get_config() -> Config:
    """Get validated configuration instance.

    Values from a ``.env`` file in the working directory are loaded first;
    variables already present in the environment take precedence.
    """
    load_dotenv(find_dotenv(usecwd=True))
    config = Config()
    config.validate()
    return config
