"""Shared utilities for Portline."""

from .config import Config, get_config
from .errors import (
    PortlineError,
    ConfigurationError,
    RuntimeUnavailable,
    InvalidInput,
    MalformedRequest,
)

__all__ = [
    'Config',
    'get_config',
    'PortlineError',
    'ConfigurationError',
    'RuntimeUnavailable',
    'InvalidInput',
    'MalformedRequest',
]
