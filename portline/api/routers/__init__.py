"""API routers."""

from . import keys, ports

__all__ = ['keys', 'ports']
