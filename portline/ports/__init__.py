"""Port aggregation for Portline."""

from .models import PortInfo, PortsResponse
from .aggregator import (
    MIN_MAX_PORT,
    SHORT_ID_LENGTH,
    aggregate,
    normalize_name,
    resolve_port,
    short_id,
)

__all__ = [
    'PortInfo',
    'PortsResponse',
    'MIN_MAX_PORT',
    'SHORT_ID_LENGTH',
    'aggregate',
    'normalize_name',
    'resolve_port',
    'short_id',
]
