"""Configuration module exports (env-resolved constants only)."""

from .limits import MAX_CONCURRENT_CONNECTIONS
from .websocket import WS_ENDPOINT_PATH

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "WS_ENDPOINT_PATH",
]
