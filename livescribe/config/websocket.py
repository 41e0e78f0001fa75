"""WebSocket endpoint configuration and constants."""

from __future__ import annotations

import os

# The only path that accepts connection upgrades.
WS_ENDPOINT_PATH: str = (os.getenv("WS_ENDPOINT_PATH") or "").strip() or "/realtime"

HOST: str = (os.getenv("HOST") or "").strip() or "0.0.0.0"

_PORT_RAW = (os.getenv("PORT") or "").strip()
try:
    PORT: int = int(_PORT_RAW) if _PORT_RAW else 3001
except Exception:
    PORT = 3001

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_POLICY_CODE = 1008
WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE = 1011
WS_CLOSE_BUSY_CODE = 4002

WS_CLOSE_BUSY_REASON = "server at capacity"
WS_CLOSE_UPSTREAM_UNAVAILABLE_REASON = "upstream recognizer not configured"

__all__ = [
    "HOST",
    "PORT",
    "WS_ENDPOINT_PATH",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_POLICY_CODE",
    "WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_BUSY_REASON",
    "WS_CLOSE_UPSTREAM_UNAVAILABLE_REASON",
]
