"""Relay connection helpers for the capture client."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse, urlunparse

import websockets

from livescribe.config.websocket import WS_ENDPOINT_PATH
from livescribe.realtime.adapter import ConnectFn
from livescribe.config.capture import CLIENT_OPEN_TIMEOUT_S, CLIENT_MAX_MESSAGE_BYTES


def relay_url(server: str, *, secure: bool = False, path: str = WS_ENDPOINT_PATH) -> str:
    """Build the relay websocket URL from ``host:port`` or a full URL."""
    server = (server or "").strip()
    if server.startswith(("ws://", "wss://", "http://", "https://")):
        parsed = urlparse(server)
        if parsed.scheme in {"http", "https"}:
            scheme = "wss" if (parsed.scheme == "https" or secure) else "ws"
        else:
            scheme = parsed.scheme
        base_path = (parsed.path or "").rstrip("/")
        if not base_path.endswith(path):
            base_path = f"{base_path}{path}"
        return urlunparse((scheme, parsed.netloc, base_path, "", parsed.query, ""))
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{server.rstrip('/')}{path}"


async def open_relay_connection(
    url: str,
    *,
    connect_fn: ConnectFn | None = None,
    open_timeout_s: float = CLIENT_OPEN_TIMEOUT_S,
) -> Any:
    connect = connect_fn or websockets.connect
    return await connect(url, open_timeout=open_timeout_s, max_size=CLIENT_MAX_MESSAGE_BYTES)


__all__ = ["open_relay_connection", "relay_url"]
