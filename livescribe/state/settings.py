"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    api_key: str
    listen_url: str
    model: str
    language: str
    smart_format: bool
    interim_results: bool
    encoding: str
    sample_rate: int
    channels: int
    auth_scheme: str
    open_timeout_s: float
    ping_interval_s: float
    max_message_bytes: int


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    endpoint_path: str
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    upstream: UpstreamSettings
    limits: LimitsSettings
    websocket: WebSocketSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "UpstreamSettings",
    "WebSocketSettings",
]
