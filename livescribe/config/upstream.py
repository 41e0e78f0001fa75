"""Upstream recognizer configuration (env-resolved constants only)."""

from __future__ import annotations

import os

_DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off", "false"}


def _get_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return float(default)
    try:
        return float(raw)
    except Exception:
        return float(default)


def _get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except Exception:
        return int(default)


def _get_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return bool(default)
    if raw in _DISABLED_VALUES:
        return False
    return raw in {"1", "true", "yes", "y", "on"}


DEEPGRAM_LISTEN_URL: str = (os.getenv("DEEPGRAM_LISTEN_URL") or "").strip() or "wss://api.deepgram.com/v1/listen"

DEEPGRAM_MODEL: str = (os.getenv("DEEPGRAM_MODEL") or "").strip() or "nova-3"
DEEPGRAM_LANGUAGE: str = (os.getenv("DEEPGRAM_LANGUAGE") or "").strip() or "en-US"
DEEPGRAM_SMART_FORMAT: bool = _get_bool("DEEPGRAM_SMART_FORMAT", True)
DEEPGRAM_INTERIM_RESULTS: bool = _get_bool("DEEPGRAM_INTERIM_RESULTS", True)

# Containerized audio (webm/opus) is self-describing and needs none of these.
# Raw PCM clients (the sounddevice capture client) need encoding=linear16 and
# the capture sample rate.
DEEPGRAM_ENCODING: str = (os.getenv("DEEPGRAM_ENCODING") or "").strip()
DEEPGRAM_SAMPLE_RATE: int = max(0, _get_int("DEEPGRAM_SAMPLE_RATE", 0))
DEEPGRAM_CHANNELS: int = max(0, _get_int("DEEPGRAM_CHANNELS", 0))

# Vendor-specific bearer scheme.
DEEPGRAM_AUTH_SCHEME: str = "Token"

UPSTREAM_OPEN_TIMEOUT_S: float = max(1.0, _get_float("UPSTREAM_OPEN_TIMEOUT_S", 10.0))
UPSTREAM_PING_INTERVAL_S: float = max(0.0, _get_float("UPSTREAM_PING_INTERVAL_S", 20.0))
UPSTREAM_MAX_MESSAGE_BYTES: int = 4 * 1024 * 1024

__all__ = [
    "DEEPGRAM_AUTH_SCHEME",
    "DEEPGRAM_CHANNELS",
    "DEEPGRAM_ENCODING",
    "DEEPGRAM_INTERIM_RESULTS",
    "DEEPGRAM_LANGUAGE",
    "DEEPGRAM_LISTEN_URL",
    "DEEPGRAM_MODEL",
    "DEEPGRAM_SAMPLE_RATE",
    "DEEPGRAM_SMART_FORMAT",
    "UPSTREAM_MAX_MESSAGE_BYTES",
    "UPSTREAM_OPEN_TIMEOUT_S",
    "UPSTREAM_PING_INTERVAL_S",
]
