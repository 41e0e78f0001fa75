"""Client capture and turn segmentation settings (env-resolved constants only)."""

from __future__ import annotations

import os


def _get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except Exception:
        return int(default)


LIVESCRIBE_SERVER: str = (os.getenv("LIVESCRIBE_SERVER") or "").strip() or "127.0.0.1:3001"

CAPTURE_CHANNELS: int = 1
CAPTURE_SAMPLE_RATE: int = max(8000, _get_int("CAPTURE_SAMPLE_RATE", 48000))
CAPTURE_CHUNK_MS: int = max(20, _get_int("CAPTURE_CHUNK_MS", 250))
CAPTURE_DTYPE: str = "int16"

# Chunks waiting for the relay socket; newer chunks are dropped once full.
CAPTURE_QUEUE_MAX_CHUNKS: int = max(1, _get_int("CAPTURE_QUEUE_MAX_CHUNKS", 40))

# Empty means the host default input device.
CAPTURE_DEVICE: str = (os.getenv("CAPTURE_DEVICE") or "").strip()

# Quiet interval after which buffered speech is committed as a turn.
INACTIVITY_MS: int = max(100, _get_int("INACTIVITY_MS", 1500))

CLIENT_OPEN_TIMEOUT_S: float = 10.0
CLIENT_MAX_MESSAGE_BYTES: int = 4 * 1024 * 1024

__all__ = [
    "CAPTURE_CHANNELS",
    "CAPTURE_CHUNK_MS",
    "CAPTURE_DEVICE",
    "CAPTURE_DTYPE",
    "CAPTURE_QUEUE_MAX_CHUNKS",
    "CAPTURE_SAMPLE_RATE",
    "CLIENT_MAX_MESSAGE_BYTES",
    "CLIENT_OPEN_TIMEOUT_S",
    "INACTIVITY_MS",
    "LIVESCRIBE_SERVER",
]
