from __future__ import annotations

import pytest

from livescribe.client.device import resolve_device, capture_constraints
from livescribe.config.capture import CAPTURE_CHUNK_MS, CAPTURE_SAMPLE_RATE
from livescribe.client.connection import relay_url


@pytest.mark.parametrize(
    ("server", "secure", "expected"),
    [
        ("127.0.0.1:3001", False, "ws://127.0.0.1:3001/realtime"),
        ("relay.example.com/", True, "wss://relay.example.com/realtime"),
        ("http://localhost:3001", False, "ws://localhost:3001/realtime"),
        ("https://relay.example.com", False, "wss://relay.example.com/realtime"),
        ("ws://localhost:3001/realtime", False, "ws://localhost:3001/realtime"),
        ("wss://relay.example.com/base", False, "wss://relay.example.com/base/realtime"),
    ],
)
def test_relay_url(server: str, secure: bool, expected: str) -> None:
    assert relay_url(server, secure=secure) == expected


def test_resolve_device() -> None:
    assert resolve_device(None) is None
    assert resolve_device("  ") is None
    assert resolve_device("3") == 3
    assert resolve_device("USB Mic") == "USB Mic"


def test_capture_constraints_follow_capture_settings() -> None:
    constraints = capture_constraints()

    assert constraints.sample_rate == CAPTURE_SAMPLE_RATE
    assert constraints.chunk_ms == CAPTURE_CHUNK_MS
    assert constraints.channels == 1
    assert constraints.dtype == "int16"


def test_capture_constraints_overrides_set_chunk_size() -> None:
    constraints = capture_constraints(sample_rate=16000, chunk_ms=100)

    assert constraints.frames_per_chunk == 1600
    assert capture_constraints(sample_rate=100, chunk_ms=1).frames_per_chunk == 160
