"""Capture device interface consumed by the controller."""

from __future__ import annotations

from typing import Protocol
from collections.abc import Callable

from livescribe.state import MicrophoneConstraints
from livescribe.config.capture import CAPTURE_DTYPE, CAPTURE_CHUNK_MS, CAPTURE_CHANNELS, CAPTURE_SAMPLE_RATE

ChunkCallback = Callable[[bytes], None]


def resolve_device(device: str | int | None) -> str | int | None:
    """Map a CLI/env device value to what PortAudio accepts (index, name or default)."""
    if device is None or isinstance(device, int):
        return device
    device = device.strip()
    if not device:
        return None
    return int(device) if device.isdigit() else device


def capture_constraints(
    *,
    sample_rate: int = CAPTURE_SAMPLE_RATE,
    chunk_ms: int = CAPTURE_CHUNK_MS,
) -> MicrophoneConstraints:
    return MicrophoneConstraints(
        channels=CAPTURE_CHANNELS,
        sample_rate=max(8000, int(sample_rate)),
        chunk_ms=max(20, int(chunk_ms)),
        dtype=CAPTURE_DTYPE,
    )


class Microphone(Protocol):
    async def open(self, constraints: MicrophoneConstraints, on_chunk: ChunkCallback) -> None:
        """Acquire the device and start delivering chunks on the event loop."""
        ...

    def stop(self) -> None:
        """Release the device. Safe to call when already stopped."""
        ...


__all__ = ["ChunkCallback", "Microphone", "capture_constraints", "resolve_device"]
