"""Capture controller state."""

from __future__ import annotations

import enum


class CaptureState(str, enum.Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    STREAMING = "streaming"


__all__ = ["CaptureState"]
