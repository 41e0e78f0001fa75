"""Per-session relay state (dataclasses only)."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class RelayState(str, enum.Enum):
    CONNECTING = "connecting"
    ACTIVE = "active"
    CLOSING = "closing"
    CLOSED = "closed"


@dataclass(slots=True)
class RelayStats:
    frames_forwarded: int = 0
    frames_dropped: int = 0
    results_forwarded: int = 0


__all__ = ["RelayState", "RelayStats"]
