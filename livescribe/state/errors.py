"""Error types (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UpstreamConnectError(Exception):
    """Raised when the upstream recognizer connection cannot be opened."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class MicrophoneError(Exception):
    """Raised when the capture device cannot be acquired or started."""

    message: str
    device: str | None = None

    def __str__(self) -> str:
        return self.message


__all__ = ["MicrophoneError", "UpstreamConnectError"]
