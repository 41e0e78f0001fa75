"""Client-side transcript and conversation state (dataclasses only)."""

from __future__ import annotations

import enum
import time
from dataclasses import field, dataclass


class Speaker(str, enum.Enum):
    A = "A"  # local user (typed/spoken output)
    B = "B"  # remote voice (transcribed input)


@dataclass(slots=True)
class Turn:
    speaker: Speaker
    text: str
    ts: float = field(default_factory=time.time)
    ended: bool = True


@dataclass(slots=True)
class TranscriptBuffer:
    committed_text: str = ""
    live_text: str = ""
    last_final: str = ""
    last_committed: str = ""
    heard_since_commit: bool = False

    def pending_text(self) -> str:
        return f"{self.committed_text.strip()} {self.live_text.strip()}".strip()

    def clear(self) -> None:
        self.committed_text = ""
        self.live_text = ""
        self.last_final = ""


@dataclass(frozen=True, slots=True)
class MicrophoneConstraints:
    channels: int = 1
    sample_rate: int = 48000
    echo_cancellation: bool = True
    noise_suppression: bool = True
    auto_gain_control: bool = True
    chunk_ms: int = 250
    dtype: str = "int16"

    @property
    def frames_per_chunk(self) -> int:
        return max(1, int(self.sample_rate * self.chunk_ms / 1000))


__all__ = ["MicrophoneConstraints", "Speaker", "TranscriptBuffer", "Turn"]
