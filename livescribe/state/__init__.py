from .runtime import RuntimeDeps
from .settings import AppSettings
from .capture import CaptureState
from .relay import RelayState, RelayStats
from .recognition import UpstreamResult, RecognitionEvent
from .transcript import Turn, Speaker, TranscriptBuffer, MicrophoneConstraints

__all__ = [
    "AppSettings",
    "CaptureState",
    "MicrophoneConstraints",
    "RecognitionEvent",
    "RelayState",
    "RelayStats",
    "RuntimeDeps",
    "Speaker",
    "TranscriptBuffer",
    "Turn",
    "UpstreamResult",
]
