from .segmenter import TurnSegmenter
from .controller import CaptureController
from .conversation import Conversation

__all__ = ["CaptureController", "Conversation", "TurnSegmenter"]
