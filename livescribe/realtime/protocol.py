"""Recognizer wire message normalization.

The recognizer may deliver a JSON message as a text frame or as a binary
frame; both are normalized to UTF-8 text. Only ``"Results"`` messages are
projected into a :class:`RecognitionEvent`; metadata, speech-started and
utterance-end messages are dropped.
"""

from __future__ import annotations

import logging
from typing import Any

import orjson

from livescribe.state import RecognitionEvent

logger = logging.getLogger(__name__)

RESULTS_MESSAGE_TYPE = "Results"


def decode_message(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("dropping undecodable recognizer frame (%d bytes)", len(raw))
            return None
    return None


def _first_transcript(msg: dict[str, Any]) -> str | None:
    channel = msg.get("channel")
    if not isinstance(channel, dict):
        return None
    alternatives = channel.get("alternatives")
    if not isinstance(alternatives, list) or not alternatives:
        return None
    first = alternatives[0]
    if not isinstance(first, dict):
        return None
    transcript = first.get("transcript", "")
    if not isinstance(transcript, str):
        return None
    return transcript


def parse_results_message(text: str) -> RecognitionEvent | None:
    try:
        msg = orjson.loads(text)
    except orjson.JSONDecodeError:
        logger.debug("dropping unparseable recognizer message")
        return None

    if not isinstance(msg, dict) or msg.get("type") != RESULTS_MESSAGE_TYPE:
        return None

    transcript = _first_transcript(msg)
    if transcript is None:
        logger.debug("dropping Results message without transcript alternatives")
        return None
    return RecognitionEvent(is_final=bool(msg.get("is_final", False)), transcript=transcript)


def parse_recognizer_frame(raw: Any) -> tuple[str, RecognitionEvent] | None:
    """Decode then parse one frame; ``None`` when the frame should be dropped."""
    text = decode_message(raw)
    if text is None:
        return None
    event = parse_results_message(text)
    if event is None:
        return None
    return text, event


__all__ = [
    "RESULTS_MESSAGE_TYPE",
    "decode_message",
    "parse_recognizer_frame",
    "parse_results_message",
]
