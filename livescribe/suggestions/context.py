"""Prompt context serialization and model output parsing."""

from __future__ import annotations

import re
from collections.abc import Iterable

from livescribe.state import Turn, Speaker

_WORD_SEPARATORS = re.compile(r"\n+|,")
_EDGE_NON_WORD = re.compile(r"^\W+|\W+$")
_ALL_NON_WORD = re.compile(r"^[\W_]+$")

MAX_WORD_LENGTH = 30


def clamp(text: str, max_chars: int) -> str:
    """Keep the last ``max_chars`` characters (newest context wins)."""
    if not text:
        return ""
    return text[-max_chars:] if len(text) > max_chars else text


def serialize_context(turns: Iterable[Turn], max_chars: int) -> str:
    lines = "\n".join(f"({turn.speaker.value}) {turn.text.strip()}" for turn in turns)
    return clamp(lines, max_chars)


def last_turn_text(turns: list[Turn], speaker: Speaker = Speaker.B) -> str:
    for turn in reversed(turns):
        if turn.speaker == speaker:
            return turn.text.strip()
    return ""


def parse_pipe_list(raw: str, limit: int) -> list[str]:
    return [part.strip() for part in (raw or "").split("|") if part.strip()][:limit]


def parse_pipe_words(raw: str, limit: int) -> list[str]:
    # Commas and newlines are accepted as separators too.
    if not raw:
        return []
    words = []
    for part in _WORD_SEPARATORS.sub("|", raw).split("|"):
        word = _EDGE_NON_WORD.sub("", part.strip())
        if not word or _ALL_NON_WORD.match(word) or len(word) > MAX_WORD_LENGTH:
            continue
        words.append(word)
        if len(words) >= limit:
            break
    return words


__all__ = ["clamp", "last_turn_text", "parse_pipe_list", "parse_pipe_words", "serialize_context"]
