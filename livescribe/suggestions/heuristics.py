"""Local next-word suggestions used when the model is unavailable."""

from __future__ import annotations

import re

FALLBACK_WORDS = ["and", "to", "the", "is", "it", "in", "for", "with"]

DEFAULT_SENTENCES = [
    "Could you clarify that point?",
    "That makes sense. Here’s my concern.",
    "Thanks for explaining. May I add something?",
]

SENTENCE_STARTERS = ["I", "Maybe", "Please", "Yes", "No", "Sorry", "Thank", "Could"]
FUNCTION_WORDS = [
    "and", "to", "of", "that", "is", "it", "in", "for", "on", "with", "as", "but", "or", "if",
    "so", "then", "when", "because", "can", "will", "would", "should", "have", "has", "had",
    "do", "does", "did",
]  # fmt: skip
AFTER_I = ["am", "need", "want", "can", "will", "was", "have", "think", "feel"]
AFTER_YOU = ["are", "can", "will", "should", "have", "were", "need", "want"]
AFTER_DETERMINER = ["time", "way", "thing", "person", "place", "idea", "one"]

_LAST_WORD = re.compile(r"([A-Za-z']+)$")
_SENTENCE_END = re.compile(r"[.!?]\"?$")
_DETERMINER_END = re.compile(r"\b(the|a|an|this|that|these|those|my|your|his|her|our|their)$")


def next_word_heuristics(prefix: str, limit: int = 8) -> list[str]:
    stripped = (prefix or "").strip()
    if not stripped or _SENTENCE_END.search(stripped):
        return SENTENCE_STARTERS[:limit]

    match = _LAST_WORD.search(stripped)
    last_word = match.group(1).lower() if match else ""
    if last_word == "i":
        return AFTER_I[:limit]
    if last_word == "you":
        return AFTER_YOU[:limit]
    if _DETERMINER_END.search(stripped.lower()):
        return AFTER_DETERMINER[:limit]
    return FUNCTION_WORDS[:limit]


def pad_words(words: list[str], size: int) -> list[str]:
    return (list(words) + FALLBACK_WORDS)[:size]


__all__ = [
    "AFTER_DETERMINER",
    "AFTER_I",
    "AFTER_YOU",
    "DEFAULT_SENTENCES",
    "FALLBACK_WORDS",
    "FUNCTION_WORDS",
    "SENTENCE_STARTERS",
    "next_word_heuristics",
    "pad_words",
]
