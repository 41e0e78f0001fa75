"""Response/suggestion generator settings (env-resolved constants only)."""

from __future__ import annotations

import os

GROQ_BASE_URL: str = (os.getenv("GROQ_BASE_URL") or "").strip() or "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODEL: str = (os.getenv("GROQ_MODEL") or "").strip() or "llama-3.1-8b-instant"

_TIMEOUT_RAW = (os.getenv("SUGGESTIONS_TIMEOUT_S") or "").strip()
try:
    SUGGESTIONS_TIMEOUT_S: float = float(_TIMEOUT_RAW) if _TIMEOUT_RAW else 10.0
except Exception:
    SUGGESTIONS_TIMEOUT_S = 10.0
if SUGGESTIONS_TIMEOUT_S <= 0:
    SUGGESTIONS_TIMEOUT_S = 10.0

FULL_RESPONSE_COUNT = 3
WORD_GRID_SIZE = 8

FULL_RESPONSE_MAX_CONTEXT_CHARS = 1800
WORD_GRID_MAX_CONTEXT_CHARS = 1200

FULL_RESPONSE_MAX_TOKENS = 160
WORD_GRID_MAX_TOKENS = 96

TEMPERATURE = 0.4
TOP_P = 0.9
FREQUENCY_PENALTY = 0.3

__all__ = [
    "FREQUENCY_PENALTY",
    "FULL_RESPONSE_COUNT",
    "FULL_RESPONSE_MAX_CONTEXT_CHARS",
    "FULL_RESPONSE_MAX_TOKENS",
    "GROQ_BASE_URL",
    "GROQ_MODEL",
    "SUGGESTIONS_TIMEOUT_S",
    "TEMPERATURE",
    "TOP_P",
    "WORD_GRID_MAX_CONTEXT_CHARS",
    "WORD_GRID_MAX_TOKENS",
    "WORD_GRID_SIZE",
]
