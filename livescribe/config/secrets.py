"""Secrets configuration.

Both keys are server- or operator-held and are never sent to relay clients.
"""

from __future__ import annotations

import os

DEEPGRAM_API_KEY: str = (os.getenv("DEEPGRAM_API_KEY") or "").strip()

GROQ_API_KEY: str = (os.getenv("GROQ_API_KEY") or "").strip()

__all__ = ["DEEPGRAM_API_KEY", "GROQ_API_KEY"]
