"""Normalized recognizer output (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecognitionEvent:
    is_final: bool
    transcript: str


@dataclass(frozen=True, slots=True)
class UpstreamResult:
    """A Results message as UTF-8 text plus its parsed projection."""

    text: str
    event: RecognitionEvent


__all__ = ["RecognitionEvent", "UpstreamResult"]
