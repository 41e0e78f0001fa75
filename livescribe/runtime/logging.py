"""Logging initialization."""

from __future__ import annotations

import logging

from livescribe.config.logging import LOG_LEVEL, LOG_FORMAT

from . import third_party_log_filters


def configure_logging() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    third_party_log_filters.configure()


__all__ = ["configure_logging"]
