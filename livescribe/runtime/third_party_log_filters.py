"""Log noise filters for third-party libraries.

Only logger levels are adjusted; handlers and formats stay with the root
configuration.
"""

from __future__ import annotations

import logging

from livescribe.config.logging import SHOW_WEBSOCKETS_LOGS

_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def configure() -> None:
    if not SHOW_WEBSOCKETS_LOGS:
        logging.getLogger("websockets").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure"]
