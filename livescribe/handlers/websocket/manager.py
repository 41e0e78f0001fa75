"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from livescribe.realtime import RelaySession
from livescribe.runtime.dependencies import RuntimeDeps
from livescribe.config.websocket import (
    WS_CLOSE_BUSY_CODE,
    WS_CLOSE_BUSY_REASON,
    WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE,
    WS_CLOSE_UPSTREAM_UNAVAILABLE_REASON,
)

from .errors import reject_connection

logger = logging.getLogger(__name__)


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not runtime_deps.upstream_configured:
        await reject_connection(
            ws,
            close_code=WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE,
            reason=WS_CLOSE_UPSTREAM_UNAVAILABLE_REASON,
        )
        return False

    if not await runtime_deps.connections.connect(ws):
        await reject_connection(ws, close_code=WS_CLOSE_BUSY_CODE, reason=WS_CLOSE_BUSY_REASON)
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    session: RelaySession | None = None
    admitted = False
    try:
        if not await _prepare_connection(ws, runtime_deps):
            return
        admitted = True

        session = RelaySession(ws, runtime_deps.upstream_bridge)
        logger.info(
            "WebSocket connection accepted session_id=%s. Active: %s",
            session.session_id,
            runtime_deps.connections.get_connection_count(),
        )
        await session.run()
    finally:
        if session is not None:
            with contextlib.suppress(Exception):
                await session.close()

        if admitted:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.disconnect(ws)
            logger.info(
                "WebSocket connection closed session_id=%s. Active: %s",
                session.session_id if session is not None else None,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
