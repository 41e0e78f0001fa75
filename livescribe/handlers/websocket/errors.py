"""Send/close helpers that never raise on a closing socket."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_close(ws: WebSocket, *, code: int, reason: str = "") -> bool:
    try:
        await ws.close(code=code, reason=reason or None)
    except Exception:
        # Already closed by either side.
        logger.debug("WebSocket close skipped", exc_info=True)
        return False
    return True


async def reject_connection(ws: WebSocket, *, close_code: int, reason: str) -> None:
    # Closing before accept makes the ASGI server refuse the handshake.
    logger.info("rejecting websocket connection: %s", reason)
    await safe_close(ws, code=close_code, reason=reason)


__all__ = ["reject_connection", "safe_close", "safe_send_text"]
