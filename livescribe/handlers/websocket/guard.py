"""ASGI middleware refusing websocket upgrades outside the relay path."""

from __future__ import annotations

import logging

from starlette.types import Send, Scope, ASGIApp, Receive

from livescribe.config.websocket import WS_CLOSE_POLICY_CODE

logger = logging.getLogger(__name__)


class UpgradePathGuard:
    """Close any websocket scope whose path is not exactly ``path``.

    The close is sent before accept, so the wrapped app never sees the
    connection. ASGI has no way to drop the raw socket: uvicorn answers such an
    upgrade with an HTTP 403 rather than a bare TCP disconnect. HTTP traffic
    passes through untouched.
    """

    def __init__(self, app: ASGIApp, *, path: str) -> None:
        self.app = app
        self.path = path

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "websocket" and scope.get("path") != self.path:
            logger.info("refusing websocket upgrade for path=%s", scope.get("path"))
            await send({"type": "websocket.close", "code": WS_CLOSE_POLICY_CODE, "reason": ""})
            return
        await self.app(scope, receive, send)


__all__ = ["UpgradePathGuard"]
