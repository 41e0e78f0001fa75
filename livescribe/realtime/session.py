"""One client connection paired with one upstream recognizer connection."""

from __future__ import annotations

import uuid
import asyncio
import logging
import contextlib

from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from livescribe.state import RelayState, RelayStats, UpstreamResult
from livescribe.config.websocket import WS_CLOSE_NORMAL_CODE, WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE
from livescribe.handlers.websocket.errors import safe_close, safe_send_text

from .bridge import UpstreamBridge
from .adapter import UpstreamSessionAdapter

logger = logging.getLogger(__name__)


def client_is_open(ws: WebSocket) -> bool:
    return ws.client_state == WebSocketState.CONNECTED and ws.application_state == WebSocketState.CONNECTED


class RelaySession:
    """Relays audio frames up and recognizer results down for one client.

    Each direction is a single sequential loop so per-direction ordering holds.
    Whichever leg ends first closes the other; :meth:`close` is idempotent and a
    concurrent caller waits for the first cleanup to finish.
    """

    def __init__(self, ws: WebSocket, bridge: UpstreamBridge, *, session_id: str | None = None) -> None:
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.state = RelayState.CONNECTING
        self.stats = RelayStats()
        self._ws = ws
        self._upstream_failed = False
        self._close_started = False
        self._close_done = asyncio.Event()
        self._adapter = bridge.new_adapter(self)

    @property
    def adapter(self) -> UpstreamSessionAdapter:
        return self._adapter

    async def upstream_opened(self) -> None:
        if self.state == RelayState.CONNECTING:
            self.state = RelayState.ACTIVE
        logger.info("relay %s: upstream open", self.session_id)

    async def upstream_result(self, result: UpstreamResult) -> None:
        if not client_is_open(self._ws):
            return
        if await safe_send_text(self._ws, result.text):
            self.stats.results_forwarded += 1

    async def upstream_error(self, exc: BaseException) -> None:
        self._upstream_failed = True
        logger.warning("relay %s: upstream error: %s", self.session_id, exc)

    async def upstream_closed(self, code: int | None, reason: str) -> None:
        logger.info("relay %s: upstream closed code=%s reason=%s", self.session_id, code, reason or "-")
        await self.close(code=WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE if self._upstream_failed else WS_CLOSE_NORMAL_CODE)

    async def _pump_client(self) -> None:
        ws = self._ws
        while True:
            try:
                message = await ws.receive()
            except (WebSocketDisconnect, RuntimeError):
                return
            if message["type"] == "websocket.disconnect":
                logger.info("relay %s: client closed code=%s", self.session_id, message.get("code"))
                return
            data = message.get("bytes")
            if data is None:
                data = message.get("text")
            if data is None:
                continue
            if await self._adapter.send(data):
                self.stats.frames_forwarded += 1
            else:
                self.stats.frames_dropped += 1

    async def run(self) -> None:
        logger.info("relay %s: opened", self.session_id)
        upstream = asyncio.create_task(self._adapter.run(), name=f"relay-upstream-{self.session_id}")
        client = asyncio.create_task(self._pump_client(), name=f"relay-client-{self.session_id}")
        try:
            await asyncio.wait({upstream, client}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            await self.close()
            for task in (upstream, client):
                if not task.done():
                    task.cancel()
            await asyncio.gather(upstream, client, return_exceptions=True)

    async def close(self, *, code: int = WS_CLOSE_NORMAL_CODE, reason: str = "") -> None:
        if self._close_started:
            await self._close_done.wait()
            return
        self._close_started = True
        self.state = RelayState.CLOSING
        try:
            with contextlib.suppress(Exception):
                await self._adapter.close()
            await safe_close(self._ws, code=code, reason=reason)
        finally:
            self.state = RelayState.CLOSED
            self._close_done.set()
            logger.info(
                "relay %s: closed code=%s forwarded=%d dropped=%d results=%d",
                self.session_id,
                code,
                self.stats.frames_forwarded,
                self.stats.frames_dropped,
                self.stats.results_forwarded,
            )


__all__ = ["RelaySession", "client_is_open"]
