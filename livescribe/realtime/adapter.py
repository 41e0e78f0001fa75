"""Adapter owning one upstream recognizer websocket per relay session."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable

import websockets
from websockets.exceptions import ConnectionClosed

from livescribe.state import UpstreamResult
from livescribe.state.errors import UpstreamConnectError

from .listener import UpstreamListener
from .protocol import parse_recognizer_frame

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Awaitable[Any]]


class UpstreamSessionAdapter:
    """One streaming connection to the recognizer.

    The adapter never reconnects: a connect failure, an abnormal close or a
    normal close all end :meth:`run` and are reported to the listener as
    terminal signals. ``upstream_closed`` is delivered exactly once.
    """

    def __init__(
        self,
        *,
        url: str,
        headers: list[tuple[str, str]],
        listener: UpstreamListener,
        connect_fn: ConnectFn | None = None,
        open_timeout_s: float = 10.0,
        ping_interval_s: float = 20.0,
        max_message_bytes: int = 4 * 1024 * 1024,
    ) -> None:
        self._url = url
        self._headers = headers
        self._listener = listener
        self._connect_fn = connect_fn or websockets.connect
        self._open_timeout_s = float(open_timeout_s)
        self._ping_interval_s = float(ping_interval_s)
        self._max_message_bytes = int(max_message_bytes)

        self._ws: Any | None = None
        self._connect_task: asyncio.Task | None = None
        self._close_requested = False
        self._connect_failed = False
        self._closed_emitted = False

    @property
    def is_open(self) -> bool:
        return self._ws is not None and not self._close_requested

    async def _open(self) -> Any:
        return await self._connect_fn(
            self._url,
            additional_headers=self._headers,
            open_timeout=self._open_timeout_s,
            ping_interval=self._ping_interval_s or None,
            max_size=self._max_message_bytes,
        )

    async def _emit_closed(self, code: int | None, reason: str) -> None:
        if self._closed_emitted:
            return
        self._closed_emitted = True
        await self._listener.upstream_closed(code, reason)

    async def _connect(self) -> Any | None:
        self._connect_task = asyncio.ensure_future(self._open())
        try:
            return await self._connect_task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if not self._close_requested or (current is not None and current.cancelling()):
                raise
            logger.info("upstream connect aborted: session closed before open")
            return None
        except Exception as exc:
            self._close_requested = True
            self._connect_failed = True
            logger.warning("upstream connect failed: %s", exc)
            await self._listener.upstream_error(UpstreamConnectError(str(exc) or type(exc).__name__))
            return None
        finally:
            self._connect_task = None

    async def run(self) -> None:
        """Connect, then pump recognizer messages until either side closes."""
        if self._close_requested:
            await self._emit_closed(None, "closed before connect")
            return

        ws = await self._connect()
        if ws is None:
            await self._emit_closed(None, "connect failed" if self._connect_failed else "connect aborted")
            return

        if self._close_requested:
            with contextlib.suppress(Exception):
                await ws.close()
            await self._emit_closed(getattr(ws, "close_code", None), "closed during connect")
            return

        self._ws = ws
        logger.info("upstream recognizer connected")
        await self._listener.upstream_opened()

        try:
            async for raw in ws:
                parsed = parse_recognizer_frame(raw)
                if parsed is None:
                    continue
                text, event = parsed
                await self._listener.upstream_result(UpstreamResult(text=text, event=event))
        except ConnectionClosed as exc:
            await self._listener.upstream_error(exc)
        except Exception as exc:
            logger.warning("upstream receive loop failed", exc_info=True)
            await self._listener.upstream_error(exc)
        finally:
            self._close_requested = True

        await self._emit_closed(getattr(ws, "close_code", None), getattr(ws, "close_reason", None) or "")

    async def send(self, data: bytes | str) -> bool:
        """Forward one client frame verbatim; ``False`` when it was dropped."""
        ws = self._ws
        if ws is None or self._close_requested:
            return False
        try:
            await ws.send(data)
        except ConnectionClosed:
            return False
        return True

    async def close(self) -> None:
        """Close the upstream leg. Safe to call repeatedly and before open."""
        self._close_requested = True
        task = self._connect_task
        if task is not None and not task.done():
            task.cancel()
        ws = self._ws
        if ws is not None:
            with contextlib.suppress(Exception):
                await ws.close()


__all__ = ["ConnectFn", "UpstreamSessionAdapter"]
