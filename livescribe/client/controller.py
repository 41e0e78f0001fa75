"""Capture controller: microphone → relay session → turn segmenter."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable

from websockets.exceptions import ConnectionClosed

from livescribe.state.errors import MicrophoneError
from livescribe.config.capture import CAPTURE_QUEUE_MAX_CHUNKS
from livescribe.state import Turn, CaptureState, MicrophoneConstraints
from livescribe.realtime.adapter import ConnectFn
from livescribe.realtime.protocol import decode_message, parse_results_message

from .segmenter import TurnSegmenter
from .device import Microphone
from .connection import open_relay_connection

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[BaseException], None]
StateCallback = Callable[[CaptureState], None]


class CaptureController:
    """Streams microphone chunks to the relay and feeds results to a segmenter.

    ``start`` is a no-op unless idle. ``stop`` releases the microphone, closes
    the session and force-commits pending transcript text; it is idempotent.
    A session closed by the server returns the controller to idle without
    reconnecting.
    """

    def __init__(
        self,
        *,
        url: str,
        segmenter: TurnSegmenter,
        microphone: Microphone,
        constraints: MicrophoneConstraints | None = None,
        connect_fn: ConnectFn | None = None,
        on_error: ErrorCallback | None = None,
        on_state: StateCallback | None = None,
        max_pending_chunks: int = CAPTURE_QUEUE_MAX_CHUNKS,
    ) -> None:
        self.url = url
        self.segmenter = segmenter
        self.state = CaptureState.IDLE
        self._microphone = microphone
        self._constraints = constraints or MicrophoneConstraints()
        self._connect_fn = connect_fn
        self._on_error = on_error
        self._on_state = on_state
        self._max_pending_chunks = max(1, int(max_pending_chunks))
        self.chunks_dropped = 0

        self._token: object | None = None
        self._ws: Any | None = None
        self._mic_open = False
        self._queue: asyncio.Queue[bytes] | None = None
        self._sender_task: asyncio.Task | None = None
        self._receiver_task: asyncio.Task | None = None

    @property
    def mic_open(self) -> bool:
        return self._mic_open

    def _set_state(self, state: CaptureState) -> None:
        if self.state == state:
            return
        self.state = state
        logger.debug("capture state → %s", state.value)
        if self._on_state is not None:
            self._on_state(state)

    def _report(self, exc: BaseException) -> None:
        if self._on_error is not None:
            self._on_error(exc)

    async def start(self) -> None:
        if self.state != CaptureState.IDLE:
            logger.info("capture already %s; start ignored", self.state.value)
            return
        token = self._token = object()
        self._set_state(CaptureState.CONNECTING)

        try:
            ws = await open_relay_connection(self.url, connect_fn=self._connect_fn)
        except Exception as exc:
            logger.warning("relay connection failed: %s", exc)
            if self._token is token:
                self._token = None
                self._set_state(CaptureState.IDLE)
                self._report(exc)
            return

        if self._token is not token:
            with contextlib.suppress(Exception):
                await ws.close()
            return

        self._ws = ws
        self._queue = asyncio.Queue(maxsize=self._max_pending_chunks)
        self._sender_task = asyncio.create_task(self._send_loop(ws, self._queue))
        self._receiver_task = asyncio.create_task(self._receive_loop(ws, token))

        try:
            await self._microphone.open(self._constraints, self._on_chunk)
        except MicrophoneError as exc:
            logger.warning("microphone failed: %s", exc)
            if self._token is token:
                await self._release()
            self._report(exc)
            return

        if self._token is not token:
            # Session ended while the device was opening.
            self._microphone.stop()
            return

        self._mic_open = True
        self._set_state(CaptureState.STREAMING)
        logger.info("capture streaming to %s", self.url)

    async def stop(self) -> Turn | None:
        await self._release()
        return self.segmenter.force_commit()

    def _on_chunk(self, chunk: bytes) -> None:
        queue = self._queue
        if queue is None or not chunk:
            return
        try:
            queue.put_nowait(chunk)
        except asyncio.QueueFull:
            self.chunks_dropped += 1
            logger.debug("relay socket backed up; dropped chunk (%d total)", self.chunks_dropped)

    async def _send_loop(self, ws: Any, queue: asyncio.Queue[bytes]) -> None:
        while True:
            chunk = await queue.get()
            try:
                await ws.send(chunk)
            except ConnectionClosed:
                return

    async def _receive_loop(self, ws: Any, token: object) -> None:
        try:
            async for raw in ws:
                text = decode_message(raw)
                if text is None:
                    continue
                event = parse_results_message(text)
                if event is None or not event.transcript:
                    continue
                self.segmenter.handle_event(event)
        except ConnectionClosed as exc:
            logger.info("relay connection lost: %s", exc)
        except Exception:
            logger.exception("relay receive loop failed")

        if self._token is token:
            logger.info("relay session closed")
            await self._release()

    async def _release(self) -> None:
        self._token = None
        if self._mic_open:
            self._mic_open = False
            self._microphone.stop()
        self._queue = None

        current = asyncio.current_task()
        tasks = [t for t in (self._sender_task, self._receiver_task) if t is not None and t is not current]
        self._sender_task = None
        self._receiver_task = None
        ws, self._ws = self._ws, None

        for task in tasks:
            if not task.done():
                task.cancel()
        if ws is not None:
            with contextlib.suppress(Exception):
                await ws.close()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        self.segmenter.cancel_timer()
        self._set_state(CaptureState.IDLE)


__all__ = ["CaptureController", "ErrorCallback", "StateCallback"]
