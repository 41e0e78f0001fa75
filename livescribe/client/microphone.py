"""PortAudio microphone backend."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import sounddevice as sd

from livescribe.state import MicrophoneConstraints
from livescribe.state.errors import MicrophoneError

from .device import ChunkCallback, resolve_device

logger = logging.getLogger(__name__)


class SoundDeviceMicrophone:
    """PortAudio input through ``sounddevice.RawInputStream``.

    Each block holds ``constraints.chunk_ms`` of int16 PCM. The PortAudio
    callback thread only copies the block and hands it to the event loop with
    ``call_soon_threadsafe``; ``on_chunk`` always runs on the loop thread.

    PortAudio has no echo cancellation, noise suppression or gain control, so
    those constraint flags are recorded but not applied.
    """

    def __init__(self, device: str | int | None = None) -> None:
        self._device = resolve_device(device)
        self._stream: sd.RawInputStream | None = None

    def _start_stream(self, constraints: MicrophoneConstraints, callback: Any) -> sd.RawInputStream:
        # Device probing and stream start block in PortAudio.
        stream = sd.RawInputStream(
            samplerate=constraints.sample_rate,
            channels=constraints.channels,
            dtype=constraints.dtype,
            blocksize=constraints.frames_per_chunk,
            device=self._device,
            callback=callback,
        )
        stream.start()
        return stream

    async def open(self, constraints: MicrophoneConstraints, on_chunk: ChunkCallback) -> None:
        if self._stream is not None:
            raise MicrophoneError("microphone already open", device=str(self._device))
        loop = asyncio.get_running_loop()

        def _callback(indata: Any, frames: int, time_info: Any, status: sd.CallbackFlags) -> None:
            if status:
                logger.debug("mic status=%s", status)
            loop.call_soon_threadsafe(on_chunk, bytes(indata))

        try:
            stream = await loop.run_in_executor(None, self._start_stream, constraints, _callback)
        except Exception as exc:
            raise MicrophoneError(f"microphone unavailable: {exc}", device=str(self._device)) from exc
        self._stream = stream
        logger.info(
            "mic started device=%s rate=%s chunk_ms=%s",
            self._device if self._device is not None else "default",
            constraints.sample_rate,
            constraints.chunk_ms,
        )

    def stop(self) -> None:
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            stream.stop()
            stream.close()
        except Exception:
            logger.debug("mic close failed", exc_info=True)
        logger.info("mic stopped")


__all__ = ["SoundDeviceMicrophone"]
