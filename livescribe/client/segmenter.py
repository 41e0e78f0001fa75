"""Turn segmentation driven by recognition events and an inactivity timer."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from livescribe.state import Turn, Speaker, TranscriptBuffer, RecognitionEvent
from livescribe.config.capture import INACTIVITY_MS

from .conversation import Conversation

logger = logging.getLogger(__name__)

CommitCallback = Callable[[list[Turn]], None]
UpdateCallback = Callable[[str], None]


class TurnSegmenter:
    """Accumulates interim/final fragments and commits speaker-B turns.

    All methods run on the event loop thread; the inactivity timer is a
    ``loop.call_later`` handle that is always cancelled before rescheduling.
    """

    def __init__(
        self,
        conversation: Conversation,
        *,
        inactivity_s: float = INACTIVITY_MS / 1000.0,
        on_commit: CommitCallback | None = None,
        on_update: UpdateCallback | None = None,
    ) -> None:
        self.conversation = conversation
        self.buffer = TranscriptBuffer()
        self._inactivity_s = float(inactivity_s)
        self._on_commit = on_commit
        self._on_update = on_update
        self._timer: asyncio.TimerHandle | None = None

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    def handle_event(self, event: RecognitionEvent) -> None:
        text = event.transcript
        if not text.strip():
            return
        buf = self.buffer
        if event.is_final:
            if text.strip() == buf.last_final.strip():
                return
            buf.last_final = text
            buf.committed_text += text if text.endswith(" ") else f"{text} "
            buf.live_text = ""
        else:
            buf.live_text = text
        buf.heard_since_commit = True
        self.reset_timer()
        if self._on_update is not None:
            self._on_update(buf.pending_text())

    def reset_timer(self) -> None:
        self.cancel_timer()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._inactivity_s, self.fire_inactivity)

    def cancel_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    def fire_inactivity(self) -> Turn | None:
        self.cancel_timer()
        buf = self.buffer
        if not buf.heard_since_commit:
            return None
        committed = buf.pending_text()
        if not committed or committed == buf.last_committed:
            buf.heard_since_commit = False
            return None
        return self._commit(committed)

    def force_commit(self) -> Turn | None:
        """Commit pending text immediately, bypassing the timer."""
        self.cancel_timer()
        buf = self.buffer
        committed = buf.pending_text()
        turn = None
        if committed and committed != buf.last_committed:
            turn = self._commit(committed)
        buf.clear()
        buf.heard_since_commit = False
        return turn

    def clear_transcript(self) -> None:
        """Drop all turns and buffered text, including the dedup history."""
        self.cancel_timer()
        self.buffer = TranscriptBuffer()
        self.conversation.reset()
        if self._on_update is not None:
            self._on_update("")

    def _commit(self, committed: str) -> Turn | None:
        buf = self.buffer
        turn = self.conversation.append(Speaker.B, committed, ended=True)
        buf.last_committed = committed
        buf.heard_since_commit = False
        buf.clear()
        logger.debug("committed turn: %s", committed)
        if self._on_update is not None:
            self._on_update("")
        if turn is not None and self._on_commit is not None:
            self._on_commit(self.conversation.turns)
        return turn


__all__ = ["CommitCallback", "TurnSegmenter", "UpdateCallback"]
