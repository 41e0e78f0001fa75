"""Ordered conversation turns with same-speaker duplicate suppression."""

from __future__ import annotations

from livescribe.state import Turn, Speaker


class Conversation:
    def __init__(self) -> None:
        self._turns: list[Turn] = []

    @property
    def turns(self) -> list[Turn]:
        return list(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def last_turn(self, speaker: Speaker | None = None) -> Turn | None:
        for turn in reversed(self._turns):
            if speaker is None or turn.speaker == speaker:
                return turn
        return None

    def append(self, speaker: Speaker, text: str, *, ended: bool = True) -> Turn | None:
        """Append a turn unless it repeats the previous turn of ``speaker``.

        Only the single most recent turn from the same speaker is compared.
        Returns the new turn, or ``None`` when nothing was appended.
        """
        text = (text or "").strip()
        if not text:
            return None
        last = self.last_turn(speaker)
        if last is not None and last.text.strip() == text:
            return None
        turn = Turn(speaker=speaker, text=text, ended=ended)
        self._turns.append(turn)
        return turn

    def add_local_turn(self, text: str) -> Turn | None:
        return self.append(Speaker.A, text)

    def reset(self) -> None:
        self._turns.clear()

    def render(self, live_text: str = "") -> list[str]:
        lines = []
        for turn in self._turns:
            suffix = " [END]" if turn.speaker == Speaker.B and turn.ended else ""
            lines.append(f"({turn.speaker.value}) {turn.text}{suffix}")
        live_text = live_text.strip()
        if live_text:
            lines.append(f"({Speaker.B.value}) {live_text}")
        return lines


__all__ = ["Conversation"]
