"""Single-flight refresh of reply suggestions after each committed turn."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from livescribe.state import Turn

from .generator import ResponseGenerator
from .heuristics import FALLBACK_WORDS, DEFAULT_SENTENCES

logger = logging.getLogger(__name__)

SuggestionsCallback = Callable[[list[str], list[str]], None]


class SuggestionRefresher:
    def __init__(
        self,
        generator: ResponseGenerator,
        *,
        on_update: SuggestionsCallback | None = None,
        style: str = "neutral",
    ) -> None:
        self._generator = generator
        self._on_update = on_update
        self._style = style
        self._task: asyncio.Task | None = None
        self.sentences: list[str] = list(DEFAULT_SENTENCES)
        self.words: list[str] = list(FALLBACK_WORDS)

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def request(self, turns: list[Turn]) -> bool:
        """Start a refresh for ``turns`` unless one is already running."""
        if self.in_flight:
            logger.debug("suggestion refresh already in flight; skipped")
            return False
        self._task = asyncio.get_running_loop().create_task(self._refresh(list(turns)))
        return True

    async def wait(self) -> None:
        task = self._task
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def aclose(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

    async def _refresh(self, turns: list[Turn]) -> None:
        sentences = await self._generator.generate_full_responses(turns, style=self._style)
        words = await self._generator.generate_word_grid(turns)
        self.sentences = sentences
        self.words = words
        if self._on_update is not None:
            self._on_update(sentences, words)


__all__ = ["SuggestionRefresher", "SuggestionsCallback"]
