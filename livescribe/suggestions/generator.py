"""Reply suggestions from an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from livescribe.state import Turn
from livescribe.config.secrets import GROQ_API_KEY
from livescribe.config.suggestions import (
    TOP_P,
    GROQ_MODEL,
    TEMPERATURE,
    GROQ_BASE_URL,
    WORD_GRID_SIZE,
    FREQUENCY_PENALTY,
    FULL_RESPONSE_COUNT,
    SUGGESTIONS_TIMEOUT_S,
    WORD_GRID_MAX_TOKENS,
    FULL_RESPONSE_MAX_TOKENS,
    WORD_GRID_MAX_CONTEXT_CHARS,
    FULL_RESPONSE_MAX_CONTEXT_CHARS,
)

from .heuristics import DEFAULT_SENTENCES, pad_words, next_word_heuristics
from .context import last_turn_text, parse_pipe_list, parse_pipe_words, serialize_context

logger = logging.getLogger(__name__)

_FULL_RESPONSE_SYSTEM = (
    "You help a user (A) communicate in short, natural sentences. "
    "Read the conversation context and propose THREE distinct, helpful responses A could say next. "
    "Return ONLY three responses, pipe-separated: sentence1 | sentence2 | sentence3. "
    "Keep each under 12 words, polite, concrete, and directly responding to B's latest message. "
    "No preambles, no labels, no quotes."
)

_WORD_GRID_SYSTEM = (
    "You are given a conversation context and a current partial sentence (prefix). "
    "Return EXACTLY eight single-word TOKENS that could each plausibly follow the given prefix when forming "
    "a natural English sentence, and that are coherent with the conversation context. "
    "Do NOT return punctuation or multi-word phrases. Do NOT include numbers, labels, or any explanation. "
    "Output the eight words as a single pipe-separated list, e.g. word1 | word2 | word3 | ... | word8. "
    "If fewer than eight sensible words exist, fill remaining slots with common function words like 'and' or 'the'."
)


def _image_hint(image_url: str | None) -> str:
    return f"Also consider the image at this URL as additional context: {image_url}\n\n" if image_url else ""


class ResponseGenerator:
    def __init__(
        self,
        *,
        api_key: str = GROQ_API_KEY,
        base_url: str = GROQ_BASE_URL,
        model: str = GROQ_MODEL,
        timeout_s: float = SUGGESTIONS_TIMEOUT_S,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.timeout_s = timeout_s
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def _post(self, client: httpx.AsyncClient, body: dict[str, Any]) -> str:
        response = await client.post(
            self.base_url,
            json=body,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        response.raise_for_status()
        data = response.json()
        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            return ""

    async def chat(self, messages: list[dict[str, str]], max_tokens: int) -> str:
        """Return the first completion text, or ``""`` when no key is configured."""
        if not self.api_key:
            return ""
        body = {
            "model": self.model,
            "messages": messages,
            "temperature": TEMPERATURE,
            "top_p": TOP_P,
            "max_tokens": max_tokens,
            "frequency_penalty": FREQUENCY_PENALTY,
            "presence_penalty": 0.0,
        }
        if self._client is not None:
            return await self._post(self._client, body)
        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            return await self._post(client, body)

    async def generate_full_responses(
        self,
        turns: list[Turn],
        *,
        style: str = "neutral",
        max_context_chars: int = FULL_RESPONSE_MAX_CONTEXT_CHARS,
        image_url: str | None = None,
    ) -> list[str]:
        ctx = serialize_context(turns, max_context_chars)
        latest = last_turn_text(turns)
        target = (
            f'Respond specifically to B\'s latest message:\n"{latest}"\n\n'
            if latest
            else "No latest B found; respond based on the conversation context above.\n\n"
        )
        user = (
            f"Style: {style}\n\n"
            f"Conversation (oldest to newest):\n{ctx}\n\n"
            f"{target}"
            f"{_image_hint(image_url)}"
            "Return exactly three short sentences, pipe-separated."
        )
        messages = [{"role": "system", "content": _FULL_RESPONSE_SYSTEM}, {"role": "user", "content": user}]
        try:
            raw = await self.chat(messages, FULL_RESPONSE_MAX_TOKENS)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("full response generation failed: %s", exc)
            return list(DEFAULT_SENTENCES)

        candidates = parse_pipe_list(raw, FULL_RESPONSE_COUNT)
        if len(candidates) < FULL_RESPONSE_COUNT:
            return list(DEFAULT_SENTENCES)
        return candidates

    async def generate_word_grid(
        self,
        turns: list[Turn],
        *,
        prefix: str = "",
        max_context_chars: int = WORD_GRID_MAX_CONTEXT_CHARS,
        image_url: str | None = None,
    ) -> list[str]:
        ctx = serialize_context(turns, max_context_chars)
        user = (
            f"Conversation (oldest to newest):\n{ctx}\n\n"
            f'Current prefix: "{(prefix or "").strip()}"\n\n'
            f"{_image_hint(image_url)}"
            "Return EXACTLY eight single words, pipe-separated."
        )
        messages = [{"role": "system", "content": _WORD_GRID_SYSTEM}, {"role": "user", "content": user}]
        try:
            raw = await self.chat(messages, WORD_GRID_MAX_TOKENS)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("word grid generation failed: %s", exc)
            raw = ""
        words = parse_pipe_words(raw, WORD_GRID_SIZE)
        if not words:
            words = next_word_heuristics(prefix, WORD_GRID_SIZE)
        return pad_words(words, WORD_GRID_SIZE)


__all__ = ["ResponseGenerator"]
