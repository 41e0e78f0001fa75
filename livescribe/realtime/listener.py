"""Callbacks a relay session implements to observe its upstream leg."""

from __future__ import annotations

from typing import Protocol

from livescribe.state import UpstreamResult


class UpstreamListener(Protocol):
    async def upstream_opened(self) -> None: ...

    async def upstream_result(self, result: UpstreamResult) -> None: ...

    async def upstream_closed(self, code: int | None, reason: str) -> None: ...

    async def upstream_error(self, exc: BaseException) -> None: ...


__all__ = ["UpstreamListener"]
