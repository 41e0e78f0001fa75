"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from livescribe.state.settings import AppSettings
    from livescribe.realtime.bridge import UpstreamBridge
    from livescribe.handlers.connections import ConnectionManager


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    upstream_bridge: UpstreamBridge
    settings: AppSettings

    @property
    def upstream_configured(self) -> bool:
        return bool(self.settings.upstream.api_key)


__all__ = ["RuntimeDeps"]
