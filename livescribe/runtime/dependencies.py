"""Runtime dependency construction (upstream bridge + admission control)."""

from __future__ import annotations

import logging

from livescribe.state import RuntimeDeps
from livescribe.state.settings import AppSettings
from livescribe.realtime.bridge import UpstreamBridge
from livescribe.realtime.adapter import ConnectFn
from livescribe.handlers.connections import ConnectionManager

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(
    settings: AppSettings | None = None,
    *,
    connect_fn: ConnectFn | None = None,
) -> RuntimeDeps:
    settings = settings or load_settings()

    if not settings.upstream.api_key:
        logger.warning("DEEPGRAM_API_KEY is not set; %s will refuse connections", settings.websocket.endpoint_path)

    upstream_bridge = UpstreamBridge(settings=settings.upstream, connect_fn=connect_fn)
    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)

    logger.info(
        "runtime: relay path=%s upstream=%s max_connections=%s",
        settings.websocket.endpoint_path,
        settings.upstream.listen_url,
        connections.capacity,
    )
    return RuntimeDeps(
        connections=connections,
        upstream_bridge=upstream_bridge,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
