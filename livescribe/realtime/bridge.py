"""Factory for upstream recognizer adapters."""

from __future__ import annotations

from livescribe.state.settings import UpstreamSettings

from .upstream_url import build_listen_url, build_auth_headers
from .listener import UpstreamListener
from .adapter import ConnectFn, UpstreamSessionAdapter


class UpstreamBridge:
    def __init__(self, *, settings: UpstreamSettings, connect_fn: ConnectFn | None = None) -> None:
        self._settings = settings
        self._connect_fn = connect_fn
        self._url = build_listen_url(settings)

    @property
    def url(self) -> str:
        return self._url

    def new_adapter(self, listener: UpstreamListener) -> UpstreamSessionAdapter:
        return UpstreamSessionAdapter(
            url=self._url,
            headers=build_auth_headers(self._settings),
            listener=listener,
            connect_fn=self._connect_fn,
            open_timeout_s=self._settings.open_timeout_s,
            ping_interval_s=self._settings.ping_interval_s,
            max_message_bytes=self._settings.max_message_bytes,
        )


__all__ = ["UpstreamBridge"]
