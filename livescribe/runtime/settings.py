"""Load runtime settings.

Configuration values are resolved from the environment in `livescribe/config/*`
and exposed here as structured dataclasses for the rest of the server.
"""

from __future__ import annotations

from livescribe.config.secrets import DEEPGRAM_API_KEY
from livescribe.config.limits import MAX_CONCURRENT_CONNECTIONS
from livescribe.config.websocket import HOST, PORT, WS_ENDPOINT_PATH
from livescribe.state.settings import AppSettings, LimitsSettings, UpstreamSettings, WebSocketSettings
from livescribe.config.upstream import (
    DEEPGRAM_MODEL,
    DEEPGRAM_CHANNELS,
    DEEPGRAM_ENCODING,
    DEEPGRAM_LANGUAGE,
    DEEPGRAM_LISTEN_URL,
    DEEPGRAM_AUTH_SCHEME,
    DEEPGRAM_SAMPLE_RATE,
    DEEPGRAM_SMART_FORMAT,
    DEEPGRAM_INTERIM_RESULTS,
    UPSTREAM_OPEN_TIMEOUT_S,
    UPSTREAM_PING_INTERVAL_S,
    UPSTREAM_MAX_MESSAGE_BYTES,
)


def load_settings() -> AppSettings:
    return AppSettings(
        upstream=UpstreamSettings(
            api_key=DEEPGRAM_API_KEY,
            listen_url=DEEPGRAM_LISTEN_URL,
            model=DEEPGRAM_MODEL,
            language=DEEPGRAM_LANGUAGE,
            smart_format=DEEPGRAM_SMART_FORMAT,
            interim_results=DEEPGRAM_INTERIM_RESULTS,
            encoding=DEEPGRAM_ENCODING,
            sample_rate=DEEPGRAM_SAMPLE_RATE,
            channels=DEEPGRAM_CHANNELS,
            auth_scheme=DEEPGRAM_AUTH_SCHEME,
            open_timeout_s=UPSTREAM_OPEN_TIMEOUT_S,
            ping_interval_s=UPSTREAM_PING_INTERVAL_S,
            max_message_bytes=UPSTREAM_MAX_MESSAGE_BYTES,
        ),
        limits=LimitsSettings(
            max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS,
        ),
        websocket=WebSocketSettings(
            endpoint_path=WS_ENDPOINT_PATH,
            host=HOST,
            port=PORT,
        ),
    )


__all__ = ["load_settings"]
