from __future__ import annotations

from urllib.parse import urlparse, parse_qs

from livescribe.realtime.upstream_url import build_listen_url, build_auth_headers

from .doubles import upstream_settings as _settings


def test_listen_url_has_fixed_recognition_options() -> None:
    url = urlparse(build_listen_url(_settings()))
    assert (url.scheme, url.netloc, url.path) == ("wss", "api.deepgram.com", "/v1/listen")
    assert parse_qs(url.query) == {
        "model": ["nova-3"],
        "language": ["en-US"],
        "smart_format": ["true"],
        "interim_results": ["true"],
    }


def test_listen_url_adds_audio_format_only_when_configured() -> None:
    url = build_listen_url(_settings(encoding="linear16", sample_rate=48000, channels=1, interim_results=False))
    query = parse_qs(urlparse(url).query)
    assert query["encoding"] == ["linear16"]
    assert query["sample_rate"] == ["48000"]
    assert query["channels"] == ["1"]
    assert query["interim_results"] == ["false"]


def test_listen_url_keeps_existing_query_params() -> None:
    url = build_listen_url(_settings(listen_url="wss://example.test/v1/listen?tier=enhanced"))
    query = parse_qs(urlparse(url).query)
    assert query["tier"] == ["enhanced"]
    assert query["model"] == ["nova-3"]


def test_auth_header_uses_token_scheme() -> None:
    assert build_auth_headers(_settings()) == [("Authorization", "Token dg-secret")]
