"""Upstream recognizer URL and header construction."""

from __future__ import annotations

from urllib.parse import urlencode, urlparse, parse_qsl, urlunparse

from livescribe.state.settings import UpstreamSettings


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_listen_url(settings: UpstreamSettings) -> str:
    params: dict[str, str] = {
        "model": settings.model,
        "language": settings.language,
        "smart_format": _flag(settings.smart_format),
        "interim_results": _flag(settings.interim_results),
    }
    if settings.encoding:
        params["encoding"] = settings.encoding
    if settings.sample_rate > 0:
        params["sample_rate"] = str(settings.sample_rate)
    if settings.channels > 0:
        params["channels"] = str(settings.channels)

    parsed = urlparse(settings.listen_url)
    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    query.update(params)
    return urlunparse((parsed.scheme, parsed.netloc, parsed.path, parsed.params, urlencode(query), parsed.fragment))


def build_auth_headers(settings: UpstreamSettings) -> list[tuple[str, str]]:
    return [("Authorization", f"{settings.auth_scheme} {settings.api_key}")]


__all__ = ["build_auth_headers", "build_listen_url"]
