from __future__ import annotations

import asyncio

import pytest
from websockets.exceptions import ConnectionClosedError

from livescribe.state import RelayState
from livescribe.realtime import RelaySession, UpstreamBridge

from .doubles import FakeConnector, FakeClientWebSocket, eventually, upstream_settings

RESULTS = '{"type":"Results","is_final":false,"channel":{"alternatives":[{"transcript":"hello"}]}}'


def _session(client: FakeClientWebSocket, connector: FakeConnector) -> RelaySession:
    bridge = UpstreamBridge(settings=upstream_settings(), connect_fn=connector)
    return RelaySession(client, bridge, session_id="test")


@pytest.mark.asyncio
async def test_relay_pairs_both_directions_until_upstream_closes() -> None:
    client = FakeClientWebSocket()
    connector = FakeConnector()
    session = _session(client, connector)
    task = asyncio.create_task(session.run())

    await eventually(lambda: session.state == RelayState.ACTIVE)
    client.push_bytes(b"chunk-1")
    client.push_bytes(b"chunk-2")
    await eventually(lambda: len(connector.socket.sent) == 2)

    connector.socket.push(RESULTS.encode("utf-8"))
    await eventually(lambda: bool(client.sent_text))
    connector.socket.remote_close(1000, "")
    await asyncio.wait_for(task, timeout=1.0)

    assert connector.socket.sent == [b"chunk-1", b"chunk-2"]
    assert client.sent_text == [RESULTS]
    assert client.close_calls == [(1000, None)]
    assert session.state == RelayState.CLOSED
    assert session.stats.frames_forwarded == 2
    assert session.stats.results_forwarded == 1


@pytest.mark.asyncio
async def test_non_results_messages_never_reach_the_client() -> None:
    client = FakeClientWebSocket()
    connector = FakeConnector()
    session = _session(client, connector)
    task = asyncio.create_task(session.run())

    await eventually(lambda: session.state == RelayState.ACTIVE)
    connector.socket.push('{"type":"Metadata","request_id":"r1"}')
    connector.socket.push('{"type":"SpeechStarted"}')
    connector.socket.remote_close(1000, "")
    await asyncio.wait_for(task, timeout=1.0)

    assert client.sent_text == []


@pytest.mark.asyncio
async def test_client_disconnect_closes_upstream() -> None:
    client = FakeClientWebSocket()
    connector = FakeConnector()
    session = _session(client, connector)
    task = asyncio.create_task(session.run())

    await eventually(lambda: session.state == RelayState.ACTIVE)
    client.disconnect(1001)
    await asyncio.wait_for(task, timeout=1.0)

    assert connector.socket.close_calls >= 1
    assert connector.socket.closed
    assert session.state == RelayState.CLOSED


@pytest.mark.asyncio
async def test_client_close_before_upstream_open_aborts_upstream() -> None:
    client = FakeClientWebSocket()
    connector = FakeConnector()
    connector.gate = asyncio.Event()
    session = _session(client, connector)
    task = asyncio.create_task(session.run())

    await eventually(lambda: bool(connector.calls))
    client.push_bytes(b"too-early")
    client.disconnect()
    await asyncio.wait_for(task, timeout=1.0)

    assert connector.cancelled
    assert connector.socket is None
    assert session.stats.frames_forwarded == 0
    assert session.stats.frames_dropped == 1
    assert not session.adapter.is_open


@pytest.mark.asyncio
async def test_upstream_failure_closes_client_with_error_code() -> None:
    client = FakeClientWebSocket()
    connector = FakeConnector()
    session = _session(client, connector)
    task = asyncio.create_task(session.run())

    await eventually(lambda: session.state == RelayState.ACTIVE)
    connector.socket.fail(ConnectionClosedError(None, None))
    await asyncio.wait_for(task, timeout=1.0)

    assert client.close_calls == [(1011, None)]


@pytest.mark.asyncio
async def test_upstream_connect_failure_closes_client() -> None:
    client = FakeClientWebSocket()
    session = _session(client, FakeConnector(error=OSError("unreachable")))

    await asyncio.wait_for(session.run(), timeout=1.0)

    assert client.close_calls == [(1011, None)]
    assert session.state == RelayState.CLOSED


@pytest.mark.asyncio
async def test_close_is_idempotent() -> None:
    client = FakeClientWebSocket()
    session = _session(client, FakeConnector())

    await asyncio.gather(session.close(), session.close(), session.close())
    await session.close()

    assert client.close_calls == [(1000, None)]
    assert session.state == RelayState.CLOSED


class _SlowCloseWebSocket(FakeClientWebSocket):
    def __init__(self) -> None:
        super().__init__()
        self.release = asyncio.Event()

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        await self.release.wait()
        await super().close(code, reason)


@pytest.mark.asyncio
async def test_second_close_waits_for_first_cleanup() -> None:
    client = _SlowCloseWebSocket()
    session = _session(client, FakeConnector())

    first = asyncio.create_task(session.close())
    await eventually(lambda: session.state == RelayState.CLOSING)
    second = asyncio.create_task(session.close())
    await asyncio.sleep(0.02)
    assert not second.done()

    client.release.set()
    await asyncio.wait_for(asyncio.gather(first, second), timeout=1.0)
    assert session.state == RelayState.CLOSED
    assert len(client.close_calls) == 1
