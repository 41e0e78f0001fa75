"""Interactive capture client for the /realtime relay.

Press Enter to stop. Lines typed as ``> text`` add a local speaker-A turn and
``/clear`` empties the transcript.
"""

from __future__ import annotations

import sys
import asyncio
import argparse
import contextlib

from livescribe.state import Turn, CaptureState
from livescribe.runtime.logging import configure_logging
from livescribe.suggestions import ResponseGenerator, SuggestionRefresher
from livescribe.config.capture import (
    INACTIVITY_MS,
    CAPTURE_DEVICE,
    CAPTURE_CHUNK_MS,
    LIVESCRIBE_SERVER,
    CAPTURE_SAMPLE_RATE,
)

from .segmenter import CommitCallback, TurnSegmenter
from .device import capture_constraints
from .controller import CaptureController
from .connection import relay_url
from .microphone import SoundDeviceMicrophone
from .conversation import Conversation

LOCAL_TURN_PREFIX = ">"
CLEAR_COMMAND = "/clear"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Live transcription client for the relay")
    p.add_argument("--server", default=LIVESCRIBE_SERVER, help="host:port or ws(s):// URL of the relay")
    p.add_argument("--secure", action="store_true", help="use wss:// for host:port servers")
    p.add_argument("--inactivity-ms", type=int, default=INACTIVITY_MS)
    p.add_argument("--device", default=CAPTURE_DEVICE, help="PortAudio input device name or index")
    p.add_argument("--sample-rate", type=int, default=CAPTURE_SAMPLE_RATE, help="capture rate in Hz")
    p.add_argument("--chunk-ms", type=int, default=CAPTURE_CHUNK_MS, help="audio per streamed chunk")
    p.add_argument("--no-suggestions", action="store_true", help="do not request reply suggestions")
    return p.parse_args(argv)


def _print_turns(turns: list[Turn]) -> None:
    last = turns[-1]
    print(f"[turn] ({last.speaker.value}) {last.text}", flush=True)


def _print_live(text: str) -> None:
    if text:
        print(f"[live] {text}", flush=True)


def _print_suggestions(sentences: list[str], words: list[str]) -> None:
    for idx, sentence in enumerate(sentences, start=1):
        print(f"[reply {idx}] {sentence}", flush=True)
    print(f"[words] {' | '.join(words)}", flush=True)


async def _read_stdin_line() -> str:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, sys.stdin.readline)


async def _interact(segmenter: TurnSegmenter, ended: asyncio.Task, on_commit: CommitCallback) -> None:
    conversation = segmenter.conversation
    while True:
        line_task = asyncio.create_task(_read_stdin_line())
        done, _ = await asyncio.wait({line_task, ended}, return_when=asyncio.FIRST_COMPLETED)
        if ended in done:
            line_task.cancel()
            print("[closed] relay session ended; press Enter to exit", flush=True)
            return
        line = line_task.result().strip()
        if not line:
            return
        if line == CLEAR_COMMAND:
            segmenter.clear_transcript()
            print("[cleared]", flush=True)
        elif line.startswith(LOCAL_TURN_PREFIX):
            if conversation.add_local_turn(line[len(LOCAL_TURN_PREFIX) :]) is not None:
                on_commit(conversation.turns)


async def run(args: argparse.Namespace) -> int:
    conversation = Conversation()
    refresher: SuggestionRefresher | None = None
    generator = ResponseGenerator()
    if not args.no_suggestions and generator.configured:
        refresher = SuggestionRefresher(generator, on_update=_print_suggestions)

    def _on_commit(turns: list[Turn]) -> None:
        _print_turns(turns)
        if refresher is not None:
            refresher.request(turns)

    session_ended = asyncio.Event()

    def _on_state(state: CaptureState) -> None:
        if state == CaptureState.IDLE:
            session_ended.set()

    segmenter = TurnSegmenter(
        conversation,
        inactivity_s=max(1, args.inactivity_ms) / 1000.0,
        on_commit=_on_commit,
        on_update=_print_live,
    )
    controller = CaptureController(
        url=relay_url(args.server, secure=args.secure),
        segmenter=segmenter,
        microphone=SoundDeviceMicrophone(args.device),
        constraints=capture_constraints(sample_rate=args.sample_rate, chunk_ms=args.chunk_ms),
        on_error=lambda exc: print(f"[error] {exc}", file=sys.stderr, flush=True),
        on_state=_on_state,
    )

    await controller.start()
    if controller.state != CaptureState.STREAMING:
        return 1
    print("Streaming. Enter stops; '> text' adds your own turn; /clear empties the transcript.", flush=True)

    ended = asyncio.create_task(session_ended.wait())
    try:
        await _interact(segmenter, ended, _on_commit)
    finally:
        ended.cancel()
        await controller.stop()
        if refresher is not None:
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(refresher.wait(), timeout=generator.timeout_s)
            await refresher.aclose()

    print("\n".join(conversation.render()) or "(no turns)", flush=True)
    return 0


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    args = parse_args(argv)
    with contextlib.suppress(KeyboardInterrupt):
        sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
