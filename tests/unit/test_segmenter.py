from __future__ import annotations

import asyncio

import pytest

from livescribe.state import Speaker, RecognitionEvent
from livescribe.client.segmenter import TurnSegmenter
from livescribe.client.conversation import Conversation


def _interim(text: str) -> RecognitionEvent:
    return RecognitionEvent(is_final=False, transcript=text)


def _final(text: str) -> RecognitionEvent:
    return RecognitionEvent(is_final=True, transcript=text)


def _segmenter(**kwargs) -> tuple[TurnSegmenter, Conversation, list]:
    convo = Conversation()
    commits: list = []
    segmenter = TurnSegmenter(convo, inactivity_s=kwargs.pop("inactivity_s", 60.0), on_commit=commits.append, **kwargs)
    return segmenter, convo, commits


@pytest.mark.asyncio
async def test_interim_then_final_commits_after_silence() -> None:
    segmenter, convo, commits = _segmenter(inactivity_s=0.05)

    segmenter.handle_event(_interim("I wa"))
    segmenter.handle_event(_final("I want"))
    await asyncio.sleep(0.2)

    assert [(t.speaker, t.text, t.ended) for t in convo.turns] == [(Speaker.B, "I want", True)]
    assert len(commits) == 1
    assert segmenter.buffer.pending_text() == ""
    assert not segmenter.timer_pending


@pytest.mark.asyncio
async def test_repeated_final_is_not_appended_twice() -> None:
    segmenter, _, _ = _segmenter()

    segmenter.handle_event(_final("hello"))
    segmenter.handle_event(_final(" hello "))

    assert segmenter.buffer.committed_text == "hello "
    segmenter.cancel_timer()


@pytest.mark.asyncio
async def test_inactivity_commits_committed_plus_live_text_once() -> None:
    segmenter, convo, _ = _segmenter()

    segmenter.handle_event(_final("good"))
    segmenter.handle_event(_interim("morn"))
    segmenter.handle_event(_interim("morning"))

    assert segmenter.fire_inactivity() is not None
    assert segmenter.fire_inactivity() is None
    assert [t.text for t in convo.turns] == ["good morning"]


@pytest.mark.asyncio
async def test_inactivity_without_new_speech_is_a_noop() -> None:
    segmenter, convo, commits = _segmenter()

    assert segmenter.fire_inactivity() is None
    assert len(convo) == 0
    assert commits == []


@pytest.mark.asyncio
async def test_same_text_as_previous_commit_is_skipped() -> None:
    segmenter, convo, _ = _segmenter()

    segmenter.handle_event(_interim("okay"))
    segmenter.fire_inactivity()
    segmenter.handle_event(_interim("okay"))
    assert segmenter.fire_inactivity() is None

    assert [t.text for t in convo.turns] == ["okay"]
    assert not segmenter.buffer.heard_since_commit


@pytest.mark.asyncio
async def test_empty_transcripts_are_ignored() -> None:
    segmenter, _, _ = _segmenter()

    segmenter.handle_event(_interim(""))
    segmenter.handle_event(_final("   "))

    assert not segmenter.buffer.heard_since_commit
    assert not segmenter.timer_pending


@pytest.mark.asyncio
async def test_new_event_reschedules_the_single_timer() -> None:
    segmenter, convo, _ = _segmenter(inactivity_s=0.08)

    segmenter.handle_event(_interim("one"))
    await asyncio.sleep(0.05)
    segmenter.handle_event(_interim("one two"))
    await asyncio.sleep(0.05)
    assert len(convo) == 0

    await asyncio.sleep(0.1)
    assert [t.text for t in convo.turns] == ["one two"]


@pytest.mark.asyncio
async def test_force_commit_bypasses_timer() -> None:
    segmenter, convo, commits = _segmenter()

    segmenter.handle_event(_interim("hello there"))
    turn = segmenter.force_commit()

    assert turn is not None and turn.text == "hello there"
    assert [t.text for t in convo.turns] == ["hello there"]
    assert len(commits) == 1
    assert not segmenter.timer_pending


@pytest.mark.asyncio
async def test_force_commit_clears_buffers_even_without_a_commit() -> None:
    segmenter, convo, _ = _segmenter()

    segmenter.handle_event(_interim("same"))
    segmenter.force_commit()
    segmenter.handle_event(_interim("same"))

    assert segmenter.force_commit() is None
    assert segmenter.buffer.pending_text() == ""
    assert len(convo) == 1


@pytest.mark.asyncio
async def test_updates_report_pending_text() -> None:
    updates: list[str] = []
    segmenter = TurnSegmenter(Conversation(), inactivity_s=60.0, on_update=updates.append)

    segmenter.handle_event(_final("hi"))
    segmenter.handle_event(_interim("there"))
    segmenter.force_commit()

    assert updates == ["hi", "hi there", ""]


@pytest.mark.asyncio
async def test_final_then_interim_commits_with_single_spaces() -> None:
    segmenter, convo, _ = _segmenter()

    segmenter.handle_event(_final("I want"))
    segmenter.handle_event(_interim("to go"))
    assert segmenter.fire_inactivity().text == "I want to go"

    segmenter.handle_event(_final("hello "))
    segmenter.handle_event(_interim(" there"))
    assert segmenter.force_commit().text == "hello there"

    assert [t.text for t in convo.turns] == ["I want to go", "hello there"]


@pytest.mark.asyncio
async def test_clear_transcript_forgets_turns_and_dedup_history() -> None:
    updates: list[str] = []
    segmenter, convo, _ = _segmenter(on_update=updates.append)

    segmenter.handle_event(_final("okay"))
    segmenter.fire_inactivity()
    segmenter.handle_event(_interim("still talking"))
    segmenter.clear_transcript()

    assert len(convo) == 0
    assert not segmenter.timer_pending
    assert segmenter.buffer.pending_text() == ""
    assert updates[-1] == ""

    segmenter.handle_event(_final("okay"))
    assert segmenter.fire_inactivity() is not None
    assert [t.text for t in convo.turns] == ["okay"]
