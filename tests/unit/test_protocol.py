from __future__ import annotations

import orjson

from livescribe.state import RecognitionEvent
from livescribe.realtime.protocol import decode_message, parse_results_message, parse_recognizer_frame


def _results(transcript: str, *, is_final: bool) -> str:
    return orjson.dumps(
        {
            "type": "Results",
            "is_final": is_final,
            "channel": {"alternatives": [{"transcript": transcript, "confidence": 0.9}]},
        }
    ).decode("utf-8")


def test_decode_message_accepts_text_and_binary() -> None:
    assert decode_message("hi") == "hi"
    assert decode_message(b"caf\xc3\xa9") == "café"
    assert decode_message(bytearray(b"ok")) == "ok"


def test_decode_message_drops_invalid_utf8() -> None:
    assert decode_message(b"\xff\xfe\xfa") is None
    assert decode_message(42) is None


def test_parse_results_message_final_and_interim() -> None:
    assert parse_results_message(_results("I want", is_final=True)) == RecognitionEvent(True, "I want")
    assert parse_results_message(_results("I wa", is_final=False)) == RecognitionEvent(False, "I wa")


def test_parse_results_message_ignores_other_types() -> None:
    assert parse_results_message('{"type": "Metadata", "request_id": "abc"}') is None
    assert parse_results_message('{"type": "UtteranceEnd"}') is None
    assert parse_results_message("[1, 2, 3]") is None


def test_parse_results_message_tolerates_malformed_input() -> None:
    assert parse_results_message("{not json") is None
    assert parse_results_message('{"type": "Results"}') is None
    assert parse_results_message('{"type": "Results", "channel": {"alternatives": []}}') is None


def test_parse_results_message_keeps_empty_transcript() -> None:
    event = parse_results_message(_results("", is_final=False))
    assert event == RecognitionEvent(False, "")


def test_parse_recognizer_frame_returns_original_text() -> None:
    text = _results("hello", is_final=True)
    parsed = parse_recognizer_frame(text.encode("utf-8"))
    assert parsed is not None
    raw_text, event = parsed
    assert raw_text == text
    assert event.transcript == "hello"
    assert parse_recognizer_frame(b"\xff") is None
