from __future__ import annotations

from livescribe.state import Turn, Speaker
from livescribe.suggestions.heuristics import pad_words, next_word_heuristics
from livescribe.suggestions.context import (
    clamp,
    last_turn_text,
    parse_pipe_list,
    parse_pipe_words,
    serialize_context,
)


def test_serialize_context_labels_turns_oldest_first() -> None:
    turns = [Turn(speaker=Speaker.A, text=" hello "), Turn(speaker=Speaker.B, text="hi there")]
    assert serialize_context(turns, 1800) == "(A) hello\n(B) hi there"


def test_clamp_keeps_the_newest_characters() -> None:
    assert clamp("abcdef", 3) == "def"
    assert clamp("abc", 10) == "abc"
    assert clamp("", 5) == ""


def test_last_turn_text_finds_latest_remote_turn() -> None:
    turns = [
        Turn(speaker=Speaker.B, text="first"),
        Turn(speaker=Speaker.B, text=" second "),
        Turn(speaker=Speaker.A, text="mine"),
    ]
    assert last_turn_text(turns) == "second"
    assert last_turn_text([Turn(speaker=Speaker.A, text="only me")]) == ""


def test_parse_pipe_list_trims_and_limits() -> None:
    assert parse_pipe_list(" a | | b |c| d ", 3) == ["a", "b", "c"]
    assert parse_pipe_list("", 3) == []


def test_parse_pipe_words_accepts_commas_and_newlines() -> None:
    raw = "yes, no\nmaybe | !!! | 'later' | " + "x" * 31
    assert parse_pipe_words(raw, 8) == ["yes", "no", "maybe", "later"]


def test_next_word_heuristics() -> None:
    assert next_word_heuristics("") == ["I", "Maybe", "Please", "Yes", "No", "Sorry", "Thank", "Could"]
    assert next_word_heuristics("Done.")[0] == "I"
    assert next_word_heuristics("Today I")[:2] == ["am", "need"]
    assert next_word_heuristics("Can you")[0] == "are"
    assert next_word_heuristics("Give me the") == ["time", "way", "thing", "person", "place", "idea", "one"]
    assert next_word_heuristics("Going") == ["and", "to", "of", "that", "is", "it", "in", "for"]


def test_pad_words_fills_with_function_words() -> None:
    assert pad_words(["go"], 4) == ["go", "and", "to", "the"]
