from __future__ import annotations

from askvm.common.sanitize import clean_answer, strip_reasoning


def test_strip_single_span() -> None:
    assert clean_answer("<think>internal</think>Hello world") == "Hello world"


def test_strip_multiple_spans() -> None:
    assert strip_reasoning("<think>a</think>Mid<think>b</think>End") == "MidEnd"


def test_strip_spans_across_lines() -> None:
    text = "<think>\nstep one\nstep two\n</think>\n\nThe answer is 4.\n"
    assert clean_answer(text) == "The answer is 4."


def test_nested_looking_tags_pair_with_next_close() -> None:
    assert strip_reasoning("<think>a<think>b</think>c</think>d") == "c</think>d"


def test_strip_is_idempotent() -> None:
    for text in [
        "<think>a</think>Mid<think>b</think>End",
        "<thi<think>x</think>nk>y</think>z",
        "no tags here",
        "<think>unterminated",
    ]:
        once = strip_reasoning(text)
        assert strip_reasoning(once) == once


def test_reassembled_tags_are_removed() -> None:
    assert strip_reasoning("<thi<think>x</think>nk>y</think>z") == "z"


def test_unterminated_span_is_kept() -> None:
    assert clean_answer("Hi <think>still going") == "Hi <think>still going"


def test_empty_and_null_are_unusable() -> None:
    assert clean_answer(None) is None
    assert clean_answer("") is None
    assert clean_answer("  \n ") is None
    assert clean_answer("null") is None
    assert clean_answer("<think>only reasoning</think>\n") is None
