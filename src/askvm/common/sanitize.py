"""Helpers that turn a raw model reply into user-facing text."""
from __future__ import annotations

OPEN_TAG = "<think>"
CLOSE_TAG = "</think>"
NULL_TOKEN = "null"

def _strip_once(text: str) -> str:
    out: list[str] = []
    pos = 0
    while True:
        start = text.find(OPEN_TAG, pos)
        if start == -1:
            break
        end = text.find(CLOSE_TAG, start + len(OPEN_TAG))
        if end == -1:
            # Unterminated span stays as-is.
            break
        out.append(text[pos:start])
        pos = end + len(CLOSE_TAG)
    out.append(text[pos:])
    return "".join(out)

def strip_reasoning(text: str) -> str:
    """
    Remove every <think>...</think> span from text.

    Each opening tag is paired with the next closing tag, newlines included.
    Removal repeats until nothing changes, so tags reassembled from the
    leftovers of a previous pass are removed too.

    Args:
        text: Raw model output.

    Returns:
        Text without reasoning spans.
    """
    while True:
        stripped = _strip_once(text)
        if stripped == text:
            return stripped
        text = stripped

def clean_answer(text: str | None) -> str | None:
    """
    Strip reasoning markup and surrounding whitespace.

    Returns None when nothing usable remains (empty, whitespace or literal null).
    """
    if text is None:
        return None
    cleaned = strip_reasoning(text).strip()
    if not cleaned or cleaned == NULL_TOKEN:
        return None
    return cleaned
