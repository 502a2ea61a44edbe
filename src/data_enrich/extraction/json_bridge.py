"""Lenient JSON decoding for agent output that may wrap JSON in prose or fences."""

import json
import re
from typing import Any

FENCE_PATTERN = re.compile(r"```(?:json|JSON)?\s*(.*?)```", re.DOTALL)
_OPENER = re.compile(r"[{[]")

_decoder = json.JSONDecoder()


class JsonDecodeFailure(ValueError):
    """No JSON document could be recovered from the text."""


def _candidates(text: str) -> list[str]:
    """Texts worth decoding, most specific first, without duplicates."""
    found: list[str] = []
    for block in FENCE_PATTERN.findall(text):
        block = block.strip()
        if block and block not in found:
            found.append(block)
    stripped = text.strip()
    if stripped and stripped not in found:
        found.append(stripped)
    return found


def _is_structured(value: Any) -> bool:
    if isinstance(value, dict):
        return True
    return isinstance(value, list) and any(isinstance(v, (dict, list)) for v in value)


def _decode_embedded(text: str) -> Any:
    """
    Decode JSON embedded in prose, ignoring trailing noise.
    Every `{`/`[` is tried in order so citation markers like `[1]` do not
    shadow the payload; the first object, or list of containers, wins.
    Falls back to the first value that decoded at all.
    """
    first: Any = None
    decoded_any = False
    for match in _OPENER.finditer(text):
        try:
            value, _ = _decoder.raw_decode(text, match.start())
        except (ValueError, RecursionError):
            continue
        if _is_structured(value):
            return value
        if not decoded_any:
            first, decoded_any = value, True
    if decoded_any:
        return first
    raise JsonDecodeFailure("No embedded JSON document found")


def parse_llm_json(text: str) -> Any:
    """
    Decode JSON from agent text.
    Tries fenced blocks, then the whole text, then JSON embedded in prose.
    Raises JsonDecodeFailure when nothing decodes.
    """
    if not isinstance(text, str):
        raise JsonDecodeFailure(f"Expected text, got {type(text).__name__}")
    for candidate in _candidates(text):
        try:
            return json.loads(candidate)
        except (ValueError, RecursionError):
            pass
        try:
            return _decode_embedded(candidate)
        except JsonDecodeFailure:
            continue
    raise JsonDecodeFailure("Could not parse JSON from agent text")
