"""Extract structured data from free-text model responses."""

import json
import re

from matchai.ai.gemini_client import AIResponseError

_FENCE_RE = re.compile(r"```(?:json)?\n?|\n?```")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")
_LINE_PREFIX_RE = re.compile(r'^["\-*\d.\s\[\]]+')
_LINE_SUFFIX_RE = re.compile(r'[",\]]+$')


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def extract_json_object(text: str) -> dict:
    """Return the first {...} block in `text` as a dict."""
    match = _OBJECT_RE.search(strip_code_fences(text))
    if not match:
        raise AIResponseError("No JSON object found in response")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise AIResponseError(f"Failed to parse JSON object: {e}") from e
    if not isinstance(data, dict):
        raise AIResponseError("Expected a JSON object")
    return data


def extract_json_array(text: str) -> list:
    """Return the first [...] block in `text` as a non-empty list."""
    match = _ARRAY_RE.search(strip_code_fences(text))
    if not match:
        raise AIResponseError("No JSON array found in response")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise AIResponseError(f"Failed to parse JSON array: {e}") from e
    if not isinstance(data, list) or not data:
        raise AIResponseError("Expected a non-empty JSON array")
    return data


def extract_lines(text: str, min_length: int = 10) -> list[str]:
    """Salvage list items from a response that is not valid JSON."""
    lines = []
    for line in strip_code_fences(text).splitlines():
        cleaned = _LINE_SUFFIX_RE.sub("", _LINE_PREFIX_RE.sub("", line.strip())).strip()
        if len(cleaned) > min_length:
            lines.append(cleaned)
    return lines


def string_list(value, limit: int | None = None) -> list[str]:
    """Coerce a JSON value into a list of non-empty strings."""
    if not isinstance(value, list):
        return []
    items = [str(v).strip() for v in value if v is not None and str(v).strip()]
    return items[:limit] if limit is not None else items
