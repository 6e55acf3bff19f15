"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json


def extract_json_object(text: str) -> dict:
    """Extract a JSON object from an LLM response.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip fenced code block markers (```json ... ```) and parse
    3. Parse the span from the first '{' to the last '}'

    Raises ValueError when no JSON object can be recovered.
    """
    text = (text or "").strip()

    candidates = [text]
    stripped = _strip_code_fences(text)
    if stripped != text:
        candidates.append(stripped)
    for source in (stripped, text):
        span = _brace_span(source)
        if span is not None and span not in candidates:
            candidates.append(span)

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers around the payload."""
    start = text.find("```")
    if start == -1:
        return text
    body = text[start + 3 :]
    # Drop the info string (``json``) on the opening fence line
    newline = body.find("\n")
    body = body[newline + 1 :] if newline != -1 else ""
    end = body.rfind("```")
    if end != -1:
        body = body[:end]
    return body.strip()


def _brace_span(text: str) -> str | None:
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return text[start : end + 1]
    return None
