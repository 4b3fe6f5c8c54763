"""Line-level JSONL parsing for Claude Code transcripts."""

import logging
from pathlib import Path
from typing import Any, Iterator

import orjson

logger = logging.getLogger(__name__)

# Max size for a single JSONL line (10MB)
MAX_LINE_SIZE = 10 * 1024 * 1024


def read_transcript_lines(file_path: str | Path) -> list[str]:
    """Read a whole transcript and split it into physical lines.

    The file is decoded as strict UTF-8, so undecodable bytes raise
    UnicodeDecodeError. Surrounding whitespace is stripped first, which
    drops a trailing newline or blank tail.
    """
    path = Path(file_path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    text = text.strip()
    if not text:
        return []
    return text.split("\n")


def parse_entry(line: str) -> dict | None:
    """Parse one transcript line into an entry dict.

    Blank lines, oversized lines, malformed JSON and JSON values that are
    not objects all return None. A bad line never affects its neighbours.
    """
    line = line.strip()
    if not line:
        return None

    if len(line) > MAX_LINE_SIZE:
        logger.warning("Transcript line exceeds %dMB, skipping", MAX_LINE_SIZE // (1024 * 1024))
        return None

    try:
        raw = orjson.loads(line)
    except orjson.JSONDecodeError as e:
        logger.debug("Malformed transcript line: %s", e)
        return None

    if not isinstance(raw, dict):
        return None
    return raw


def get_message(entry: dict) -> dict:
    message = entry.get("message", {})
    return message if isinstance(message, dict) else {}


def iter_content_items(entry: dict) -> Iterator[dict]:
    """Yield the dict items of message.content when it is a list."""
    content = get_message(entry).get("content")
    if not isinstance(content, list):
        return
    for block in content:
        if isinstance(block, dict):
            yield block


def content_text(value: Any) -> str:
    """Flatten a tool result payload (string or list of text blocks) to text."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        parts = []
        for item in value:
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, dict) and isinstance(item.get("text"), str):
                parts.append(item["text"])
        return "\n".join(parts)
    return ""
