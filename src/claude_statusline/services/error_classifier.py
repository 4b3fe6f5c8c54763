"""Classify transcript entries as genuine errors.

Rules are applied in order and the first one that matches decides:

1. A ``toolUseResult`` whose error text mentions a permission block is
   not an error. Denied permissions are user decisions, not failures.
2. A ``toolUseResult`` with a truthy ``error`` or ``type == "error"`` is
   an error.
3. A ``tool_result`` content item with ``is_error: true`` is an error,
   unless its content carries the same permission phrases.
4. An assistant turn that ended on ``stop_sequence`` and whose text is an
   API quota rejection or mentions a content filter is an error.
5. Anything else is not an error.
"""

import logging
from typing import Any, Sequence

from claude_statusline.services.jsonl_parser import (
    content_text,
    get_message,
    iter_content_items,
    parse_entry,
)
from claude_statusline.types.snapshot import ErrorClassification

logger = logging.getLogger(__name__)

PERMISSION_PHRASES = ("was blocked", "For security")

QUOTA_ERROR_PREFIX = "API Error: 403"
QUOTA_ERROR_PHRASE = "user quota is not enough"
FILTER_ERROR_PHRASE = "filter"

DETAIL_QUOTA = "quota exceeded"
DETAIL_FILTER = "filter error"
DETAIL_GENERIC = "Error"

MAX_DETAIL_LENGTH = 80


def is_permission_denial(text: Any) -> bool:
    return isinstance(text, str) and any(p in text for p in PERMISSION_PHRASES)


def is_error_entry(entry: dict) -> bool:
    """Return True when the entry represents a genuine failure."""
    tool_use_result = entry.get("toolUseResult")
    if tool_use_result:
        if is_permission_denial(_tool_use_error_message(tool_use_result)):
            return False
        if isinstance(tool_use_result, dict) and (
            tool_use_result.get("error") or tool_use_result.get("type") == "error"
        ):
            return True

    failed_results = _failed_tool_results(entry)
    if failed_results:
        return any(
            not is_permission_denial(content_text(item.get("content", "")))
            for item in failed_results
        )

    return _api_error_tag(entry) is not None


def error_detail(entry: dict) -> str:
    """Short human-readable cause for an entry that is_error_entry accepts."""
    tool_use_result = entry.get("toolUseResult")
    if tool_use_result and isinstance(tool_use_result, dict):
        message = tool_use_result.get("error")
        if isinstance(message, str) and message and not is_permission_denial(message):
            return _first_line(message)
        if message or tool_use_result.get("type") == "error":
            return DETAIL_GENERIC

    for item in _failed_tool_results(entry):
        text = content_text(item.get("content", ""))
        if not is_permission_denial(text):
            return _first_line(text)

    return _api_error_tag(entry) or DETAIL_GENERIC


def classify_errors(
    current_entry: dict | None,
    window_lines: Sequence[str],
) -> ErrorClassification:
    """Combine the current-entry check with the recent-window scan.

    ``current_error`` only looks at the latest usage-bearing assistant
    entry. ``recent_error`` is true when any line of the window is an
    error; its detail is reported only when there is no current error.
    """
    current_error = current_entry is not None and is_error_entry(current_entry)
    detail = error_detail(current_entry) if current_error else ""

    recent_error = False
    for line in window_lines:
        entry = parse_entry(line)
        if entry is None or not is_error_entry(entry):
            continue
        recent_error = True
        if not current_error:
            detail = error_detail(entry)
        break

    if recent_error or current_error:
        logger.debug("Transcript errors: current=%s recent=%s (%s)", current_error, recent_error, detail)
    return ErrorClassification(current_error=current_error, recent_error=recent_error, detail=detail)


def recent_window(lines: Sequence[str], count: int) -> Sequence[str]:
    """The last ``count`` lines of the transcript (at least one)."""
    count = max(1, count)
    return lines[-count:]


def _tool_use_error_message(tool_use_result: Any) -> Any:
    if isinstance(tool_use_result, dict) and tool_use_result.get("error"):
        return tool_use_result["error"]
    return tool_use_result


def _failed_tool_results(entry: dict) -> list[dict]:
    return [
        item for item in iter_content_items(entry)
        if item.get("type") == "tool_result" and item.get("is_error") is True
    ]


def _api_error_tag(entry: dict) -> str | None:
    """Detail tag for a stop_sequence API error, or None."""
    if get_message(entry).get("stop_reason") != "stop_sequence":
        return None
    for item in iter_content_items(entry):
        if item.get("type") != "text":
            continue
        text = item.get("text")
        if not isinstance(text, str) or not text:
            continue
        if text.startswith(QUOTA_ERROR_PREFIX) and QUOTA_ERROR_PHRASE in text:
            return DETAIL_QUOTA
        if FILTER_ERROR_PHRASE in text:
            return DETAIL_FILTER
    return None


def _first_line(text: str) -> str:
    line = text.strip().split("\n", 1)[0].strip()
    if not line:
        return DETAIL_GENERIC
    if len(line) > MAX_DETAIL_LENGTH:
        return line[:MAX_DETAIL_LENGTH - 1] + "…"
    return line
