"""Resolve the user-facing activity state of a session."""

from typing import Sequence

from claude_statusline.services.jsonl_parser import iter_content_items, parse_entry
from claude_statusline.types.snapshot import ActivityState
from claude_statusline.types.transcript import EntryKind

# Heuristic, not a guarantee: an assistant turn with no stop_reason and
# fewer output tokens than this is assumed to still be streaming.
THINKING_OUTPUT_TOKEN_THRESHOLD = 50


def find_recent_tool_name(window_lines: Sequence[str]) -> str | None:
    """Name of the most recent tool_use item in the window.

    Each entry contributes its first tool_use item; scanning forward, the
    last one seen wins.
    """
    tool_name = None
    for line in window_lines:
        entry = parse_entry(line)
        if entry is None:
            continue
        for item in iter_content_items(entry):
            if item.get("type") == "tool_use":
                name = item.get("name")
                if isinstance(name, str) and name:
                    tool_name = name
                break
    return tool_name


def resolve_activity(
    stop_reason: str | None,
    current_error: bool,
    error_detail: str,
    last_tool_name: str | None,
    last_entry_type: EntryKind | None,
    last_assistant_output_tokens: int | None,
) -> ActivityState:
    """Map the scan results onto Ready / Thinking / ToolUse / Error.

    Every combination maps to a state; missing data leans toward Ready.
    """
    if current_error:
        return ActivityState.error(error_detail)

    if stop_reason == "tool_use":
        return ActivityState.tool_use(last_tool_name)

    if stop_reason == "end_turn":
        return ActivityState.ready()

    if stop_reason is None:
        if last_entry_type == EntryKind.USER:
            # Unanswered user turn: the assistant is composing.
            return ActivityState.thinking()
        if (
            last_entry_type == EntryKind.ASSISTANT
            and last_assistant_output_tokens is not None
            and last_assistant_output_tokens < THINKING_OUTPUT_TOKEN_THRESHOLD
        ):
            return ActivityState.thinking()
        return ActivityState.ready()

    return ActivityState.thinking()
