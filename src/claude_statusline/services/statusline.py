"""Plain-text assembly of the statusline segments."""

import os

from claude_statusline.types.snapshot import (
    ActivityKind,
    SnapshotStatus,
    TokenSnapshot,
    TranscriptSnapshot,
)
from claude_statusline.types.status_input import StatusInput
from claude_statusline.utils.model_names import short_model_name

DEFAULT_SEPARATOR = " | "

STATUS_LABELS = {
    SnapshotStatus.NO_ACCESS: "no access",
    SnapshotStatus.PARSE_ERROR: "parse error",
}


def format_token_count(count: int) -> str:
    if count >= 1000:
        if count % 1000 == 0:
            return f"{count // 1000}k"
        return f"{count / 1000:.1f}k"
    return str(count)


def format_tokens(tokens: TokenSnapshot) -> str:
    used = format_token_count(tokens.used_tokens)
    window = format_token_count(tokens.context_window)
    return f"{tokens.percentage:.1f}% ({used}/{window})"


def format_activity(snapshot: TranscriptSnapshot, show_recent_errors: bool = True) -> str:
    activity = snapshot.activity
    if activity.kind == ActivityKind.ERROR:
        return f"Error: {activity.detail}" if activity.detail else "Error"

    if activity.kind == ActivityKind.TOOL_USE:
        text = f"Tool {activity.tool_name}" if activity.tool_name else "Tool"
    elif activity.kind == ActivityKind.THINKING:
        text = "Thinking"
    else:
        text = "Ready"

    if show_recent_errors and snapshot.recent_error:
        text += " (recent error)"
    return text


def build_statusline(
    status_input: StatusInput,
    snapshot: TranscriptSnapshot,
    branch: str = "",
    separator: str = DEFAULT_SEPARATOR,
    show_recent_errors: bool = True,
) -> str:
    """Join project, model, branch, token and activity segments."""
    project = os.path.basename(status_input.project_dir.rstrip("/\\")) if status_input.project_dir else ""
    model = ""
    if status_input.model_id or status_input.model_display_name:
        model = short_model_name(status_input.model_id or status_input.model_display_name)

    label = STATUS_LABELS.get(snapshot.status)
    if label is not None:
        tokens = label
        activity = ""
    else:
        tokens = format_tokens(snapshot.tokens)
        activity = format_activity(snapshot, show_recent_errors)

    segments = [project, model, branch, tokens, activity]
    return separator.join(s for s in segments if s)
