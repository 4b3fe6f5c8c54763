"""Decode the statusline hook payload read from stdin."""

import orjson

from claude_statusline.types.status_input import StatusInput


def parse_status_input(raw: str | bytes) -> StatusInput:
    """Parse the JSON object Claude Code pipes to statusline commands.

    Raises ValueError when the payload is not a JSON object.
    """
    if isinstance(raw, str):
        raw = raw.strip()
    if not raw:
        return StatusInput()

    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise ValueError(f"Invalid statusline input: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Statusline input must be a JSON object")

    workspace = data.get("workspace")
    if not isinstance(workspace, dict):
        workspace = {}
    model = data.get("model")
    if not isinstance(model, dict):
        model = {}

    cwd = _string(data.get("cwd"))
    project_dir = (
        _string(workspace.get("project_dir"))
        or _string(workspace.get("current_dir"))
        or cwd
    )
    return StatusInput(
        session_id=_string(data.get("session_id")),
        transcript_path=_string(data.get("transcript_path")),
        cwd=cwd,
        project_dir=project_dir,
        model_id=_string(model.get("id")),
        model_display_name=_string(model.get("display_name")),
    )


def _string(value) -> str:
    return value if isinstance(value, str) else ""
