"""Hook payload passed to the statusline command on stdin."""

from dataclasses import dataclass


@dataclass
class StatusInput:
    session_id: str = ""
    transcript_path: str = ""
    cwd: str = ""
    project_dir: str = ""
    model_id: str = ""
    model_display_name: str = ""
