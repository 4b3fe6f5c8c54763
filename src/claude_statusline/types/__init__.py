"""Type definitions for claude-statusline."""

from claude_statusline.types.transcript import (
    EntryKind,
    UsageInfo,
    UsageScan,
)
from claude_statusline.types.snapshot import (
    ActivityKind,
    ActivityState,
    ErrorClassification,
    SnapshotStatus,
    TokenSnapshot,
    TranscriptSnapshot,
)
from claude_statusline.types.config import EngineConfig
from claude_statusline.types.status_input import StatusInput

__all__ = [
    "EntryKind",
    "UsageInfo",
    "UsageScan",
    "ActivityKind",
    "ActivityState",
    "ErrorClassification",
    "SnapshotStatus",
    "TokenSnapshot",
    "TranscriptSnapshot",
    "EngineConfig",
    "StatusInput",
]
