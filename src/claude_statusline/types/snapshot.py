"""Snapshot types handed to the formatting layer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActivityKind(str, Enum):
    READY = "ready"
    THINKING = "thinking"
    TOOL_USE = "tool_use"
    ERROR = "error"


class SnapshotStatus(str, Enum):
    OK = "ok"
    NO_TRANSCRIPT = "no_transcript"
    NO_ACCESS = "no_access"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class ActivityState:
    kind: ActivityKind
    tool_name: Optional[str] = None
    detail: str = ""

    @classmethod
    def ready(cls) -> "ActivityState":
        return cls(ActivityKind.READY)

    @classmethod
    def thinking(cls) -> "ActivityState":
        return cls(ActivityKind.THINKING)

    @classmethod
    def tool_use(cls, tool_name: Optional[str] = None) -> "ActivityState":
        return cls(ActivityKind.TOOL_USE, tool_name=tool_name)

    @classmethod
    def error(cls, detail: str) -> "ActivityState":
        return cls(ActivityKind.ERROR, detail=detail)


@dataclass(frozen=True)
class TokenSnapshot:
    used_tokens: int
    context_window: int
    percentage: float

    @classmethod
    def from_usage(cls, used_tokens: int, context_window: int) -> "TokenSnapshot":
        # Not clamped: usage can run past the nominal window.
        if context_window <= 0:
            return cls(used_tokens, context_window, 0.0)
        return cls(used_tokens, context_window, used_tokens / context_window * 100)


@dataclass(frozen=True)
class ErrorClassification:
    current_error: bool = False
    recent_error: bool = False
    detail: str = ""


@dataclass(frozen=True)
class TranscriptSnapshot:
    """Everything the formatting layer needs from one transcript read."""
    tokens: TokenSnapshot
    activity: ActivityState
    status: SnapshotStatus = SnapshotStatus.OK
    recent_error: bool = False
    recent_error_detail: str = ""

    @classmethod
    def empty(
        cls,
        context_window: int,
        status: SnapshotStatus = SnapshotStatus.NO_TRANSCRIPT,
    ) -> "TranscriptSnapshot":
        """Zero-usage Ready snapshot used for every degraded path."""
        return cls(
            tokens=TokenSnapshot.from_usage(0, context_window),
            activity=ActivityState.ready(),
            status=status,
        )
