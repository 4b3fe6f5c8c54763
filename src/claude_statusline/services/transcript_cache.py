"""mtime-keyed cache in front of the transcript analysis pipeline."""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from claude_statusline.services.activity_resolver import find_recent_tool_name, resolve_activity
from claude_statusline.services.error_classifier import classify_errors, recent_window
from claude_statusline.services.jsonl_parser import read_transcript_lines
from claude_statusline.services.usage_extractor import extract_usage
from claude_statusline.types.config import EngineConfig
from claude_statusline.types.snapshot import (
    SnapshotStatus,
    TokenSnapshot,
    TranscriptSnapshot,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    path: str
    mtime_ns: int
    snapshot: TranscriptSnapshot


def _stat_transcript(path: str) -> os.stat_result:
    return os.stat(path)


def analyze_lines(lines: list[str], config: EngineConfig) -> TranscriptSnapshot:
    """Run usage extraction, error classification and state resolution."""
    scan = extract_usage(lines)
    window = recent_window(lines, config.recent_error_count)
    errors = classify_errors(scan.entry, window)

    tool_name = None
    if scan.stop_reason == "tool_use":
        tool_name = find_recent_tool_name(window)

    activity = resolve_activity(
        stop_reason=scan.stop_reason,
        current_error=errors.current_error,
        error_detail=errors.detail,
        last_tool_name=tool_name,
        last_entry_type=scan.last_entry_type,
        last_assistant_output_tokens=scan.output_tokens,
    )

    recent_only = errors.recent_error and not errors.current_error
    return TranscriptSnapshot(
        tokens=TokenSnapshot.from_usage(scan.used_tokens, config.context_window),
        activity=activity,
        status=SnapshotStatus.OK,
        recent_error=errors.recent_error,
        recent_error_detail=errors.detail if recent_only else "",
    )


class TranscriptCache:
    """Caches the snapshot of the most recently read transcript.

    A stored snapshot is served only while the file's modification time is
    unchanged; any difference forces a full re-read. One entry is held at a
    time. Not thread-safe: the compare-then-store sequence needs a lock if
    the cache is ever shared between callers.
    """

    def __init__(self, config: EngineConfig | None = None):
        self._config = config or EngineConfig()
        self._entry: CacheEntry | None = None
        self.read_count = 0

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def update_config(self, config: EngineConfig):
        """Swap the configuration; cached results no longer apply."""
        self._config = config
        self.invalidate()

    def invalidate(self):
        self._entry = None

    def get_snapshot(self, transcript_path: str | Path | None) -> TranscriptSnapshot:
        """Return the snapshot for a transcript, re-reading only when stale."""
        context_window = self._config.context_window
        if not transcript_path:
            return TranscriptSnapshot.empty(context_window)

        path = str(transcript_path)
        try:
            st = _stat_transcript(path)
        except (FileNotFoundError, NotADirectoryError):
            return TranscriptSnapshot.empty(context_window)
        except OSError as e:
            logger.warning("Cannot stat transcript %s: %s", path, e)
            return TranscriptSnapshot.empty(context_window, SnapshotStatus.NO_ACCESS)

        if not stat.S_ISREG(st.st_mode):
            return TranscriptSnapshot.empty(context_window)

        entry = self._entry
        if (
            self._config.cache_enabled
            and entry is not None
            and entry.path == path
            and entry.mtime_ns == st.st_mtime_ns
        ):
            return entry.snapshot

        try:
            self.read_count += 1
            lines = read_transcript_lines(path)
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read transcript %s", path, exc_info=True)
            return TranscriptSnapshot.empty(context_window, SnapshotStatus.PARSE_ERROR)

        snapshot = analyze_lines(lines, self._config)
        if self._config.cache_enabled:
            self._entry = CacheEntry(path=path, mtime_ns=st.st_mtime_ns, snapshot=snapshot)
        return snapshot
