"""Transcript watcher that keeps one long-lived cache and emits snapshots."""

import logging
import os

from PySide6.QtCore import QObject, Signal, QFileSystemWatcher, QTimer

from claude_statusline.services.transcript_cache import TranscriptCache
from claude_statusline.types.config import EngineConfig

logger = logging.getLogger(__name__)

DEBOUNCE_MS = 100


class TranscriptWatcher(QObject):
    """Watches one transcript file and re-evaluates it on change."""

    snapshot_changed = Signal(object)  # TranscriptSnapshot

    def __init__(self, config: EngineConfig | None = None, parent=None):
        super().__init__(parent)
        self._cache = TranscriptCache(config)
        self._watcher = QFileSystemWatcher(self)
        self._transcript_path = ""
        self._last_snapshot = None

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.timeout.connect(self._on_debounced_change)

        self._watcher.fileChanged.connect(self._on_file_changed)
        self._watcher.directoryChanged.connect(self._on_directory_changed)

    @property
    def cache(self) -> TranscriptCache:
        return self._cache

    @property
    def transcript_path(self) -> str:
        return self._transcript_path

    def start(self, transcript_path: str):
        """Start watching a transcript and emit its first snapshot."""
        self.stop()
        self._transcript_path = transcript_path
        self._add_paths()
        self.refresh()

    def stop(self):
        """Stop all file watching."""
        if self._watcher.files():
            self._watcher.removePaths(self._watcher.files())
        if self._watcher.directories():
            self._watcher.removePaths(self._watcher.directories())
        self._debounce_timer.stop()
        self._transcript_path = ""
        self._last_snapshot = None

    def set_config(self, config: EngineConfig):
        self._cache.update_config(config)
        self.refresh()

    def refresh(self):
        """Evaluate the transcript now and emit if the snapshot changed."""
        snapshot = self._cache.get_snapshot(self._transcript_path)
        if snapshot != self._last_snapshot:
            self._last_snapshot = snapshot
            self.snapshot_changed.emit(snapshot)

    def _add_paths(self):
        # The parent directory catches a transcript that does not exist yet.
        directory = os.path.dirname(self._transcript_path)
        if directory and os.path.isdir(directory) and directory not in self._watcher.directories():
            self._watcher.addPath(directory)
        if os.path.exists(self._transcript_path) and self._transcript_path not in self._watcher.files():
            self._watcher.addPath(self._transcript_path)

    def _on_file_changed(self, path: str):
        if path == self._transcript_path:
            self._debounce_timer.start(DEBOUNCE_MS)

    def _on_directory_changed(self, path: str):
        self._debounce_timer.start(DEBOUNCE_MS)

    def _on_debounced_change(self):
        if not self._transcript_path:
            return
        # Qt drops a file from the watcher after it is replaced; re-add it.
        self._add_paths()
        logger.debug("Transcript changed: %s", self._transcript_path)
        self.refresh()
