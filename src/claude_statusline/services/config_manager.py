"""Statusline configuration manager wrapping QSettings."""

import logging

from PySide6.QtCore import QObject, Signal, QSettings

from claude_statusline.types.config import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_RECENT_ERROR_COUNT,
    EngineConfig,
)

logger = logging.getLogger(__name__)

# Default values
DEFAULTS = {
    "tokens/contextWindow": DEFAULT_CONTEXT_WINDOW,
    "advanced/recentErrorCount": DEFAULT_RECENT_ERROR_COUNT,
    "advanced/cacheEnabled": True,
    "advanced/debugLogging": False,
    "status/showRecentErrors": True,
    "display/separator": " | ",
}


class ConfigManager(QObject):
    """Centralized statusline settings."""

    settings_changed = Signal(str)  # key

    def __init__(self, settings: QSettings | None = None, parent=None):
        super().__init__(parent)
        self._settings = settings if settings is not None else QSettings()

    def get_string(self, key: str) -> str:
        return str(self._settings.value(key, DEFAULTS.get(key, "")))

    def get_int(self, key: str) -> int:
        val = self._settings.value(key, DEFAULTS.get(key, 0))
        try:
            return int(val)
        except (ValueError, TypeError):
            logger.warning("Invalid integer for %s: %r", key, val)
            return DEFAULTS.get(key, 0)

    def get_bool(self, key: str) -> bool:
        val = self._settings.value(key, DEFAULTS.get(key, False))
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            return val.lower() in ("true", "1", "yes")
        return bool(val)

    def set_string(self, key: str, value: str):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    def set_int(self, key: str, value: int):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    def set_bool(self, key: str, value: bool):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    def engine_config(self) -> EngineConfig:
        """Snapshot the values the transcript engine consumes."""
        context_window = self.get_int("tokens/contextWindow")
        if context_window <= 0:
            context_window = DEFAULT_CONTEXT_WINDOW
        return EngineConfig(
            context_window=context_window,
            recent_error_count=max(1, self.get_int("advanced/recentErrorCount")),
            cache_enabled=self.get_bool("advanced/cacheEnabled"),
        )
