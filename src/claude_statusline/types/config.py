"""Engine configuration values."""

from dataclasses import dataclass

DEFAULT_CONTEXT_WINDOW = 200_000
DEFAULT_RECENT_ERROR_COUNT = 5


@dataclass(frozen=True)
class EngineConfig:
    context_window: int = DEFAULT_CONTEXT_WINDOW
    recent_error_count: int = DEFAULT_RECENT_ERROR_COUNT
    cache_enabled: bool = True
