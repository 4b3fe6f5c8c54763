"""Entry-level types for parsed transcript data."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


USAGE_KEYS = (
    "input_tokens",
    "cache_creation_input_tokens",
    "cache_read_input_tokens",
    "output_tokens",
)


class EntryKind(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    OTHER = "other"

    @classmethod
    def from_raw(cls, value: Any) -> "EntryKind":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class UsageInfo:
    input_tokens: int
    cache_creation_input_tokens: int
    cache_read_input_tokens: int
    output_tokens: int

    @property
    def total(self) -> int:
        return (self.input_tokens + self.cache_creation_input_tokens +
                self.cache_read_input_tokens + self.output_tokens)

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["UsageInfo"]:
        """Build a UsageInfo only when all four counters are present.

        Partial usage objects, and counters that are not non-negative
        integers, are treated as no usage at all.
        """
        if not isinstance(raw, dict):
            return None
        values = {}
        for key in USAGE_KEYS:
            value = raw.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                return None
            values[key] = value
        return cls(**values)


@dataclass
class UsageScan:
    """Result of the backward usage scan over a transcript."""
    usage: Optional[UsageInfo] = None
    stop_reason: Optional[str] = None
    assistant_index: Optional[int] = None
    last_entry_type: Optional[EntryKind] = None
    entry: Optional[dict] = None

    @property
    def used_tokens(self) -> int:
        return self.usage.total if self.usage is not None else 0

    @property
    def output_tokens(self) -> Optional[int]:
        return self.usage.output_tokens if self.usage is not None else None
