"""Backward scan for the newest complete token-usage record."""

import logging
from typing import Sequence

from claude_statusline.services.jsonl_parser import get_message, parse_entry
from claude_statusline.types.transcript import EntryKind, UsageInfo, UsageScan

logger = logging.getLogger(__name__)


def extract_usage(lines: Sequence[str]) -> UsageScan:
    """Find the latest assistant entry carrying a complete usage object.

    Scans from the last line toward the first and stops at the first
    qualifying entry, so older lines are never parsed once it is found.
    The type of the newest parseable entry is recorded whatever its kind.
    """
    scan = UsageScan()

    for index in range(len(lines) - 1, -1, -1):
        entry = parse_entry(lines[index])
        if entry is None:
            continue

        if scan.last_entry_type is None:
            scan.last_entry_type = EntryKind.from_raw(entry.get("type"))

        if entry.get("type") != EntryKind.ASSISTANT.value:
            continue

        message = get_message(entry)
        usage = UsageInfo.from_raw(message.get("usage"))
        if usage is None:
            continue

        stop_reason = message.get("stop_reason")
        scan.usage = usage
        scan.stop_reason = stop_reason if isinstance(stop_reason, str) else None
        scan.assistant_index = index
        scan.entry = entry
        break

    if scan.usage is None:
        logger.debug("No assistant usage found in %d transcript lines", len(lines))
    return scan
