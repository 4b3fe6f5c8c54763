"""Services for claude-statusline."""

from claude_statusline.services.transcript_cache import TranscriptCache, analyze_lines
from claude_statusline.services.usage_extractor import extract_usage
from claude_statusline.services.error_classifier import classify_errors, error_detail, is_error_entry
from claude_statusline.services.activity_resolver import find_recent_tool_name, resolve_activity
from claude_statusline.services.git_resolver import resolve_git_branch

__all__ = [
    "TranscriptCache",
    "analyze_lines",
    "extract_usage",
    "classify_errors",
    "error_detail",
    "is_error_entry",
    "find_recent_tool_name",
    "resolve_activity",
    "resolve_git_branch",
]
