"""Tests for claude_statusline.utils.model_names."""

import pytest

from claude_statusline.utils.model_names import short_model_name


@pytest.mark.parametrize("model_id,expected", [
    ("claude-sonnet-4-20250514", "S4"),
    ("claude-opus-4.1", "O4.1"),
    ("claude-opus-4-20250514", "O4"),
    ("claude-haiku-3.5", "H3.5"),
    ("claude-opus-4-1-20250805", "O4"),
    ("claude-sonnet-4-5-20250929", "S4"),
    ("claude-3-5-sonnet-20241022", "S?"),
    ("Haiku 3", "H3"),
    ("gpt-4o", "GPT4"),
    ("", "?"),
    ("---", "?"),
])
def test_short_model_name(model_id, expected):
    assert short_model_name(model_id) == expected
