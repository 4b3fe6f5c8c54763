"""Integration tests for the application entry point."""

import io
import json

import pytest

from claude_statusline import app
from claude_statusline.services.config_manager import ConfigManager
from claude_statusline.services.transcript_cache import TranscriptCache

from helpers import assistant_entry, tool_result_entry, tool_use_entry, usage, user_entry, write_transcript


@pytest.fixture
def config(qapp, tmp_path):
    from PySide6.QtCore import QSettings
    return ConfigManager(settings=QSettings(str(tmp_path / "app.ini"), QSettings.Format.IniFormat))


@pytest.fixture
def project_dir(tmp_path):
    project = tmp_path / "myapp"
    (project / ".git").mkdir(parents=True)
    (project / ".git" / "HEAD").write_text("ref: refs/heads/feature/status\n")
    return project


def _payload(transcript_path, project_dir, model_id="claude-sonnet-4-20250514") -> str:
    return json.dumps({
        "session_id": "abc",
        "transcript_path": str(transcript_path),
        "cwd": str(project_dir),
        "model": {"id": model_id, "display_name": "Sonnet 4"},
        "workspace": {"current_dir": str(project_dir), "project_dir": str(project_dir)},
    })


class TestRenderOnce:
    def test_full_line(self, config, transcript_path, project_dir):
        write_transcript(transcript_path, [user_entry(), assistant_entry(usage_obj=usage(1000, 0, 0, 500))])
        line = app.render_once(_payload(transcript_path, project_dir), config)
        assert line == "myapp | S4 | feature/status | 0.8% (1.5k/200k) | Ready"

    def test_tool_in_progress(self, config, transcript_path, project_dir):
        write_transcript(transcript_path, [user_entry(), tool_use_entry("Bash")])
        line = app.render_once(_payload(transcript_path, project_dir), config)
        assert line.endswith("| Tool Bash")

    def test_recent_error_annotation_can_be_disabled(self, config, transcript_path, project_dir):
        write_transcript(transcript_path, [
            tool_use_entry("Bash"),
            tool_result_entry("Exit code 1", is_error=True),
            assistant_entry(),
        ])
        payload = _payload(transcript_path, project_dir)
        assert app.render_once(payload, config).endswith("| Ready (recent error)")
        config.set_bool("status/showRecentErrors", False)
        assert app.render_once(payload, config).endswith("| Ready")

    def test_missing_transcript(self, config, tmp_path, project_dir):
        line = app.render_once(_payload(tmp_path / "missing.jsonl", project_dir), config)
        assert line.endswith("| 0.0% (0/200k) | Ready")

    def test_invalid_payload(self, config):
        assert app.render_once("{not json", config) == app.PARSE_ERROR_LINE

    def test_shared_cache_is_reused(self, config, transcript_path, project_dir):
        write_transcript(transcript_path, [user_entry(), assistant_entry()])
        cache = TranscriptCache(config.engine_config())
        payload = _payload(transcript_path, project_dir)
        first = app.render_once(payload, config, cache)
        second = app.render_once(payload, config, cache)
        assert first == second
        assert cache.read_count == 1


class TestRun:
    def test_run_prints_one_line(self, config, transcript_path, project_dir, monkeypatch, capsys):
        write_transcript(transcript_path, [user_entry("question")])
        monkeypatch.setattr(app, "ConfigManager", lambda: config)
        monkeypatch.setattr("sys.stdin", io.StringIO(_payload(transcript_path, project_dir)))

        assert app.run([]) == 0
        out = capsys.readouterr().out
        assert out == "myapp | S4 | feature/status | 0.0% (0/200k) | Thinking\n"

    def test_run_with_garbage_input_still_exits_cleanly(self, config, monkeypatch, capsys):
        monkeypatch.setattr(app, "ConfigManager", lambda: config)
        monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2, 3]"))

        assert app.run([]) == 0
        assert capsys.readouterr().out.strip() == app.PARSE_ERROR_LINE
