"""Shared test fixtures for claude-statusline."""

import os
import sys
from pathlib import Path

import pytest

from helpers import write_transcript


@pytest.fixture(scope="session")
def qapp():
    """Create a QCoreApplication for tests that need Qt."""
    os.environ["QT_QPA_PLATFORM"] = "offscreen"
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv or ["test"])
    yield app


@pytest.fixture
def transcript_path(tmp_path) -> Path:
    """Path for a transcript inside a mock Claude projects directory."""
    project_dir = tmp_path / ".claude" / "projects" / "-home-wiz-projects-myapp"
    project_dir.mkdir(parents=True)
    return project_dir / "test-session.jsonl"


@pytest.fixture
def make_transcript(transcript_path):
    """Write the given lines (dicts or raw strings) as the transcript."""
    def _make(*lines) -> Path:
        return write_transcript(transcript_path, lines)
    return _make
