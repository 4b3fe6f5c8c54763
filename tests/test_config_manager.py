"""Tests for claude_statusline.services.config_manager."""

import pytest

from claude_statusline.services.config_manager import DEFAULTS, ConfigManager
from claude_statusline.types.config import EngineConfig


@pytest.fixture
def config(qapp, tmp_path):
    """Create a ConfigManager backed by an isolated ini file."""
    from PySide6.QtCore import QSettings
    settings = QSettings(str(tmp_path / "statusline.ini"), QSettings.Format.IniFormat)
    return ConfigManager(settings=settings)


# ---------------------------------------------------------------------------
# 1. Defaults
# ---------------------------------------------------------------------------

def test_defaults(config):
    assert config.get_int("tokens/contextWindow") == 200_000
    assert config.get_int("advanced/recentErrorCount") == DEFAULTS["advanced/recentErrorCount"]
    assert config.get_bool("advanced/cacheEnabled") is True
    assert config.get_string("display/separator") == " | "


def test_default_engine_config(config):
    assert config.engine_config() == EngineConfig()


# ---------------------------------------------------------------------------
# 2. Set and get
# ---------------------------------------------------------------------------

def test_set_get_int(config):
    config.set_int("advanced/recentErrorCount", 12)
    assert config.get_int("advanced/recentErrorCount") == 12


def test_set_get_bool(config):
    config.set_bool("status/showRecentErrors", False)
    assert config.get_bool("status/showRecentErrors") is False


def test_set_get_string(config):
    config.set_string("display/separator", " ~ ")
    assert config.get_string("display/separator") == " ~ "


def test_invalid_int_falls_back_to_default(config):
    config.set_string("tokens/contextWindow", "lots")
    assert config.get_int("tokens/contextWindow") == 200_000


def test_values_persist_across_instances(qapp, tmp_path):
    from PySide6.QtCore import QSettings
    path = str(tmp_path / "persist.ini")
    first = ConfigManager(settings=QSettings(path, QSettings.Format.IniFormat))
    first.set_bool("advanced/cacheEnabled", False)
    first.set_int("tokens/contextWindow", 1_000_000)
    first._settings.sync()

    second = ConfigManager(settings=QSettings(path, QSettings.Format.IniFormat))
    assert second.get_bool("advanced/cacheEnabled") is False
    assert second.get_int("tokens/contextWindow") == 1_000_000


# ---------------------------------------------------------------------------
# 3. Engine config
# ---------------------------------------------------------------------------

def test_engine_config_reflects_settings(config):
    config.set_int("tokens/contextWindow", 1_000_000)
    config.set_int("advanced/recentErrorCount", 20)
    config.set_bool("advanced/cacheEnabled", False)
    assert config.engine_config() == EngineConfig(
        context_window=1_000_000,
        recent_error_count=20,
        cache_enabled=False,
    )


def test_engine_config_clamps_bad_values(config):
    config.set_int("tokens/contextWindow", 0)
    config.set_int("advanced/recentErrorCount", -3)
    engine = config.engine_config()
    assert engine.context_window == 200_000
    assert engine.recent_error_count == 1


# ---------------------------------------------------------------------------
# 4. Settings changed signal
# ---------------------------------------------------------------------------

def test_settings_changed_signal(config):
    """settings_changed emits the key that was changed."""
    keys = []
    config.settings_changed.connect(lambda k: keys.append(k))
    config.set_int("advanced/recentErrorCount", 8)
    config.set_bool("advanced/cacheEnabled", True)
    assert keys == ["advanced/recentErrorCount", "advanced/cacheEnabled"]
