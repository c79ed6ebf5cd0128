"""Tests for configuration settings."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import Settings


class TestSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.default_run_count == 5
        assert settings.search_limit_minutes == 2 * 366 * 24 * 60
        assert settings.log_file == ""

    def test_environment_override(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CHRONOPEEK_DEFAULT_RUN_COUNT", "10")
        monkeypatch.setenv("CHRONOPEEK_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.default_run_count == 10
        assert settings.log_level == "DEBUG"
