"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from linkpreview.config import DEFAULT_TIMEOUT, PreviewConfig, load_config


class TestPreviewConfig:
    """Test cases for PreviewConfig."""

    def test_default_config(self):
        config = PreviewConfig()

        assert config.timeout == DEFAULT_TIMEOUT == 120
        assert config.max_redirects == 5
        assert config.allow_private_hosts is False
        assert config.log_level == "INFO"
        assert config.log_dir is None

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            PreviewConfig(timeout=0)

        with pytest.raises(ValidationError):
            PreviewConfig(timeout=-5)

    def test_invalid_max_redirects(self):
        with pytest.raises(ValidationError):
            PreviewConfig(max_redirects=-1)

    def test_log_level_validation(self):
        assert PreviewConfig(log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValidationError):
            PreviewConfig(log_level="verbose")

    def test_headers(self):
        config = PreviewConfig(user_agent="bot/1.0")
        assert config.headers() == {"User-Agent": "bot/1.0"}


class TestLoadConfig:
    """Test cases for loading YAML configuration files."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "preview:\n"
            "  timeout: 30\n"
            "  user_agent: test-agent\n"
            "  allow_private_hosts: true\n"
            "  log_level: warning\n"
        )

        config = load_config(path)

        assert config.timeout == 30
        assert config.user_agent == "test-agent"
        assert config.allow_private_hosts is True
        assert config.log_level == "WARNING"

    def test_load_empty_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == PreviewConfig()

    def test_load_invalid_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("preview:\n  timeout: 0\n")

        with pytest.raises(ValidationError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")
