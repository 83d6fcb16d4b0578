"""
Unit tests for skill_matcher/utils/config.py
"""

import json

import pytest

from skill_matcher.utils.config import Config, merge_settings


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "nested" / "config.json"


class TestMergeSettings:
    """Tests for layering file settings over defaults."""

    def test_nested_sections_merged(self):
        """Nested dicts are merged; scalars and new keys override."""
        defaults = {"a": {"x": 1, "y": 2}, "b": 3}
        merged = merge_settings(defaults, {"a": {"y": 5}, "c": 4})

        assert merged == {"a": {"x": 1, "y": 5}, "b": 3, "c": 4}
        assert defaults == {"a": {"x": 1, "y": 2}, "b": 3}


class TestConfig:
    """Tests for Config."""

    def test_defaults(self, config_path):
        """Should fall back to built-in defaults."""
        config = Config(str(config_path))

        assert config.get("enhancer.timeout") == 5.0
        assert config.get("extraction.fallback_limit") == 15
        assert config.get("recommendations.min_score") == 20
        assert config.get("missing.key", "x") == "x"

    def test_default_path_under_home(self, tmp_path):
        """Default file lives in ~/.skill_matcher."""
        assert Config().config_path == tmp_path / ".skill_matcher" / "config.json"

    def test_save_and_reload(self, config_path):
        """Saved values survive a reload and merge over defaults."""
        config = Config(str(config_path))
        config.set("recommendations.min_score", 35)
        config.save()

        reloaded = Config(str(config_path))
        assert reloaded.get("recommendations.min_score") == 35
        assert reloaded.get("recommendations.default_limit") == 10

    def test_partial_file_merged(self, config_path):
        """A file with only some keys keeps the other defaults."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"enhancer": {"model": "custom"}}))

        config = Config(str(config_path))
        assert config.get("enhancer.model") == "custom"
        assert config.get("enhancer.timeout") == 5.0

    def test_set_does_not_touch_class_defaults(self, config_path):
        """Defaults are copied, not shared."""
        Config(str(config_path)).set("enhancer.timeout", 1.0)
        assert Config.DEFAULT_CONFIG["enhancer"]["timeout"] == 5.0

    def test_environment_key_wins(self, config_path, monkeypatch):
        """ANTHROPIC_API_KEY overrides the file."""
        config = Config(str(config_path))
        config.set("api_keys.anthropic", "from-file")
        assert config.get_api_key("anthropic") == "from-file"

        monkeypatch.setenv("ANTHROPIC_API_KEY", "from-env")
        assert config.get_api_key("anthropic") == "from-env"

    def test_set_api_key_saves(self, config_path):
        """Should persist the key."""
        Config(str(config_path)).set_api_key("anthropic", "sk-ant-1234567890")
        assert json.loads(config_path.read_text())["api_keys"]["anthropic"] == "sk-ant-1234567890"

    def test_masked(self, config_path):
        """Secrets are masked; other settings are not."""
        config = Config(str(config_path))
        config.set("api_keys.anthropic", "sk-ant-1234567890")

        masked = config.masked()
        assert masked["api_keys"]["anthropic"] == "sk-a...7890"
        assert masked["enhancer"]["max_tokens"] == 500
        assert Config(str(config_path)).masked()["api_keys"]["anthropic"] == "(not set)"
