"""
Tests for configuration loading.
"""

import json

import pytest
import yaml

from cogcomplexity.core.config import DEFAULT_CONFIG, Config, create_default_config, find_config


class TestConfig:
    """Tests for the Config class."""

    def test_defaults(self):
        """No path gives the default configuration."""
        config = Config.load(None)
        assert config.languages() == {"typescript", "tsx", "javascript"}
        assert "node_modules" in config.ignore_dirs()
        assert config.max_workers() == 4
        assert config.fail_above() is None
        assert config.server()["port"] == 5555

    def test_yaml_overrides_are_merged(self, tmp_path):
        """YAML values override defaults without dropping siblings."""
        path = tmp_path / "config.yaml"
        path.write_text("scan:\n  max_workers: 2\nreporting:\n  fail_above: 15\n")
        config = Config.load(str(path))
        assert config.max_workers() == 2
        assert config.fail_above() == 15
        assert "node_modules" in config.ignore_dirs()
        assert config.reporting()["format"] == "text"

    def test_json_config(self, tmp_path):
        """JSON configuration files are supported."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"languages": {"enabled": ["javascript"]}}))
        assert Config.load(str(path)).languages() == {"javascript"}

    def test_empty_yaml(self, tmp_path):
        """An empty file means defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.load(str(path)).data == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        """A missing explicit config file is an error."""
        with pytest.raises(FileNotFoundError):
            Config.load(str(tmp_path / "absent.yaml"))

    def test_not_a_mapping(self, tmp_path):
        """A config file must hold a mapping."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            Config.load(str(path))

    def test_workers_at_least_one(self):
        """max_workers never drops below one."""
        config = Config.load(None).with_overrides({"scan": {"max_workers": 0}})
        assert config.max_workers() == 1

    def test_defaults_not_mutated(self):
        """Overrides leave the defaults untouched."""
        Config.load(None).with_overrides({"scan": {"max_workers": 9}})
        assert DEFAULT_CONFIG["scan"]["max_workers"] == 4


class TestFindConfig:
    """Tests for config file discovery."""

    def test_found_in_parent(self, tmp_path):
        """Config files are found by walking up from the target."""
        (tmp_path / ".cogcomplexity.yml").write_text("version: 1\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(str(nested)) == str((tmp_path / ".cogcomplexity.yml").resolve())

    def test_start_from_file(self, tmp_path):
        """A file target searches from its directory."""
        (tmp_path / ".cogcomplexity.json").write_text("{}")
        source = tmp_path / "app.ts"
        source.write_text("")
        assert find_config(str(source)) == str((tmp_path / ".cogcomplexity.json").resolve())

    def test_default_config_content(self):
        """The generated default config loads back to the defaults."""
        data = yaml.safe_load(create_default_config())
        assert data["languages"]["enabled"] == ["typescript", "tsx", "javascript"]
        assert data["server"]["host"] == "127.0.0.1"
        assert data["reporting"]["fail_above"] is None
