"""Tests for settings loading."""

import pytest
from depgraph_view.config import load_settings
from depgraph_view.config.manager import deep_merge
from depgraph_view.utils.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep user and project config out of the tests."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    return tmp_path


class TestLoadSettings:
    """Test layered settings."""
    
    def test_defaults(self):
        settings = load_settings()
        
        assert settings["actor"] is None
        assert settings["plugins"]["installed"] == ["parameterized-trigger", "copyartifact"]
        assert settings["logging"]["level"] == "WARNING"
        assert settings["output"]["ascii"] is False
    
    def test_project_config_overrides(self, isolated_home):
        config_dir = isolated_home / "work" / ".depgraph"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("actor: alice\nplugins:\n  installed: []\n")
        
        settings = load_settings()
        assert settings["actor"] == "alice"
        assert settings["plugins"]["installed"] == []
        assert settings["logging"]["level"] == "WARNING"
    
    def test_user_config_then_project_config(self, isolated_home):
        user_dir = isolated_home / "home" / ".depgraph"
        user_dir.mkdir()
        (user_dir / "config.yaml").write_text("actor: bob\noutput:\n  ascii: true\n")
        project_dir = isolated_home / "work" / ".depgraph"
        project_dir.mkdir()
        (project_dir / "config.yaml").write_text("actor: alice\n")
        
        settings = load_settings()
        assert settings["actor"] == "alice"
        assert settings["output"]["ascii"] is True
    
    def test_explicit_config_path(self, tmp_path):
        path = tmp_path / "extra.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        
        settings = load_settings(str(path))
        assert settings["logging"]["level"] == "DEBUG"
    
    def test_missing_explicit_config(self):
        with pytest.raises(ConfigError, match="Config file not found"):
            load_settings("does-not-exist.yaml")
    
    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("plugins: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(str(path))
    
    def test_invalid_types(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("plugins:\n  installed: copyartifact\nactor: 3\n")
        with pytest.raises(ConfigError, match="plugins.installed is not a list"):
            load_settings(str(path))


class TestDeepMerge:
    def test_nested_merge(self):
        base = {"a": {"b": 1, "c": 2}, "d": 1}
        deep_merge(base, {"a": {"c": 3}, "e": 4})
        assert base == {"a": {"b": 1, "c": 3}, "d": 1, "e": 4}
