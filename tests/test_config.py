"""
Tests for configuration loading
"""

import pytest

from blogindex.config import CONFIG_ENV_VAR, Config, ConfigModel, load_config, save_config
from blogindex.errors import ConfigError


class TestConfig:
    """Tests for the Config manager"""

    def test_defaults_without_file(self, tmp_path):
        config = Config(tmp_path / "blogindex.yaml")

        assert config.config == ConfigModel()
        assert config.articles_root == tmp_path / "articles"
        assert config.output_path == tmp_path / "public" / "js" / "api" / "article-data.js"

    def test_relative_paths_resolve_against_config_dir(self, tmp_path):
        path = tmp_path / "site" / "blogindex.yaml"
        path.parent.mkdir()
        path.write_text("articles_root: content/posts\noutput:\n  path: dist/index.json\n  format: json\n", encoding="utf-8")

        config = Config(path)

        assert config.articles_root == tmp_path / "site" / "content" / "posts"
        assert config.output_path == tmp_path / "site" / "dist" / "index.json"
        assert config.config.output.format == "json"

    def test_absolute_paths_kept(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        path.write_text(f"articles_root: {tmp_path / 'elsewhere'}\n", encoding="utf-8")
        assert Config(path).articles_root == tmp_path / "elsewhere"

    def test_env_var_selects_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert Config().config_path == path

    def test_round_trip_with_save(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        model = ConfigModel(articles_root="posts")
        save_config(model, path)

        assert load_config(path) == model


class TestLoadConfigErrors:
    """Tests for invalid configuration files"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        path.write_text("articles_root: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        path.write_text("extension: md\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_variable_name(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        path.write_text("output:\n  variable_name: all-articles\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_empty_file_is_defaults(self, tmp_path):
        path = tmp_path / "blogindex.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == ConfigModel()
