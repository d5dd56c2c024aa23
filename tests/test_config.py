"""Test configuration management."""

import json

import pytest
from pydantic import ValidationError

from docs_client.config import CONFIG_FILE_NAME, ConfigManager, DocsClientConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the developer's shell out of these tests."""
    for name in (
        "DOCS_CLIENT_CONFIG_DIR",
        "DOCS_CLIENT_DEFAULT_INDEX_ICON",
        "DOCS_CLIENT_DIRECTORY_EXCLUDES",
        "DOCS_CLIENT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDocsClientConfig:
    def test_defaults(self):
        config = DocsClientConfig()
        assert config.index_file_name == "index.md"
        assert config.archive_directory_name == "_"
        assert config.default_index_icon == "📃"
        assert config.default_directory_name == "Directory"
        assert config.index_meta_includes == []
        assert config.directory_excludes == [".vitepress"]
        assert config.meta_file_name == ".meta.json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DOCS_CLIENT_DEFAULT_INDEX_ICON", "🗂️")
        monkeypatch.setenv("DOCS_CLIENT_DIRECTORY_EXCLUDES", '["node_modules", ".git"]')
        config = DocsClientConfig()
        assert config.default_index_icon == "🗂️"
        assert config.directory_excludes == ["node_modules", ".git"]

    @pytest.mark.parametrize("value", ["", "a/b", "a\\b"])
    def test_names_must_be_single_segments(self, value):
        with pytest.raises(ValidationError):
            DocsClientConfig(archive_directory_name=value)

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            DocsClientConfig().index_file_name = "README.md"

    def test_listed_directory_names(self):
        config = DocsClientConfig(directory_excludes=["build"])
        assert config.is_listed_directory_name("guide")
        assert not config.is_listed_directory_name("_")
        assert not config.is_listed_directory_name(".meta.json")
        assert not config.is_listed_directory_name("build")
        assert config.is_listed_directory_name(".vitepress")


class TestConfigManager:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = ConfigManager(tmp_path / CONFIG_FILE_NAME).load_config()
        assert config == DocsClientConfig()

    def test_config_dir_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCS_CLIENT_CONFIG_DIR", str(tmp_path))
        assert ConfigManager().config_file == tmp_path / CONFIG_FILE_NAME

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"archive_directory_name": "archive", "unknown": 1}))
        config = ConfigManager(config_file).load_config()
        assert config.archive_directory_name == "archive"
        assert config.index_file_name == "index.md"

    def test_environment_beats_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"default_index_icon": "📘"}))
        monkeypatch.setenv("DOCS_CLIENT_DEFAULT_INDEX_ICON", "📗")
        assert ConfigManager(config_file).load_config().default_index_icon == "📗"

    def test_invalid_json_exits(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{not json")
        with pytest.raises(SystemExit) as exc_info:
            ConfigManager(config_file).load_config()
        assert "not valid JSON" in str(exc_info.value)

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager(tmp_path / "nested" / CONFIG_FILE_NAME)
        config = DocsClientConfig(index_meta_includes=["order"], default_index_icon="📒")
        manager.save_config(config)
        assert manager.load_config() == config
