"""Configuration management for docs-client."""

import json
import os
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docs_client.utils import setup_logging

CONFIG_FILE_NAME = "docs-client.json"
ENV_PREFIX = "DOCS_CLIENT_"


class DocsClientConfig(BaseSettings):
    """Options that control how a document tree is laid out and listed."""

    index_file_name: str = Field(
        default="index.md",
        description="File name of the per-directory index document",
    )
    archive_directory_name: str = Field(
        default="_",
        description="Name of the subdirectory that holds archived siblings",
    )
    default_index_icon: str = Field(
        default="📃",
        description="Icon used when an index document does not declare one",
    )
    default_directory_name: str = Field(
        default="Directory",
        description="Placeholder title for directories without a name",
    )
    index_meta_includes: List[str] = Field(
        default_factory=list,
        description="Extra top-level index front-matter keys preserved on read and write",
    )
    directory_excludes: List[str] = Field(
        default_factory=lambda: [".vitepress"],
        description="Directory names hidden from every listing and tree",
    )
    meta_file_name: str = Field(
        default=".meta.json",
        description="Reserved per-directory metadata file, never listed",
    )

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        frozen=True,
    )

    @field_validator("index_file_name", "archive_directory_name", "meta_file_name")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"must be a single path segment, got {value!r}")
        return value

    def is_listed_directory_name(self, name: str) -> bool:
        """Whether a child entry name may appear in directory listings and trees."""
        return (
            name != self.archive_directory_name
            and name != self.meta_file_name
            and name not in self.directory_excludes
        )


class ConfigManager:
    """Loads docs-client configuration from a JSON file and the environment.

    Environment variables take precedence over file values.
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        if config_file is None:
            config_dir = os.getenv(f"{ENV_PREFIX}CONFIG_DIR")
            config_file = Path(config_dir or Path.cwd()) / CONFIG_FILE_NAME
        self.config_file = config_file

    def load_config(self) -> DocsClientConfig:
        if not self.config_file.exists():
            return DocsClientConfig()

        try:
            file_data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file {self.config_file}: {e}")
            raise SystemExit(
                f"Error: config file is not valid JSON: {self.config_file}\n"
                f"  {e}\n"
                f"Fix or delete the file and re-run."
            )

        env_dict = DocsClientConfig().model_dump()
        merged_data = dict(file_data)
        for field_name in DocsClientConfig.model_fields.keys():
            if f"{ENV_PREFIX}{field_name.upper()}" in os.environ:
                merged_data[field_name] = env_dict[field_name]

        return DocsClientConfig(**merged_data)

    def save_config(self, config: DocsClientConfig) -> None:
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(config.model_dump(), indent=2, ensure_ascii=False))


def init_logging(config: Optional[DocsClientConfig] = None) -> None:  # pragma: no cover
    """Initialize logging from configuration."""
    log_level = (config or DocsClientConfig()).log_level
    setup_logging(log_level=log_level)
