"""Common test fixtures."""

from textwrap import dedent

import pytest

from docs_client.config import DocsClientConfig
from docs_client.exceptions import StorageError
from docs_client.schema import define_schema, schema_field
from docs_client.storage.local import LocalStorage
from docs_client.storage.memory import MemoryStorage


SAMPLE_FILES = {
    "docs/index.md": dedent("""\
        ---
        icon: 📚
        schema: {}
        ---

        # Documentation

        Project documentation.
        """),
    "docs/guide/index.md": dedent("""\
        ---
        icon: 🧭
        schema:
          level:
            type: select-text
            required: true
            title: Level
            options:
              - beginner
              - advanced
          author:
            type: relation
            path: ../authors
          reviewers:
            type: multi-relation
            path: ../authors
        ---

        # Guide

        How to use the project.
        """),
    "docs/guide/getting-started.md": dedent("""\
        ---
        level: beginner
        author: alice
        reviewers:
          - alice
          - bob
        ---

        # Getting Started

        First steps with the project.
        """),
    "docs/guide/advanced.md": dedent("""\
        ---
        level: advanced
        ---

        # Advanced

        Deep dive.
        """),
    "docs/api/index.md": "# API\n\nEndpoint reference.\n",
    "docs/api/reference.md": "# Reference\n\nAll endpoints.\n",
    "docs/authors/alice.md": "# Alice Smith\n\nMaintainer.\n",
    "docs/authors/bob.md": "Bob has no heading.\n",
}


@pytest.fixture
def config() -> DocsClientConfig:
    """Configuration with a recognisable default icon."""
    return DocsClientConfig(default_index_icon="📁")


@pytest.fixture
def guide_schema():
    return define_schema(
        {
            "level": schema_field("select-text", required=True),
            "author": schema_field("relation", path="../authors"),
            "reviewers": schema_field("multi-relation", path="../authors"),
        }
    )


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """In-memory storage seeded with the sample documentation tree."""
    return MemoryStorage(SAMPLE_FILES)


@pytest.fixture
def local_storage(tmp_path) -> LocalStorage:
    """Local storage rooted at a temporary directory holding the sample tree."""
    for path, content in SAMPLE_FILES.items():
        file_path = tmp_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    return LocalStorage(tmp_path)


class FailingStorage(MemoryStorage):
    """Memory storage whose reads fail for selected paths."""

    def __init__(self, files, failing_paths):
        super().__init__(files)
        self.failing_paths = set(failing_paths)

    async def read_file(self, path):
        if path in self.failing_paths:
            return StorageError(f"Simulated read failure: {path}", path)
        return await super().read_file(path)


@pytest.fixture
def failing_storage():
    """Factory for a storage seeded with the sample tree that fails to read the given paths."""

    def factory(*failing_paths, extra_files=None):
        return FailingStorage({**SAMPLE_FILES, **(extra_files or {})}, failing_paths)

    return factory
