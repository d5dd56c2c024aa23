"""Tests for the DocsClient entry point."""

import pytest

from docs_client.client import DocsClient
from docs_client.config import DocsClientConfig
from docs_client.exceptions import StorageError
from docs_client.references import (
    DirectoryReference,
    IndexFileReference,
    MdFileReference,
    UnknownFileReference,
)
from docs_client.schema import define_schema, schema_field


@pytest.fixture
def client(memory_storage, config, guide_schema):
    return DocsClient(memory_storage, config, guide_schema)


def test_default_config(memory_storage):
    client = DocsClient(memory_storage)
    assert client.config == DocsClientConfig()
    assert client.custom_schema == {}


def test_file_is_classified(client):
    assert isinstance(client.file("docs/index.md"), IndexFileReference)
    assert isinstance(client.file("docs/guide/advanced.md"), MdFileReference)
    assert isinstance(client.file("docs/logo.png"), UnknownFileReference)


def test_references_share_schema(client, guide_schema):
    assert client.md_file("docs/guide/advanced.md").custom_schema == guide_schema
    assert client.directory("docs/guide").custom_schema == guide_schema
    other = define_schema({"tag": schema_field("text")})
    assert client.md_file("docs/a.md", other).custom_schema == other


def test_index_file(client):
    assert client.index_file("docs/guide").path == "docs/guide/index.md"
    assert client.index_file().path == "index.md"
    assert isinstance(client.directory(), DirectoryReference)


@pytest.mark.asyncio
async def test_read_through_client(client):
    entity = await client.md_file("docs/guide/getting-started.md").read()
    assert entity.content.meta.field("level") == "beginner"


@pytest.mark.asyncio
async def test_trees(client):
    nodes = await client.file_tree("docs")
    assert [node.name for node in nodes] == ["api", "authors", "guide", "index.md"]
    directories = await client.directory_tree()
    assert [node.name for node in directories] == ["docs"]


@pytest.mark.asyncio
async def test_tree_errors_are_raised(client):
    with pytest.raises(StorageError):
        await client.file_tree("missing")
    with pytest.raises(StorageError):
        await client.directory_tree("missing")
