import pytest

from docs_client.exceptions import StorageError
from docs_client.references import RelationDirectoryReference
from docs_client.values import RelationFile


@pytest.fixture
def authors(memory_storage, config):
    return RelationDirectoryReference("docs/authors", memory_storage, config)


@pytest.mark.asyncio
async def test_read(authors):
    relation = await authors.read()
    assert relation.path == "docs/authors"
    assert relation.files == [
        RelationFile(name="alice", label="Alice Smith"),
        RelationFile(name="bob", label="bob"),
    ]


@pytest.mark.asyncio
async def test_index_and_other_files_are_skipped(memory_storage, authors):
    await memory_storage.write_file("docs/authors/index.md", "# Authors")
    await memory_storage.write_file("docs/authors/photo.png", "binary")
    assert await authors.read_slugs() == ["alice", "bob"]


@pytest.mark.asyncio
async def test_missing_directory_is_empty(memory_storage, config):
    reference = RelationDirectoryReference("docs/people", memory_storage, config)
    assert await reference.read_files() == []
    assert await reference.is_empty() is True


@pytest.mark.asyncio
async def test_exists_and_count(authors):
    assert await authors.exists("alice")
    assert not await authors.exists("carol")
    assert await authors.count() == 2
    assert await authors.is_empty() is False


@pytest.mark.asyncio
async def test_read_failure_is_returned(failing_storage, config):
    storage = failing_storage("docs/authors/bob.md")
    reference = RelationDirectoryReference("docs/authors", storage, config)
    assert isinstance(await reference.read(), StorageError)
    assert isinstance(await reference.count(), StorageError)
