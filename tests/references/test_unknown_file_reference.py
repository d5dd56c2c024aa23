"""Tests for references to non-markdown files."""

import pytest

from docs_client.entities import UnknownEntity
from docs_client.exceptions import DocumentNotFoundError, InvalidPathError
from docs_client.references import UnknownFileReference


class TestUnknownFileReference:
    @pytest.mark.asyncio
    async def test_read(self, memory_storage, config):
        await memory_storage.write_file("docs/logo.svg", "<svg/>")
        entity = await UnknownFileReference("docs/logo.svg", memory_storage, config).read()
        assert isinstance(entity, UnknownEntity)
        assert entity.type == "unknown"
        assert entity.content == "<svg/>"
        assert entity.extension == "svg"
        assert entity.path.name == "logo"

    @pytest.mark.asyncio
    async def test_missing(self, memory_storage, config):
        result = await UnknownFileReference("docs/logo.svg", memory_storage, config).read()
        assert isinstance(result, DocumentNotFoundError)

    def test_markdown_paths_are_rejected(self, memory_storage, config):
        with pytest.raises(InvalidPathError):
            UnknownFileReference("docs/guide/advanced.md", memory_storage, config)

    def test_empty_defaults_extension(self, memory_storage, config):
        assert UnknownFileReference("docs/LICENSE", memory_storage, config).empty().extension == "txt"
        assert UnknownFileReference("docs/a.csv", memory_storage, config).empty().extension == "csv"

    @pytest.mark.asyncio
    async def test_write_and_archive(self, memory_storage, config):
        reference = UnknownFileReference("docs/data.csv", memory_storage, config)
        assert await reference.write_content("a,b") is None
        entity = await reference.read()
        assert await reference.write(entity.with_content("c,d")) is None
        archived = await reference.archive()
        archived_entity = await archived.read()
        assert archived_entity.is_archived
        assert archived_entity.content == "c,d"
