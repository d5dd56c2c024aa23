"""Tests for index file references."""

import pytest

from docs_client.entities import IndexEntity
from docs_client.exceptions import StorageError
from docs_client.references import IndexFileReference, RelationDirectoryReference
from docs_client.schema import FieldType
from docs_client.storage import MemoryStorage


class TestRead:
    @pytest.mark.asyncio
    async def test_read_existing_index(self, memory_storage, config):
        entity = await IndexFileReference("docs/guide/index.md", memory_storage, config).read()
        assert isinstance(entity, IndexEntity)
        assert entity.type == "index"
        assert entity.path.name == "guide"
        assert entity.content.title == "Guide"
        assert entity.content.description == "How to use the project."
        assert entity.content.meta.icon == "🧭"
        schema = entity.content.meta.index_schema
        assert schema.field_names == ["level", "author", "reviewers"]
        assert schema.field("level").options == ["beginner", "advanced"]
        assert schema.field("level").title == "Level"
        assert schema.field("author").required is False

    @pytest.mark.asyncio
    async def test_missing_index_is_synthesized(self, config):
        storage = MemoryStorage({"docs/a.md": "# A"})
        entity = await IndexFileReference("docs/index.md", storage, config).read()
        assert isinstance(entity, IndexEntity)
        assert entity.content.title == "docs"
        assert len(entity.content.meta.index_schema) == 0
        assert entity.content.meta.icon == "📁"

    @pytest.mark.asyncio
    async def test_missing_root_index_uses_default_directory_name(self, config):
        entity = await IndexFileReference("index.md", MemoryStorage(), config).read()
        assert entity.content.title == "Directory"
        assert entity.path.name == "Directory"

    @pytest.mark.asyncio
    async def test_index_without_front_matter_uses_default_icon(self, memory_storage, config):
        entity = await IndexFileReference("docs/api/index.md", memory_storage, config).read()
        assert entity.content.title == "API"
        assert entity.content.meta.icon == "📁"

    @pytest.mark.asyncio
    async def test_directory_meta_file_overrides(self, memory_storage, config):
        await memory_storage.write_file(
            "docs/api/.meta.json", '{"icon": "⚙️", "schema": {"version": {"type": "number"}}}'
        )
        entity = await IndexFileReference("docs/api/index.md", memory_storage, config).read()
        assert entity.content.meta.icon == "⚙️"
        assert entity.content.meta.index_schema.field("version").type == FieldType.NUMBER
        assert entity.content.title == "API"

    @pytest.mark.asyncio
    async def test_invalid_directory_meta_file_is_ignored(self, memory_storage, config):
        await memory_storage.write_file("docs/guide/.meta.json", "{broken")
        entity = await IndexFileReference("docs/guide/index.md", memory_storage, config).read()
        assert entity.content.meta.icon == "🧭"

    @pytest.mark.asyncio
    async def test_backend_failure_is_returned(self, failing_storage, config):
        storage = failing_storage("docs/guide/index.md")
        reference = IndexFileReference("docs/guide/index.md", storage, config)
        assert isinstance(await reference.read(), StorageError)
        assert len(await reference.read_schema()) == 0

    @pytest.mark.asyncio
    async def test_read_content(self, memory_storage, config):
        body = await IndexFileReference("docs/index.md", memory_storage, config).read_content()
        assert body == "# Documentation\n\nProject documentation."


class TestWrite:
    @pytest.mark.asyncio
    async def test_write_round_trip(self, memory_storage, config):
        reference = IndexFileReference("docs/guide/index.md", memory_storage, config)
        entity = await reference.read()
        assert await reference.write(entity.with_title("Handbook")) is None
        reread = await reference.read()
        assert reread.content.title == "Handbook"
        assert reread.content.meta.index_schema == entity.content.meta.index_schema
        text = await memory_storage.read_file("docs/guide/index.md")
        assert text.startswith("---\nicon: 🧭\nschema:\n")
        assert text.endswith("\n")

    @pytest.mark.asyncio
    async def test_write_default(self, config):
        storage = MemoryStorage()
        reference = IndexFileReference("notes/index.md", storage, config)
        assert await reference.write_default() is None
        entity = await reference.read()
        assert entity.content.title == "notes"
        assert entity.content.description == "Please describe the overview of notes here."

    @pytest.mark.asyncio
    async def test_write_content(self, memory_storage, config):
        reference = IndexFileReference("docs/index.md", memory_storage, config)
        assert await reference.write_content("# Replaced") is None
        assert (await reference.read()).content.title == "Replaced"

    def test_empty(self, memory_storage, config):
        entity = IndexFileReference("docs/guide/index.md", memory_storage, config).empty()
        assert entity.content.title == "guide"


class TestArchive:
    @pytest.mark.asyncio
    async def test_archive_and_restore(self, memory_storage, config):
        reference = IndexFileReference("docs/guide/index.md", memory_storage, config)
        archived = await reference.archive()
        assert archived.path == "docs/guide/_/index.md"
        assert (await archived.read()).is_archived
        assert (await archived.read()).path.name == "guide"
        restored = await archived.restore()
        assert restored.path == "docs/guide/index.md"
        assert await restored.exists()


class TestRelations:
    @pytest.mark.asyncio
    async def test_relation_directories(self, memory_storage, config):
        reference = IndexFileReference("docs/guide/index.md", memory_storage, config)
        relations = await reference.relations()
        assert all(isinstance(relation, RelationDirectoryReference) for relation in relations)
        assert [relation.path for relation in relations] == ["docs/authors", "docs/authors"]

    @pytest.mark.asyncio
    async def test_read_relations(self, memory_storage, config):
        relations = await IndexFileReference("docs/guide/index.md", memory_storage, config).read_relations()
        assert len(relations) == 2
        assert [file.label for file in relations[0].files] == ["Alice Smith", "bob"]

    @pytest.mark.asyncio
    async def test_no_relation_fields(self, memory_storage, config):
        assert await IndexFileReference("docs/api/index.md", memory_storage, config).relations() == []
