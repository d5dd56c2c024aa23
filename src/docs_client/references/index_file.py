"""Reference to a directory's index document."""

from dataclasses import dataclass
from typing import List, Optional, Union

from loguru import logger

from docs_client.entities.index_entity import IndexEntity
from docs_client.exceptions import DocsClientError, StorageError
from docs_client.references.base import BaseFileReference, resolve_relation_path
from docs_client.references.relation_directory import RelationDirectoryReference
from docs_client.schema.index_schema import IndexSchemaValue
from docs_client.utils import basename, join_path
from docs_client.values.directory_meta import DirectoryMetaValue
from docs_client.values.index_content import IndexContentValue
from docs_client.values.relation import Relation


@dataclass(frozen=True)
class IndexFileReference(BaseFileReference):
    """A directory's index is never missing, only not yet written: reading an
    absent index yields a placeholder document titled after the directory.
    """

    @property
    def directory_name(self) -> str:
        return basename(self.logical_directory_path) or self.config.default_directory_name

    @property
    def meta_file_path(self) -> str:
        return join_path(self.directory_path, self.config.meta_file_name)

    async def read_directory_meta(self) -> Optional[DirectoryMetaValue]:
        text = await self.storage.read_file(self.meta_file_path)
        if isinstance(text, StorageError):
            logger.warning(f"Could not read directory metadata {self.meta_file_path}: {text}")
            return None
        if text is None:
            return None
        return DirectoryMetaValue.from_json(text)

    async def read(self) -> Union[IndexEntity, StorageError]:
        text = await self.storage.read_file(self.path)
        if isinstance(text, StorageError):
            return text

        directory_meta = await self.read_directory_meta()
        if text is None:
            logger.debug(f"No index at {self.path}, using placeholder for '{self.directory_name}'")
            content = IndexContentValue.empty(self.directory_name, self.config)
            if directory_meta is not None:
                content = content.with_directory_meta(directory_meta)
        else:
            content = IndexContentValue.from_markdown(text, self.config, self.custom_schema, directory_meta)

        return IndexEntity(path=self.file_path, content=content, is_archived=self.is_archived)

    async def read_schema(self) -> IndexSchemaValue:
        """The persisted schema; empty when the index cannot be read."""
        entity = await self.read()
        if isinstance(entity, DocsClientError):
            logger.warning(f"Could not read schema from {self.path}: {entity}")
            return IndexSchemaValue.empty()
        return entity.content.meta.index_schema

    async def read_content(self) -> Union[str, StorageError]:
        entity = await self.read()
        if isinstance(entity, DocsClientError):
            return entity
        return entity.content.body

    def empty(self) -> IndexEntity:
        return IndexEntity(
            path=self.file_path,
            content=IndexContentValue.empty(self.directory_name, self.config),
            is_archived=self.is_archived,
        )

    async def write(self, entity: IndexEntity) -> Optional[StorageError]:
        logger.debug(f"Writing index {self.path}")
        return await self.storage.write_file(self.path, entity.to_text())

    async def write_content(self, text: str) -> Optional[StorageError]:
        return await self.storage.write_file(self.path, text)

    async def write_default(self) -> Optional[StorageError]:
        name = self.directory_name
        entity = self.empty().with_body(f"# {name}\n\nPlease describe the overview of {name} here.")
        return await self.write(entity)

    async def relations(self) -> List[RelationDirectoryReference]:
        """One relation-directory reference per relation field with a declared path."""
        index_schema = await self.read_schema()
        return [
            RelationDirectoryReference(
                resolve_relation_path(schema_field.path, self.logical_directory_path),
                self.storage,
                self.config,
            )
            for _, schema_field in index_schema.relation_fields()
            if schema_field.path
        ]

    async def read_relations(self) -> Union[List[Relation], StorageError]:
        relations = []
        for reference in await self.relations():
            relation = await reference.read()
            if isinstance(relation, StorageError):
                return relation
            relations.append(relation)
        return relations
