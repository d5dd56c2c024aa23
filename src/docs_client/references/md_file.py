"""Reference to a markdown document."""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from loguru import logger

from docs_client.entities.md_entity import MdEntity
from docs_client.exceptions import DocsClientError, DocumentNotFoundError, StorageError
from docs_client.references.base import BaseFileReference, resolve_relation_path
from docs_client.references.index_file import IndexFileReference
from docs_client.schema.custom_schema import CustomSchema
from docs_client.schema.field_types import FieldType
from docs_client.utils import join_path, stem
from docs_client.values.md_content import MdContentValue
from docs_client.values.md_meta import MdMetaValue


@dataclass(frozen=True)
class MdFileReference(BaseFileReference):
    @property
    def name(self) -> str:
        return stem(self.path)

    def _entity(self, path: str, text: str, is_archived: bool) -> MdEntity:
        return MdEntity(
            path=self._file_path(path),
            content=MdContentValue.from_markdown(text, self.custom_schema),
            is_archived=is_archived,
        )

    async def read(self) -> Union[MdEntity, DocumentNotFoundError, StorageError]:
        """Read the document, falling back to its archived location."""
        text = await self.storage.read_file(self.path)
        if isinstance(text, StorageError):
            return text
        if text is not None:
            logger.debug(f"Read markdown document {self.path}")
            return self._entity(self.path, text, self.is_archived)

        if self.is_archived:
            return DocumentNotFoundError(self.path)

        archived_text = await self.storage.read_file(self.archived_path)
        if isinstance(archived_text, StorageError):
            return archived_text
        if archived_text is None:
            return DocumentNotFoundError(self.path)

        logger.debug(f"Read archived markdown document {self.archived_path}")
        return self._entity(self.archived_path, archived_text, True)

    async def read_text(self) -> Union[str, DocumentNotFoundError, StorageError]:
        text = await self.storage.read_file(self.path)
        if text is None:
            return DocumentNotFoundError(self.path)
        return text

    async def exists(self) -> bool:
        if await self.storage.is_file(self.path):
            return True
        return not self.is_archived and await self.storage.is_file(self.archived_path)

    def empty(self) -> MdEntity:
        return MdEntity(
            path=self.file_path,
            content=MdContentValue.empty(self.name, self.custom_schema),
            is_archived=self.is_archived,
        )

    async def write(self, entity: MdEntity) -> Optional[StorageError]:
        logger.debug(f"Writing markdown document {self.path}")
        return await self.storage.write_file(self.path, entity.to_text())

    async def write_text(self, text: str) -> Optional[StorageError]:
        return await self.storage.write_file(self.path, text)

    async def write_default(self) -> Optional[StorageError]:
        entity = self.empty().with_body(f"# {self.name}\n\nWrite your content here.")
        return await self.write(entity)

    async def read_front_matter(self) -> Union[MdMetaValue, DocumentNotFoundError, StorageError]:
        entity = await self.read()
        if isinstance(entity, DocsClientError):
            return entity
        return entity.content.meta

    async def update_front_matter(self, key: str, value: Any) -> Optional[DocsClientError]:
        """Set one front-matter value and write the document back to its current location."""
        entity = await self.read()
        if isinstance(entity, DocsClientError):
            return entity
        updated = entity.with_meta_property(key, value)
        return await self.storage.write_file(updated.path.path, updated.to_text())

    async def directory_index(self) -> Optional[IndexFileReference]:
        """The index of this document's directory, or of its archive, if either exists."""
        index_file_name = self.config.index_file_name
        candidates = [
            join_path(self.logical_directory_path, index_file_name),
            join_path(self.logical_directory_path, self.config.archive_directory_name, index_file_name),
        ]
        for candidate in candidates:
            if await self.storage.is_file(candidate):
                return IndexFileReference(candidate, self.storage, self.config, self.custom_schema)
        return None

    async def _relation_definition(self, key: str) -> Optional[Tuple[FieldType, str]]:
        """Declared type and resolved directory of a relation field.

        The directory index's schema wins over the custom schema. Fields that are
        undeclared, not relations, or have no path yield None.
        """
        field_type: Optional[FieldType] = None
        relation_path: Optional[str] = None

        index = await self.directory_index()
        if index is not None:
            index_schema = await index.read_schema()
            if key in index_schema:
                field_type = index_schema.field(key).type
                relation_path = index_schema.field(key).path

        if field_type is None and key in self.custom_schema:
            definition = self.custom_schema[key]
            field_type = definition.type
            relation_path = definition.path

        if field_type is None or not field_type.is_relation:
            logger.debug(f"Field '{key}' of {self.path} is not a relation field")
            return None
        if not relation_path:
            logger.warning(f"No relation path declared for field '{key}' of {self.path}")
            return None
        return field_type, resolve_relation_path(relation_path, self.logical_directory_path)

    async def _relation_value(self, key: str) -> Any:
        entity = await self.read()
        if isinstance(entity, DocsClientError):
            logger.debug(f"Cannot resolve relation '{key}' of {self.path}: {entity}")
            return None
        return entity.content.meta.values.get(key)

    def _target(self, directory: str, slug: str, target_schema: Optional[CustomSchema]) -> "MdFileReference":
        return MdFileReference(join_path(directory, f"{slug}.md"), self.storage, self.config, target_schema or {})

    async def relation(
        self, key: str, target_schema: Optional[CustomSchema] = None
    ) -> Optional["MdFileReference"]:
        """Reference to the document named by a ``relation`` field, or None.

        Fields of any other type, including ``multi-relation``, yield None.
        """
        value = await self._relation_value(key)
        if not isinstance(value, str) or not value:
            return None
        definition = await self._relation_definition(key)
        if definition is None or definition[0] != FieldType.RELATION:
            return None
        return self._target(definition[1], value, target_schema)

    async def relations(
        self, key: str, target_schema: Optional[CustomSchema] = None
    ) -> List["MdFileReference"]:
        """References for every entry of a ``multi-relation`` field. Non-string entries are skipped."""
        values = await self._relation_value(key)
        if not isinstance(values, list) or not values:
            return []
        definition = await self._relation_definition(key)
        if definition is None or definition[0] != FieldType.MULTI_RELATION:
            return []
        return [
            self._target(definition[1], value, target_schema)
            for value in values
            if isinstance(value, str) and value
        ]
