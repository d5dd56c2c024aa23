"""Reference to a directory of documents."""

import uuid
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import List, Optional, Union

from loguru import logger

from docs_client.config import DocsClientConfig
from docs_client.entities import Document
from docs_client.entities.index_entity import IndexEntity
from docs_client.entities.md_entity import MdEntity
from docs_client.entities.unknown_entity import UnknownEntity
from docs_client.exceptions import DocsClientError, StorageError
from docs_client.references.file_type import detect_file_type
from docs_client.references.index_file import IndexFileReference
from docs_client.references.md_file import MdFileReference
from docs_client.references.unknown_file import UnknownFileReference
from docs_client.schema.custom_schema import CustomSchema
from docs_client.storage.base import StorageBackend
from docs_client.utils import basename, dirname, join_path, normalize_path
from docs_client.values.paths import DirectoryPath

FileReference = Union[IndexFileReference, MdFileReference, UnknownFileReference]
ContentFileReference = Union[MdFileReference, UnknownFileReference]


@dataclass(frozen=True)
class DirectoryReference:
    """A lazy handle on a directory.

    Listings hide the archive directory, configured excludes and the metadata
    file. File listings cover the directory's own files first, then the files
    in its archive subdirectory, never the index. Listing and reading stop at
    the first backend error and return it.
    """

    path: str
    storage: StorageBackend
    config: DocsClientConfig = dataclass_field(default_factory=DocsClientConfig)
    custom_schema: CustomSchema = dataclass_field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    @property
    def name(self) -> str:
        return basename(self.path)

    @property
    def full_path(self) -> str:
        return self.storage.resolve(self.path)

    @property
    def directory_path(self) -> DirectoryPath:
        return DirectoryPath.from_path(self.path, self.full_path, self.config.archive_directory_name)

    @property
    def archive_path(self) -> str:
        return join_path(self.path, self.config.archive_directory_name)

    def parent(self) -> Optional["DirectoryReference"]:
        if not self.path:
            return None
        return DirectoryReference(dirname(self.path), self.storage, self.config, self.custom_schema)

    async def exists(self) -> bool:
        return await self.storage.is_directory(self.path)

    async def create(self) -> Optional[StorageError]:
        return await self.storage.create_directory(self.path)

    async def file_names(self) -> Union[List[str], StorageError]:
        file_paths = await self.storage.read_directory_file_paths(self.path)
        if isinstance(file_paths, StorageError):
            return file_paths
        return [
            basename(file_path)
            for file_path in file_paths
            if basename(file_path) != self.config.meta_file_name
        ]

    async def archived_file_names(self) -> List[str]:
        """File names inside the archive subdirectory; empty when it is missing or unreadable."""
        if not await self.storage.is_directory(self.archive_path):
            return []
        file_paths = await self.storage.read_directory_file_paths(self.archive_path)
        if isinstance(file_paths, StorageError):
            logger.warning(f"Could not list archive {self.archive_path}: {file_paths}")
            return []
        return [basename(file_path) for file_path in file_paths]

    def _content_reference(self, path: str) -> ContentFileReference:
        if path.endswith(".md"):
            return MdFileReference(path, self.storage, self.config, self.custom_schema)
        return UnknownFileReference(path, self.storage, self.config, self.custom_schema)

    async def files(self) -> Union[List[ContentFileReference], StorageError]:
        names = await self.file_names()
        if isinstance(names, StorageError):
            return names

        index_file_name = self.config.index_file_name
        references = [
            self._content_reference(join_path(self.path, name)) for name in names if name != index_file_name
        ]
        references.extend(
            self._content_reference(join_path(self.archive_path, name))
            for name in await self.archived_file_names()
            if name != index_file_name
        )
        return references

    async def md_files(self) -> Union[List[MdFileReference], StorageError]:
        references = await self.files()
        if isinstance(references, StorageError):
            return references
        return [reference for reference in references if isinstance(reference, MdFileReference)]

    async def unknown_files(self) -> Union[List[UnknownFileReference], StorageError]:
        references = await self.files()
        if isinstance(references, StorageError):
            return references
        return [reference for reference in references if isinstance(reference, UnknownFileReference)]

    def file(self, name: str) -> FileReference:
        """Reference to a child file, typed by its name."""
        path = join_path(self.path, name)
        file_type = detect_file_type(path, self.config.index_file_name)
        if file_type == "index":
            return IndexFileReference(path, self.storage, self.config, self.custom_schema)
        return self._content_reference(path)

    def md_file(self, name: str) -> MdFileReference:
        if not name.endswith(".md"):
            name = f"{name}.md"
        return MdFileReference(join_path(self.path, name), self.storage, self.config, self.custom_schema)

    def index_file(self) -> IndexFileReference:
        return IndexFileReference(
            join_path(self.path, self.config.index_file_name), self.storage, self.config, self.custom_schema
        )

    async def read_index_file(self) -> Union[IndexEntity, StorageError]:
        return await self.index_file().read()

    async def read_files(self) -> Union[List[Document], DocsClientError]:
        references = await self.files()
        if isinstance(references, StorageError):
            return references
        documents = []
        for reference in references:
            document = await reference.read()
            if isinstance(document, DocsClientError):
                return document
            documents.append(document)
        return documents

    async def read_md_files(self) -> Union[List[MdEntity], DocsClientError]:
        documents = await self.read_files()
        if isinstance(documents, DocsClientError):
            return documents
        return [document for document in documents if isinstance(document, MdEntity)]

    async def read_unknown_files(self) -> Union[List[UnknownEntity], DocsClientError]:
        documents = await self.read_files()
        if isinstance(documents, DocsClientError):
            return documents
        return [document for document in documents if isinstance(document, UnknownEntity)]

    async def directory_names(self) -> Union[List[str], StorageError]:
        names = await self.storage.read_directory_file_names(self.path)
        if isinstance(names, StorageError):
            return names
        directory_names = []
        for name in names:
            if not self.config.is_listed_directory_name(name):
                continue
            if await self.storage.is_directory(join_path(self.path, name)):
                directory_names.append(name)
        return directory_names

    async def directories(self) -> Union[List["DirectoryReference"], StorageError]:
        names = await self.directory_names()
        if isinstance(names, StorageError):
            return names
        return [self.directory(name) for name in names]

    def directory(self, name: str, custom_schema: Optional[CustomSchema] = None) -> "DirectoryReference":
        return DirectoryReference(
            join_path(self.path, name),
            self.storage,
            self.config,
            self.custom_schema if custom_schema is None else custom_schema,
        )

    async def write_file(self, entity: Document) -> Optional[StorageError]:
        """Write a document into this directory under its own file name."""
        path = join_path(self.path, entity.path.name_with_extension)
        return await self.storage.write_file(path, entity.to_text())

    async def create_md_file(self, file_name: Optional[str] = None) -> Union[MdFileReference, StorageError]:
        """Create a markdown document with default content.

        Without a name, a unique ``document-<hex>.md`` name is chosen.
        """
        if file_name is None:
            file_name = f"document-{uuid.uuid4().hex[:8]}.md"
            while await self.storage.exists(join_path(self.path, file_name)):
                file_name = f"document-{uuid.uuid4().hex[:8]}.md"

        reference = self.md_file(file_name)
        error = await reference.write_default()
        if error is not None:
            return error
        logger.info(f"Created markdown document {reference.path}")
        return reference
