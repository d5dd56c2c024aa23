"""Behaviour shared by file references: location, statistics, move, archive and restore."""

import dataclasses
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from datetime import datetime
from typing import TYPE_CHECKING, Optional, TypeVar, Union

from loguru import logger

from docs_client.config import DocsClientConfig
from docs_client.exceptions import NotArchivedError, StorageError
from docs_client.schema.custom_schema import CustomSchema
from docs_client.storage.base import StorageBackend
from docs_client.utils import basename, dirname, join_path, normalize_path
from docs_client.values.paths import FilePath

if TYPE_CHECKING:  # pragma: no cover
    from docs_client.references.directory import DirectoryReference

RefT = TypeVar("RefT", bound="BaseFileReference")


def resolve_relation_path(relation_path: str, directory_path: str) -> str:
    """Resolve a declared relation path.

    Paths starting with "." are relative to ``directory_path``; anything else is
    relative to the storage root.

    >>> resolve_relation_path("../authors", "docs/posts")
    'docs/authors'
    >>> resolve_relation_path("docs/authors", "docs/posts")
    'docs/authors'
    """
    if relation_path.startswith("."):
        return join_path(directory_path, relation_path)
    return normalize_path(relation_path)


@dataclass(frozen=True)
class BaseFileReference:
    """A lazy handle on one file. Nothing is read until a method is awaited."""

    path: str
    storage: StorageBackend
    config: DocsClientConfig = dataclass_field(default_factory=DocsClientConfig)
    custom_schema: CustomSchema = dataclass_field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    def _with_path(self: RefT, path: str) -> RefT:
        return dataclasses.replace(self, path=path)

    @property
    def file_name(self) -> str:
        return basename(self.path)

    @property
    def full_path(self) -> str:
        return self.storage.resolve(self.path)

    @property
    def file_path(self) -> FilePath:
        return self._file_path(self.path)

    def _file_path(self, path: str) -> FilePath:
        return FilePath.from_path(
            path,
            full_path=self.storage.resolve(path),
            index_file_name=self.config.index_file_name,
            archive_directory_name=self.config.archive_directory_name,
            default_directory_name=self.config.default_directory_name,
        )

    @property
    def directory_path(self) -> str:
        return dirname(self.path)

    @property
    def is_archived(self) -> bool:
        return basename(self.directory_path) == self.config.archive_directory_name

    @property
    def logical_directory_path(self) -> str:
        """Directory the file belongs to, ignoring a trailing archive segment."""
        if self.is_archived:
            return dirname(self.directory_path)
        return self.directory_path

    @property
    def archived_path(self) -> str:
        return join_path(self.logical_directory_path, self.config.archive_directory_name, self.file_name)

    @property
    def restored_path(self) -> str:
        return join_path(self.logical_directory_path, self.file_name)

    def directory(self) -> "DirectoryReference":
        from docs_client.references.directory import DirectoryReference

        return DirectoryReference(self.logical_directory_path, self.storage, self.config, self.custom_schema)

    async def exists(self) -> bool:
        return await self.storage.is_file(self.path)

    async def size(self) -> Union[int, StorageError]:
        return await self.storage.get_file_size(self.path)

    async def last_modified(self) -> Union[datetime, StorageError]:
        return await self.storage.get_file_updated_time(self.path)

    async def created_at(self) -> Union[datetime, StorageError]:
        return await self.storage.get_file_created_time(self.path)

    async def delete(self) -> Optional[StorageError]:
        logger.info(f"Deleting {self.path}")
        return await self.storage.delete_file(self.path)

    async def copy_to(self: RefT, destination: str) -> Union[RefT, StorageError]:
        error = await self.storage.copy_file(self.path, normalize_path(destination))
        if error is not None:
            return error
        return self._with_path(destination)

    async def move_to(self: RefT, destination: str) -> Union[RefT, StorageError]:
        error = await self.storage.move_file(self.path, normalize_path(destination))
        if error is not None:
            return error
        return self._with_path(destination)

    async def archive(self: RefT) -> Union[RefT, StorageError]:
        """Move the file into its directory's archive subdirectory."""
        if self.is_archived:
            return self
        logger.info(f"Archiving {self.path} -> {self.archived_path}")
        return await self.move_to(self.archived_path)

    async def restore(self: RefT) -> Union[RefT, StorageError]:
        """Move an archived file back next to its siblings.

        Raises:
            NotArchivedError: If the file's parent directory is not an archive directory
        """
        if not self.is_archived:
            raise NotArchivedError(self.path)
        logger.info(f"Restoring {self.path} -> {self.restored_path}")
        return await self.move_to(self.restored_path)
