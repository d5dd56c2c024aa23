"""Reference to a non-markdown file."""

from dataclasses import dataclass
from typing import Optional, Union

from docs_client.entities.unknown_entity import UnknownEntity
from docs_client.exceptions import DocumentNotFoundError, InvalidPathError, StorageError
from docs_client.references.base import BaseFileReference
from docs_client.utils import extname


@dataclass(frozen=True)
class UnknownFileReference(BaseFileReference):
    def __post_init__(self) -> None:
        super().__post_init__()
        if self.path.endswith(".md"):
            raise InvalidPathError(self.path, "Markdown files need a markdown or index reference")

    @property
    def extension(self) -> str:
        return extname(self.path).lstrip(".")

    async def read(self) -> Union[UnknownEntity, DocumentNotFoundError, StorageError]:
        text = await self.storage.read_file(self.path)
        if isinstance(text, StorageError):
            return text
        if text is None:
            return DocumentNotFoundError(self.path)
        return UnknownEntity(
            path=self.file_path,
            content=text,
            extension=self.extension,
            is_archived=self.is_archived,
        )

    def empty(self) -> UnknownEntity:
        return UnknownEntity(
            path=self.file_path,
            content="",
            extension=self.extension or "txt",
            is_archived=self.is_archived,
        )

    async def write(self, entity: UnknownEntity) -> Optional[StorageError]:
        return await self.storage.write_file(self.path, entity.content)

    async def write_content(self, text: str) -> Optional[StorageError]:
        return await self.storage.write_file(self.path, text)
