"""A directory read as the lookup table behind a relation field."""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import List, Union

from docs_client.config import DocsClientConfig
from docs_client.exceptions import StorageError
from docs_client.markdown.markdown_system import MarkdownSystem
from docs_client.storage.base import StorageBackend
from docs_client.utils import basename, join_path, normalize_path
from docs_client.values.relation import Relation, RelationFile

markdown_system = MarkdownSystem()


@dataclass(frozen=True)
class RelationDirectoryReference:
    path: str
    storage: StorageBackend
    config: DocsClientConfig = dataclass_field(default_factory=DocsClientConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    async def read(self) -> Union[Relation, StorageError]:
        files = await self.read_files()
        if isinstance(files, StorageError):
            return files
        return Relation(path=self.path, files=files)

    async def read_files(self) -> Union[List[RelationFile], StorageError]:
        """Every markdown document except the index, labelled by its H1 title.

        A directory that does not exist yields an empty list.
        """
        if not await self.storage.is_directory(self.path):
            return []

        file_paths = await self.storage.read_directory_file_paths(self.path)
        if isinstance(file_paths, StorageError):
            return file_paths

        files = []
        for file_path in file_paths:
            if basename(file_path) == self.config.index_file_name or not file_path.endswith(".md"):
                continue
            text = await self.storage.read_file(file_path)
            if isinstance(text, StorageError):
                return text
            if text is None:
                continue
            files.append(RelationFile.from_file(file_path, markdown_system.extract_title(text)))
        return files

    async def exists(self, slug: str) -> bool:
        return await self.storage.is_file(join_path(self.path, f"{slug}.md"))

    async def read_slugs(self) -> Union[List[str], StorageError]:
        files = await self.read_files()
        if isinstance(files, StorageError):
            return files
        return [file.slug for file in files]

    async def count(self) -> Union[int, StorageError]:
        files = await self.read_files()
        if isinstance(files, StorageError):
            return files
        return len(files)

    async def is_empty(self) -> Union[bool, StorageError]:
        count = await self.count()
        if isinstance(count, StorageError):
            return count
        return count == 0
