"""Convenience entry point bundling a storage backend, configuration and schema."""

from typing import List, Optional

from docs_client.config import DocsClientConfig
from docs_client.exceptions import DocsClientError
from docs_client.references.directory import DirectoryReference, FileReference
from docs_client.references.file_type import detect_file_type
from docs_client.references.index_file import IndexFileReference
from docs_client.references.md_file import MdFileReference
from docs_client.references.unknown_file import UnknownFileReference
from docs_client.schema.custom_schema import CustomSchema
from docs_client.storage.base import StorageBackend
from docs_client.tree.file_tree import FileTreeBuilder
from docs_client.values.tree import TreeDirectoryNode, TreeNode


class DocsClient:
    """Hands out references for paths in one storage backend.

    The tree helpers raise the error a build returns instead of handing it back.
    """

    def __init__(
        self,
        storage: StorageBackend,
        config: Optional[DocsClientConfig] = None,
        custom_schema: Optional[CustomSchema] = None,
    ):
        self.storage = storage
        self.config = config or DocsClientConfig()
        self.custom_schema = dict(custom_schema or {})
        self.tree_builder = FileTreeBuilder(storage, self.config)

    def file(self, path: str, custom_schema: Optional[CustomSchema] = None) -> FileReference:
        schema = self.custom_schema if custom_schema is None else custom_schema
        file_type = detect_file_type(path, self.config.index_file_name)
        if file_type == "index":
            return IndexFileReference(path, self.storage, self.config, schema)
        if file_type == "markdown":
            return MdFileReference(path, self.storage, self.config, schema)
        return UnknownFileReference(path, self.storage, self.config, schema)

    def md_file(self, path: str, custom_schema: Optional[CustomSchema] = None) -> MdFileReference:
        schema = self.custom_schema if custom_schema is None else custom_schema
        return MdFileReference(path, self.storage, self.config, schema)

    def index_file(self, directory_path: str = "") -> IndexFileReference:
        return self.directory(directory_path).index_file()

    def directory(self, path: str = "", custom_schema: Optional[CustomSchema] = None) -> DirectoryReference:
        schema = self.custom_schema if custom_schema is None else custom_schema
        return DirectoryReference(path, self.storage, self.config, schema)

    async def file_tree(self, directory_path: str = "") -> List[TreeNode]:
        result = await self.tree_builder.build_file_tree(directory_path)
        if isinstance(result, DocsClientError):
            raise result
        return result

    async def directory_tree(self, directory_path: str = "") -> List[TreeDirectoryNode]:
        result = await self.tree_builder.build_directory_tree(directory_path)
        if isinstance(result, DocsClientError):
            raise result
        return result
