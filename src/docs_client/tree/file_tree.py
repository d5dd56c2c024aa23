"""Recursive file/directory tree building.

Traversal is sequential and fail-fast: the first error at any depth is
returned and no partial tree is produced.
"""

from typing import List, Union

from loguru import logger

from docs_client.config import DocsClientConfig
from docs_client.exceptions import DocsClientError, StorageError
from docs_client.references.directory import DirectoryReference
from docs_client.references.index_file import IndexFileReference
from docs_client.references.md_file import MdFileReference
from docs_client.storage.base import StorageBackend
from docs_client.utils import basename, join_path
from docs_client.values.tree import TreeDirectoryNode, TreeFileNode, TreeNode

FILE_ICON = "📄"


class FileTreeBuilder:
    """Builds :class:`TreeNode` lists from a storage backend."""

    def __init__(self, storage: StorageBackend, config: DocsClientConfig):
        self.storage = storage
        self.config = config

    def _is_listed(self, name: str) -> bool:
        return self.config.is_listed_directory_name(name)

    async def build_file_tree(self, directory_path: str = "") -> Union[List[TreeNode], DocsClientError]:
        """Files and directories below ``directory_path``, recursively."""
        logger.debug(f"Building file tree for '{directory_path}'")
        names = await self.storage.read_directory_file_names(directory_path)
        if isinstance(names, StorageError):
            return names

        nodes: List[TreeNode] = []
        for name in names:
            if not self._is_listed(name):
                continue
            path = join_path(directory_path, name)
            if await self.storage.is_directory(path):
                children = await self.build_file_tree(path)
                if isinstance(children, DocsClientError):
                    return children
                node = await self._directory_node(path, children)
            else:
                node = await self._file_node(path)
            if isinstance(node, DocsClientError):
                return node
            nodes.append(node)
        return nodes

    async def build_directory_tree(
        self, directory_path: str = ""
    ) -> Union[List[TreeDirectoryNode], DocsClientError]:
        """Directories only, recursively."""
        directory_names = await DirectoryReference(directory_path, self.storage, self.config).directory_names()
        if isinstance(directory_names, StorageError):
            return directory_names

        nodes: List[TreeDirectoryNode] = []
        for name in directory_names:
            path = join_path(directory_path, name)
            children = await self.build_directory_tree(path)
            if isinstance(children, DocsClientError):
                return children
            node = await self._directory_node(path, list(children))
            if isinstance(node, DocsClientError):
                return node
            nodes.append(node)
        return nodes

    async def _file_node(self, path: str) -> Union[TreeFileNode, DocsClientError]:
        name = basename(path)
        title = name
        if path.endswith(".md"):
            entity = await MdFileReference(path, self.storage, self.config).read()
            if isinstance(entity, DocsClientError):
                return entity
            title = entity.content.title or name
        return TreeFileNode(name=name, path=path, icon=FILE_ICON, title=title)

    async def _directory_node(
        self, path: str, children: List[TreeNode]
    ) -> Union[TreeDirectoryNode, DocsClientError]:
        name = basename(path)
        title = name
        icon = self.config.default_index_icon

        index = IndexFileReference(join_path(path, self.config.index_file_name), self.storage, self.config)
        if await index.exists():
            entity = await index.read()
            if isinstance(entity, DocsClientError):
                return entity
            title = entity.content.title or name
            icon = entity.content.meta.icon or self.config.default_index_icon

        return TreeDirectoryNode(name=name, path=path, icon=icon, title=title, children=children)
