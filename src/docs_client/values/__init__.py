"""Immutable values describing paths, front matter and document content."""

from docs_client.values.directory_meta import DirectoryMetaValue
from docs_client.values.index_content import IndexContentValue
from docs_client.values.index_meta import IndexMetaValue
from docs_client.values.md_content import MdContentValue
from docs_client.values.md_meta import MdMetaValue
from docs_client.values.paths import DirectoryPath, FilePath
from docs_client.values.relation import Relation, RelationFile
from docs_client.values.tree import TreeDirectoryNode, TreeFileNode, TreeNode

__all__ = [
    "DirectoryMetaValue",
    "DirectoryPath",
    "FilePath",
    "IndexContentValue",
    "IndexMetaValue",
    "MdContentValue",
    "MdMetaValue",
    "Relation",
    "RelationFile",
    "TreeDirectoryNode",
    "TreeFileNode",
    "TreeNode",
]
