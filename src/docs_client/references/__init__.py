"""Lazy, path-addressed handles that read and write documents through a storage backend."""

from docs_client.references.base import BaseFileReference, resolve_relation_path
from docs_client.references.directory import DirectoryReference, FileReference
from docs_client.references.file_type import FileType, detect_file_type
from docs_client.references.index_file import IndexFileReference
from docs_client.references.md_file import MdFileReference
from docs_client.references.relation_directory import RelationDirectoryReference
from docs_client.references.unknown_file import UnknownFileReference

__all__ = [
    "BaseFileReference",
    "DirectoryReference",
    "FileReference",
    "FileType",
    "IndexFileReference",
    "MdFileReference",
    "RelationDirectoryReference",
    "UnknownFileReference",
    "detect_file_type",
    "resolve_relation_path",
]
