"""Display trees of document directories."""

from docs_client.tree.file_tree import FILE_ICON, FileTreeBuilder

__all__ = ["FILE_ICON", "FileTreeBuilder"]
