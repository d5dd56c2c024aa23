"""Classification of paths into document kinds. No I/O."""

from typing import Literal

from docs_client.utils import basename

FileType = Literal["index", "markdown", "unknown"]


def detect_file_type(path: str, index_file_name: str = "index.md") -> FileType:
    """
    >>> detect_file_type("docs/index.md")
    'index'
    >>> detect_file_type("docs/guide.md")
    'markdown'
    >>> detect_file_type("docs/logo.svg")
    'unknown'
    """
    if basename(path) == index_file_name:
        return "index"
    if path.endswith(".md"):
        return "markdown"
    return "unknown"
