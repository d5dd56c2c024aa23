"""Markdown front matter and body handling."""

from docs_client.markdown.front_matter import (
    dump_front_matter,
    normalize_front_matter_value,
    parse_front_matter,
)
from docs_client.markdown.markdown_system import MarkdownSystem

__all__ = [
    "MarkdownSystem",
    "dump_front_matter",
    "normalize_front_matter_value",
    "parse_front_matter",
]
