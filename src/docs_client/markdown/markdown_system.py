"""Split Markdown text into front matter and body, and edit the title/description structure.

Only enough structure is recognised to find the front-matter block, the first
H1 heading and the paragraph directly after it. Everything else is opaque text.
"""

import re
from typing import List, Optional

SEPARATOR_PATTERN = re.compile(r"^-{3,}$")
TITLE_PATTERN = re.compile(r"^#\s+(.+)$")
DEFAULT_SEPARATOR = "---"


def _lines(text: str) -> List[str]:
    return text.split("\n")


def _find_title_index(lines: List[str]) -> int:
    for index, line in enumerate(lines):
        if TITLE_PATTERN.match(line):
            return index
    return -1


def _find_description_index(lines: List[str], title_index: int) -> int:
    """Index of the first non-blank line after the title, or len(lines)."""
    index = title_index + 1
    while index < len(lines) and lines[index].strip() == "":
        index += 1
    return index


class MarkdownSystem:
    """Stateless engine over raw Markdown text.

    Example:
        >>> engine = MarkdownSystem()
        >>> text = "---\\nicon: x\\n---\\n\\n# Guide\\n\\nHow to start."
        >>> engine.extract_front_matter(text)
        'icon: x'
        >>> engine.extract_title(engine.extract_body(text))
        'Guide'
    """

    @staticmethod
    def separator(text: str) -> str:
        """The delimiter line used by this text: its first line when that is 3+ dashes."""
        first_line = _lines(text)[0].rstrip("\r")
        if SEPARATOR_PATTERN.match(first_line):
            return first_line
        return DEFAULT_SEPARATOR

    def _split(self, text: str) -> Optional[tuple[str, str]]:
        lines = [line.rstrip("\r") for line in _lines(text)]
        if not SEPARATOR_PATTERN.match(lines[0]):
            return None
        separator = lines[0]
        for index in range(1, len(lines)):
            if lines[index] == separator:
                front_matter = "\n".join(lines[1:index]).strip()
                body = "\n".join(lines[index + 1 :]).strip()
                return front_matter, body
        return None

    def extract_front_matter(self, text: str) -> Optional[str]:
        """Raw front-matter text between the delimiters, or None when there is none."""
        split = self._split(text)
        return split[0] if split else None

    def extract_body(self, text: str) -> str:
        """Text after the closing delimiter, or the whole text without front matter."""
        split = self._split(text)
        return split[1] if split else text

    def extract_title(self, text: str) -> Optional[str]:
        body = self.extract_body(text)
        for line in _lines(body):
            match = TITLE_PATTERN.match(line.rstrip("\r"))
            if match:
                return match.group(1)
        return None

    def extract_description(self, text: str) -> Optional[str]:
        """First paragraph line after the title. No title means no description."""
        lines = [line.rstrip("\r") for line in _lines(self.extract_body(text))]
        title_index = _find_title_index(lines)
        if title_index == -1:
            return None

        description_index = _find_description_index(lines, title_index)
        if description_index >= len(lines):
            return None

        line = lines[description_index]
        if line.startswith("#"):
            return None
        return line

    def update_title(self, body: str, title: str) -> str:
        """Replace the H1 line, or insert one (plus a blank line) at the top."""
        lines = _lines(body)
        title_index = _find_title_index(lines)
        if title_index == -1:
            return "\n".join([f"# {title}", "", *lines])

        lines[title_index] = f"# {title}"
        return "\n".join(lines)

    def update_description(self, body: str, description: str, default_title: str) -> str:
        """Replace the paragraph after the title, or insert one.

        When the body has no title, `default_title` is synthesized first.
        """
        lines = _lines(body)
        title_index = _find_title_index(lines)
        if title_index == -1:
            return f"# {default_title}\n\n{description}\n\n{body}".strip()

        description_index = _find_description_index(lines, title_index)
        if description_index < len(lines) and not lines[description_index].startswith("#"):
            lines[description_index] = description
        else:
            lines[title_index + 1 : title_index + 1] = ["", description]
        return "\n".join(lines)

    @staticmethod
    def compose(title: str, description: str, body: str) -> str:
        """Build body text from a title, a description and the remaining content."""
        parts = []
        if title:
            parts.append(f"# {title}")
        if description:
            parts.append(description)
        if body:
            parts.append(body)
        return "\n\n".join(parts)
