from typing import Any, Callable, Dict, Literal, Union

from docs_client.entities.base import BaseEntity


class UnknownEntity(BaseEntity):
    """Any non-markdown file, held as raw text."""

    type: Literal["unknown"] = "unknown"
    content: str
    extension: str

    def with_content(self, content: Union[str, Callable[[str], str]]) -> "UnknownEntity":
        new_content = content(self.content) if callable(content) else content
        return self._copy(content=new_content)

    def to_text(self) -> str:
        return self.content

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "content": self.content, "extension": self.extension}
