from typing import Any, Callable, Dict, Literal, Union

from pydantic import InstanceOf

from docs_client.entities.base import BaseEntity
from docs_client.values.index_content import IndexContentValue
from docs_client.values.index_meta import IndexMetaValue


class IndexEntity(BaseEntity):
    """The index document of a directory."""

    type: Literal["index"] = "index"
    content: InstanceOf[IndexContentValue]

    def with_content(
        self, content: Union[IndexContentValue, Callable[[IndexContentValue], IndexContentValue]]
    ) -> "IndexEntity":
        new_content = content(self.content) if callable(content) else content
        return self._copy(content=new_content)

    def with_title(self, title: str) -> "IndexEntity":
        return self.with_content(self.content.with_title(title))

    def with_description(self, description: str) -> "IndexEntity":
        return self.with_content(self.content.with_description(description, self.path.name))

    def with_body(self, body: str) -> "IndexEntity":
        return self.with_content(self.content.with_body(body))

    def with_meta(
        self, meta: Union[IndexMetaValue, Callable[[IndexMetaValue], IndexMetaValue]]
    ) -> "IndexEntity":
        return self.with_content(self.content.with_meta(meta))

    def to_text(self) -> str:
        return self.content.to_text()

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "content": self.content.to_dict()}
