from typing import Any, Callable, Dict, Literal, Union

from pydantic import InstanceOf

from docs_client.entities.base import BaseEntity
from docs_client.values.md_content import MdContentValue
from docs_client.values.md_meta import MdMetaValue


class MdEntity(BaseEntity):
    """A markdown document other than an index."""

    type: Literal["markdown"] = "markdown"
    content: InstanceOf[MdContentValue]

    def with_content(
        self, content: Union[MdContentValue, Callable[[MdContentValue], MdContentValue]]
    ) -> "MdEntity":
        new_content = content(self.content) if callable(content) else content
        return self._copy(content=new_content)

    def with_title(self, title: str) -> "MdEntity":
        return self.with_content(self.content.with_title(title))

    def with_description(self, description: str) -> "MdEntity":
        return self.with_content(self.content.with_description(description, self.path.name))

    def with_body(self, body: str) -> "MdEntity":
        return self.with_content(self.content.with_body(body))

    def with_meta(self, meta: Union[MdMetaValue, Callable[[MdMetaValue], MdMetaValue]]) -> "MdEntity":
        return self.with_content(self.content.with_meta(meta))

    def with_meta_property(self, key: str, value: Any) -> "MdEntity":
        return self.with_content(self.content.with_meta_property(key, value))

    def to_text(self) -> str:
        return self.content.to_text()

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "content": self.content.to_dict()}
