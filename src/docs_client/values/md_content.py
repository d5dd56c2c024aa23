"""Content of a markdown document: front matter plus body."""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Union

from docs_client.markdown.front_matter import dump_front_matter
from docs_client.markdown.markdown_system import MarkdownSystem
from docs_client.schema.custom_schema import CustomSchema
from docs_client.values.md_meta import MdMetaValue

markdown_system = MarkdownSystem()


@dataclass(frozen=True)
class MdContentValue:
    body: str
    title: Optional[str]
    description: Optional[str]
    meta: MdMetaValue

    @classmethod
    def from_markdown(cls, markdown: str, custom_schema: CustomSchema) -> "MdContentValue":
        body = markdown_system.extract_body(markdown)
        return cls(
            body=body,
            title=markdown_system.extract_title(body),
            description=markdown_system.extract_description(body),
            meta=MdMetaValue.from_yaml_text(markdown_system.extract_front_matter(markdown), custom_schema),
        )

    @classmethod
    def empty(cls, title: str, custom_schema: CustomSchema) -> "MdContentValue":
        return cls(body=f"# {title}", title=title, description=None, meta=MdMetaValue.empty(custom_schema))

    def with_body(self, body: str) -> "MdContentValue":
        """Replace the body; title and description are re-read from it."""
        return replace(
            self,
            body=body,
            title=markdown_system.extract_title(body),
            description=markdown_system.extract_description(body),
        )

    def with_title(self, title: str) -> "MdContentValue":
        return self.with_body(markdown_system.update_title(self.body, title))

    def with_description(self, description: str, default_title: Optional[str] = None) -> "MdContentValue":
        return self.with_body(
            markdown_system.update_description(self.body, description, default_title or self.title or "")
        )

    def with_meta(self, meta: Union[MdMetaValue, Callable[[MdMetaValue], MdMetaValue]]) -> "MdContentValue":
        new_meta = meta(self.meta) if callable(meta) else meta
        return replace(self, meta=new_meta)

    def with_meta_property(self, key: str, value: Any) -> "MdContentValue":
        return self.with_meta(self.meta.with_property(key, value))

    def to_text(self) -> str:
        return dump_front_matter(self.meta.to_dict(), self.body)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "body": self.body,
            "title": self.title,
            "description": self.description,
            "meta": self.meta.to_dict(),
        }
