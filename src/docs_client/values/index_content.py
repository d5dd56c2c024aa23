"""Content of an index document."""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Union

from docs_client.config import DocsClientConfig
from docs_client.markdown.front_matter import dump_front_matter
from docs_client.markdown.markdown_system import MarkdownSystem
from docs_client.schema.custom_schema import CustomSchema
from docs_client.schema.index_schema import IndexSchemaValue
from docs_client.values.directory_meta import DirectoryMetaValue
from docs_client.values.index_meta import IndexMetaValue

markdown_system = MarkdownSystem()


@dataclass(frozen=True)
class IndexContentValue:
    body: str
    title: Optional[str]
    description: Optional[str]
    meta: IndexMetaValue

    @classmethod
    def from_markdown(
        cls,
        markdown: str,
        config: DocsClientConfig,
        custom_schema: Optional[CustomSchema] = None,
        directory_meta: Optional[DirectoryMetaValue] = None,
    ) -> "IndexContentValue":
        """Parse index text.

        Icon and schema found in ``directory_meta`` take precedence over the
        front matter.
        """
        body = markdown_system.extract_body(markdown)
        meta = IndexMetaValue.from_yaml_text(
            markdown_system.extract_front_matter(markdown), config, custom_schema
        )
        content = cls(
            body=body,
            title=markdown_system.extract_title(body),
            description=markdown_system.extract_description(body),
            meta=meta,
        )
        if directory_meta is not None:
            content = content.with_directory_meta(directory_meta)
        return content

    @classmethod
    def empty(cls, directory_name: str, config: DocsClientConfig) -> "IndexContentValue":
        """Placeholder content for a directory whose index has not been written."""
        return cls(
            body=f"# {directory_name}",
            title=directory_name,
            description=None,
            meta=IndexMetaValue(icon=config.default_index_icon, index_schema=IndexSchemaValue.empty()),
        )

    def with_directory_meta(self, directory_meta: DirectoryMetaValue) -> "IndexContentValue":
        """Copy whose icon and schema are overridden by a directory metadata file."""
        meta = self.meta
        if directory_meta.icon is not None:
            meta = meta.with_icon(directory_meta.icon)
        directory_schema = directory_meta.index_schema()
        if directory_schema is not None:
            meta = meta.with_schema(directory_schema)
        return replace(self, meta=meta)

    def with_body(self, body: str) -> "IndexContentValue":
        return replace(
            self,
            body=body,
            title=markdown_system.extract_title(body),
            description=markdown_system.extract_description(body),
        )

    def with_title(self, title: str) -> "IndexContentValue":
        return self.with_body(markdown_system.update_title(self.body, title))

    def with_description(self, description: str, default_title: Optional[str] = None) -> "IndexContentValue":
        return self.with_body(
            markdown_system.update_description(self.body, description, default_title or self.title or "")
        )

    def with_meta(
        self, meta: Union[IndexMetaValue, Callable[[IndexMetaValue], IndexMetaValue]]
    ) -> "IndexContentValue":
        new_meta = meta(self.meta) if callable(meta) else meta
        return replace(self, meta=new_meta)

    def to_text(self) -> str:
        """Serialize as icon, schema and extras followed by the body, ending in a newline."""
        return dump_front_matter(self.meta.to_dict(), self.body.strip()) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "body": self.body,
            "title": self.title,
            "description": self.description,
            "meta": self.meta.to_dict(),
        }
