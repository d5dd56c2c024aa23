"""Front matter of an index document: icon, persisted schema and whitelisted extras."""

from dataclasses import dataclass, replace
from dataclasses import field as dataclass_field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from docs_client.config import DocsClientConfig
from docs_client.markdown.front_matter import dump_yaml, parse_front_matter
from docs_client.schema.custom_schema import CustomSchema
from docs_client.schema.index_schema import IndexSchemaValue

RESERVED_KEYS = ("icon", "schema")


@dataclass(frozen=True)
class IndexMetaValue:
    icon: Optional[str]
    index_schema: IndexSchemaValue = dataclass_field(default_factory=IndexSchemaValue)
    extras: Mapping[str, Any] = dataclass_field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        config: DocsClientConfig,
        custom_schema: Optional[CustomSchema] = None,
    ) -> "IndexMetaValue":
        """Build from a parsed front-matter record.

        A missing ``schema`` is derived from the custom schema, a missing icon
        falls back to the configured default, and only keys listed in
        ``index_meta_includes`` survive as extras.
        """
        icon = record.get("icon")
        raw_schema = record.get("schema")
        if isinstance(raw_schema, dict):
            index_schema = IndexSchemaValue.from_record(raw_schema)
        else:
            index_schema = IndexSchemaValue.from_custom_schema(custom_schema or {})

        extras = {
            key: record[key]
            for key in config.index_meta_includes
            if key in record and key not in RESERVED_KEYS
        }
        return cls(
            icon=icon if isinstance(icon, str) else config.default_index_icon,
            index_schema=index_schema,
            extras=extras,
        )

    @classmethod
    def from_yaml_text(
        cls, text: Optional[str], config: DocsClientConfig, custom_schema: Optional[CustomSchema] = None
    ) -> "IndexMetaValue":
        return cls.from_record(parse_front_matter(text), config, custom_schema)

    @classmethod
    def empty(cls, config: DocsClientConfig, custom_schema: Optional[CustomSchema] = None) -> "IndexMetaValue":
        return cls.from_record({}, config, custom_schema)

    @property
    def has_schema(self) -> bool:
        return len(self.index_schema) > 0

    def with_icon(self, icon: str) -> "IndexMetaValue":
        return replace(self, icon=icon)

    def with_schema(self, index_schema: Union[IndexSchemaValue, Mapping[str, Any]]) -> "IndexMetaValue":
        if not isinstance(index_schema, IndexSchemaValue):
            index_schema = IndexSchemaValue.from_record(dict(index_schema))
        return replace(self, index_schema=index_schema)

    def with_extra(self, key: str, value: Any) -> "IndexMetaValue":
        if key in RESERVED_KEYS:
            raise ValueError(f"'{key}' is not an extra key")
        return replace(self, extras={**self.extras, key: value})

    def to_dict(self) -> Dict[str, Any]:
        return {"icon": self.icon, "schema": self.index_schema.to_dict(), **self.extras}

    def to_yaml(self) -> str:
        return dump_yaml(self.to_dict())
