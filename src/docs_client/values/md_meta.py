"""Schema-typed front matter of a markdown document."""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from docs_client.exceptions import SchemaFieldError
from docs_client.markdown.front_matter import dump_yaml, parse_front_matter
from docs_client.schema.custom_schema import CustomSchema, CustomSchemaFieldValue
from docs_client.schema.field_types import FieldType
from docs_client.schema.meta_fields import empty_value, parse_value


@dataclass(frozen=True)
class MdMetaValue:
    """Front-matter record of a markdown document, typed by a custom schema.

    Keys the schema does not declare are kept untouched. Declared keys are
    validated strictly on construction; use :meth:`from_record` for the
    tolerant path that substitutes defaults.
    """

    values: Mapping[str, Any] = dataclass_field(default_factory=dict)
    custom_schema: CustomSchema = dataclass_field(default_factory=dict)

    def __post_init__(self) -> None:
        values = dict(self.values)
        for key, definition in self.custom_schema.items():
            if key in values:
                values[key] = parse_value(key, definition.type, values[key])
        object.__setattr__(self, "values", MappingProxyType(values))
        object.__setattr__(self, "custom_schema", MappingProxyType(dict(self.custom_schema)))

    @classmethod
    def from_record(cls, record: Mapping[str, Any], custom_schema: CustomSchema) -> "MdMetaValue":
        """Tolerant parse. Optional fields missing from the record stay absent so they are not written back."""
        values = dict(record)
        for key, definition in custom_schema.items():
            if key in record or definition.required:
                values[key] = CustomSchemaFieldValue(key, definition).validate(record.get(key))
        return cls(values, custom_schema)

    @classmethod
    def from_yaml_text(cls, text: Optional[str], custom_schema: CustomSchema) -> "MdMetaValue":
        return cls.from_record(parse_front_matter(text), custom_schema)

    @classmethod
    def empty(cls, custom_schema: CustomSchema) -> "MdMetaValue":
        return cls.from_record({}, custom_schema)

    def schema_field(self, key: str) -> CustomSchemaFieldValue:
        if key not in self.custom_schema:
            raise SchemaFieldError(key)
        return CustomSchemaFieldValue(key, self.custom_schema[key])

    def field(self, key: str) -> Any:
        """Value of a declared field. Absent optional fields yield None or []."""
        definition = self.schema_field(key)
        if key not in self.values:
            return empty_value(definition.type)
        return self.values[key]

    def _typed(self, key: str, *field_types: FieldType) -> Any:
        if self.schema_field(key).type not in field_types:
            raise SchemaFieldError(key)
        return self.field(key)

    def text(self, key: str) -> Optional[str]:
        return self._typed(key, FieldType.TEXT, FieldType.SELECT_TEXT)

    def number(self, key: str) -> Optional[float]:
        return self._typed(key, FieldType.NUMBER, FieldType.SELECT_NUMBER)

    def boolean(self, key: str) -> Optional[bool]:
        return self._typed(key, FieldType.BOOLEAN)

    def relation(self, key: str) -> Optional[str]:
        return self._typed(key, FieldType.RELATION)

    def multi_text(self, key: str) -> List[str]:
        return self._typed(key, FieldType.MULTI_TEXT, FieldType.MULTI_SELECT_TEXT)

    def multi_number(self, key: str) -> List[float]:
        return self._typed(key, FieldType.MULTI_NUMBER, FieldType.MULTI_SELECT_NUMBER)

    def multi_relation(self, key: str) -> List[str]:
        return self._typed(key, FieldType.MULTI_RELATION)

    def with_property(self, key: str, value: Any) -> "MdMetaValue":
        """Copy with one value replaced. Declared keys are validated strictly."""
        return MdMetaValue({**self.values, key: value}, self.custom_schema)

    def keys(self) -> List[str]:
        return list(self.values)

    def has_key(self, key: str) -> bool:
        return key in self.values

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.values)

    def to_yaml(self) -> str:
        return dump_yaml(self.values)
