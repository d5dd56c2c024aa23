"""The schema stored in an index document's front matter.

Index files are edited by hand, so reading is permissive: missing or null
sub-properties are backfilled and fields that cannot be understood at all are
skipped with a warning.
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, model_validator

from docs_client.exceptions import InvalidFieldValueError, SchemaFieldError
from docs_client.schema.custom_schema import CustomSchema
from docs_client.schema.field_types import FieldType
from docs_client.schema.meta_fields import parse_value

_bool_adapter = TypeAdapter(bool)


class IndexSchemaField(BaseModel):
    """A persisted field definition with its UI hints."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: FieldType
    required: bool = False
    title: Optional[str] = None
    description: Optional[str] = None
    default: Any = None
    options: Optional[List[Any]] = None
    path: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def backfill(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = {key: value for key, value in data.items() if value is not None}
        if "required" in data:
            try:
                data["required"] = _bool_adapter.validate_python(data["required"])
            except ValidationError:
                data["required"] = False
        if "options" in data and not isinstance(data["options"], list):
            data["options"] = []
        if "path" in data and not isinstance(data["path"], str):
            data["path"] = ""
        field_type = data.get("type")
        if field_type is not None:
            field_type = FieldType(field_type)
            if field_type.is_select:
                data.setdefault("options", [])
            if field_type.is_relation:
                data.setdefault("path", "")
        return data

    @property
    def is_array(self) -> bool:
        return self.type.is_multi

    @property
    def is_relation(self) -> bool:
        return self.type.is_relation

    @property
    def is_select(self) -> bool:
        return self.type.is_select

    def accepts(self, value: Any) -> bool:
        """Whether ``value`` matches this field's type (and its options, for selects)."""
        try:
            parsed = parse_value("value", self.type, value)
        except InvalidFieldValueError:
            return False
        if self.is_select and self.options:
            values = parsed if self.is_array else [parsed]
            return all(item in self.options for item in values if item is not None)
        return True

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json")
        if not self.is_select:
            data.pop("options")
        if not self.is_relation:
            data.pop("path")
        return data


@dataclass(frozen=True)
class IndexSchemaValue:
    """Mapping of field name to :class:`IndexSchemaField`."""

    fields: Mapping[str, IndexSchemaField] = dataclass_field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def empty(cls) -> "IndexSchemaValue":
        return cls()

    @classmethod
    def from_record(cls, record: Any) -> "IndexSchemaValue":
        """Permissively parse the ``schema`` mapping of an index document."""
        if not isinstance(record, dict):
            return cls()

        fields: Dict[str, IndexSchemaField] = {}
        for key, raw in record.items():
            try:
                fields[str(key)] = IndexSchemaField.model_validate(raw)
            except (ValidationError, ValueError) as e:
                logger.warning(f"Skipping malformed index schema field '{key}': {e}")
        return cls(fields)

    @classmethod
    def from_custom_schema(cls, custom_schema: CustomSchema) -> "IndexSchemaValue":
        """Persisted schema equivalent of a consumer schema, without UI hints."""
        return cls(
            {
                key: IndexSchemaField(type=definition.type, required=definition.required, path=definition.path)
                for key, definition in custom_schema.items()
            }
        )

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    @property
    def field_names(self) -> List[str]:
        return list(self.fields)

    def field(self, key: str) -> IndexSchemaField:
        if key not in self.fields:
            raise SchemaFieldError(key)
        return self.fields[key]

    def relation(self, key: str) -> IndexSchemaField:
        """A single-relation field, raising when absent or of another type."""
        schema_field = self.field(key)
        if schema_field.type != FieldType.RELATION:
            raise SchemaFieldError(key)
        return schema_field

    def multi_relation(self, key: str) -> IndexSchemaField:
        schema_field = self.field(key)
        if schema_field.type != FieldType.MULTI_RELATION:
            raise SchemaFieldError(key)
        return schema_field

    def relation_fields(self) -> List[Tuple[str, IndexSchemaField]]:
        return [(key, value) for key, value in self.fields.items() if value.is_relation]

    def with_field(self, key: str, schema_field: IndexSchemaField) -> "IndexSchemaValue":
        return IndexSchemaValue({**self.fields, key: schema_field})

    def without_field(self, key: str) -> "IndexSchemaValue":
        return IndexSchemaValue({name: value for name, value in self.fields.items() if name != key})

    def to_dict(self) -> Dict[str, Any]:
        return {key: value.to_dict() for key, value in self.fields.items()}
