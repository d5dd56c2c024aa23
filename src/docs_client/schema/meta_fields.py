"""Strict per-type parsing of front-matter values.

Every field type has a pydantic adapter and a default. ``from_type`` parses a raw
value strictly and raises on mismatch; callers that want tolerant behaviour go
through :class:`docs_client.schema.custom_schema.CustomSchemaFieldValue`.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from docs_client.exceptions import InvalidFieldValueError
from docs_client.schema.field_types import FieldType

Number = Union[StrictInt, StrictFloat]


@dataclass(frozen=True)
class FieldSpec:
    adapter: TypeAdapter
    default: Any


FIELD_SPECS: Dict[FieldType, FieldSpec] = {
    FieldType.TEXT: FieldSpec(TypeAdapter(Optional[StrictStr]), ""),
    FieldType.NUMBER: FieldSpec(TypeAdapter(Optional[Number]), 0),
    FieldType.BOOLEAN: FieldSpec(TypeAdapter(Optional[StrictBool]), False),
    FieldType.RELATION: FieldSpec(TypeAdapter(Optional[StrictStr]), None),
    FieldType.SELECT_TEXT: FieldSpec(TypeAdapter(Optional[StrictStr]), None),
    FieldType.SELECT_NUMBER: FieldSpec(TypeAdapter(Optional[Number]), None),
    FieldType.MULTI_TEXT: FieldSpec(TypeAdapter(List[StrictStr]), []),
    FieldType.MULTI_NUMBER: FieldSpec(TypeAdapter(List[Number]), []),
    FieldType.MULTI_RELATION: FieldSpec(TypeAdapter(List[StrictStr]), []),
    FieldType.MULTI_SELECT_TEXT: FieldSpec(TypeAdapter(List[StrictStr]), []),
    FieldType.MULTI_SELECT_NUMBER: FieldSpec(TypeAdapter(List[Number]), []),
}

_missing = set(FieldType) - set(FIELD_SPECS)
if _missing:  # pragma: no cover
    raise RuntimeError(f"Field types without a spec: {sorted(t.value for t in _missing)}")


def _spec(field_type: FieldType) -> FieldSpec:
    return FIELD_SPECS[FieldType(field_type)]


def default_value(field_type: FieldType) -> Any:
    """Default used for a required field whose value is missing or invalid."""
    default = _spec(field_type).default
    return list(default) if isinstance(default, list) else default


def empty_value(field_type: FieldType) -> Any:
    """Value of a declared but absent optional field."""
    return [] if FieldType(field_type).is_multi else None


def parse_value(key: str, field_type: FieldType, raw_value: Any) -> Any:
    """Validate ``raw_value`` against ``field_type``, raising on mismatch."""
    try:
        return _spec(field_type).adapter.validate_python(raw_value)
    except ValidationError as e:
        raise InvalidFieldValueError(key, FieldType(field_type).value, raw_value) from e


@dataclass(frozen=True)
class MetaFieldValue:
    """A validated front-matter value tagged with its field type."""

    key: str
    type: FieldType
    value: Any

    @property
    def is_empty(self) -> bool:
        return self.value is None or self.value == []


def from_type(key: str, field_type: FieldType, raw_value: Any) -> MetaFieldValue:
    """Build a typed field value, raising InvalidFieldValueError on mismatch."""
    field_type = FieldType(field_type)
    return MetaFieldValue(key=key, type=field_type, value=parse_value(key, field_type, raw_value))
