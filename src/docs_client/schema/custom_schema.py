"""Consumer-declared schemas for markdown front matter."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from docs_client.exceptions import InvalidFieldValueError
from docs_client.schema.field_types import FieldType
from docs_client.schema.meta_fields import default_value, empty_value, parse_value


class CustomSchemaField(BaseModel):
    """Definition of a single front-matter field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: FieldType
    required: bool = False
    path: Optional[str] = Field(
        default=None,
        description="Directory holding the related documents (relation types only)",
    )


CustomSchema = Mapping[str, CustomSchemaField]


def schema_field(
    field_type: Union[FieldType, str], required: bool = False, path: Optional[str] = None
) -> CustomSchemaField:
    """Shorthand for declaring a field.

    >>> schema_field("relation", required=True, path="../authors").path
    '../authors'
    """
    return CustomSchemaField(type=FieldType(field_type), required=required, path=path)


def define_schema(fields: Mapping[str, Union[CustomSchemaField, Mapping[str, Any]]]) -> Dict[str, CustomSchemaField]:
    """Validate a schema declaration. Invalid definitions raise ``pydantic.ValidationError``."""
    return {
        key: value if isinstance(value, CustomSchemaField) else CustomSchemaField.model_validate(value)
        for key, value in fields.items()
    }


@dataclass(frozen=True)
class CustomSchemaFieldValue:
    """A schema field bound to its key, with the tolerant validation policy.

    Values that are missing or fail the strict parse fall back to the type's
    default when the field is required, and to the empty value otherwise.
    """

    key: str
    field: CustomSchemaField

    @property
    def type(self) -> FieldType:
        return self.field.type

    @property
    def required(self) -> bool:
        return self.field.required

    def default_value(self) -> Any:
        return default_value(self.type)

    def empty_value(self) -> Any:
        return empty_value(self.type)

    def validate(self, raw_value: Any) -> Any:
        if raw_value is not None:
            try:
                return parse_value(self.key, self.type, raw_value)
            except InvalidFieldValueError as e:
                logger.debug(f"Falling back for field '{self.key}': {e}")
        return self.default_value() if self.required else self.empty_value()
