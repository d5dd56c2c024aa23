"""Field type system for document front matter."""

from docs_client.schema.custom_schema import (
    CustomSchema,
    CustomSchemaField,
    CustomSchemaFieldValue,
    define_schema,
    schema_field,
)
from docs_client.schema.field_types import FieldType
from docs_client.schema.index_schema import IndexSchemaField, IndexSchemaValue
from docs_client.schema.meta_fields import MetaFieldValue, default_value, empty_value, from_type

__all__ = [
    "CustomSchema",
    "CustomSchemaField",
    "CustomSchemaFieldValue",
    "FieldType",
    "IndexSchemaField",
    "IndexSchemaValue",
    "MetaFieldValue",
    "default_value",
    "define_schema",
    "empty_value",
    "from_type",
    "schema_field",
]
