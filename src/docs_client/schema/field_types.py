"""The closed set of front-matter field types."""

from enum import Enum


class FieldType(str, Enum):
    """Type tag of a schema field."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    RELATION = "relation"
    SELECT_TEXT = "select-text"
    SELECT_NUMBER = "select-number"
    MULTI_TEXT = "multi-text"
    MULTI_NUMBER = "multi-number"
    MULTI_RELATION = "multi-relation"
    MULTI_SELECT_TEXT = "multi-select-text"
    MULTI_SELECT_NUMBER = "multi-select-number"

    @property
    def is_multi(self) -> bool:
        return self.value.startswith("multi-")

    @property
    def is_relation(self) -> bool:
        return self in (FieldType.RELATION, FieldType.MULTI_RELATION)

    @property
    def is_select(self) -> bool:
        return "select-" in self.value
