"""Shared behaviour of document entities."""

from typing import Any, Callable, Dict, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from docs_client.values.paths import FilePath

EntityT = TypeVar("EntityT", bound="BaseEntity")


class BaseEntity(BaseModel):
    """A document read from storage: a path, a content value and its archive flag.

    Entities are frozen. ``with_*`` methods return new, re-validated instances.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: FilePath
    is_archived: bool = False

    def _copy(self: EntityT, **changes: Any) -> EntityT:
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self).model_validate(data)

    def with_path(self: EntityT, path: Union[FilePath, Callable[[FilePath], FilePath]]) -> EntityT:
        new_path = path(self.path) if callable(path) else path
        return self._copy(path=new_path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": getattr(self, "type"),
            "path": self.path.model_dump(),
            "is_archived": self.is_archived,
        }
