"""Values produced when a directory is read as a relation lookup table."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from docs_client.utils import stem


class RelationFile(BaseModel):
    """One selectable target of a relation field. ``label`` falls back to ``name``."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: Optional[str] = None
    value: Optional[str] = None
    path: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _label_fallback(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            data = {**data, "label": data.get("name")}
        return data

    @classmethod
    def from_file(cls, file_path: str, title: Optional[str] = None) -> "RelationFile":
        return cls(name=stem(file_path), label=title)

    @property
    def id(self) -> str:
        return self.name

    @property
    def slug(self) -> str:
        return self.name


class Relation(BaseModel):
    """A directory path and the documents it offers as relation targets."""

    model_config = ConfigDict(frozen=True)

    path: str
    files: List[RelationFile] = []

    @classmethod
    def empty(cls, path: str) -> "Relation":
        return cls(path=path)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def is_empty(self) -> bool:
        return not self.files

    def find(self, slug: str) -> Optional[RelationFile]:
        return next((file for file in self.files if file.name == slug), None)
