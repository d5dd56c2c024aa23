"""Contents of a per-directory metadata file (``.meta.json`` by default)."""

import json
from typing import Any, Dict, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

from docs_client.schema.index_schema import IndexSchemaValue


class DirectoryMetaValue(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    icon: Optional[str] = None
    schema_: Optional[Dict[str, Any]] = None

    @classmethod
    def from_json(cls, text: str) -> Optional["DirectoryMetaValue"]:
        """Parse the file, returning None (and logging) when it is unusable."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring invalid directory metadata JSON: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring directory metadata that is not a JSON object")
            return None
        try:
            return cls(icon=data.get("icon"), schema_=data.get("schema"))
        except ValidationError as e:
            logger.warning(f"Ignoring malformed directory metadata: {e}")
            return None

    def index_schema(self) -> Optional[IndexSchemaValue]:
        if self.schema_ is None:
            return None
        return IndexSchemaValue.from_record(self.schema_)

    def to_json(self) -> str:
        data: Dict[str, Any] = {}
        if self.icon is not None:
            data["icon"] = self.icon
        if self.schema_ is not None:
            data["schema"] = self.schema_
        return json.dumps(data, indent=2, ensure_ascii=False)
