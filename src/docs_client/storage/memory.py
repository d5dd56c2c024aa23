"""In-memory storage backend.

Holds files in a dictionary keyed by backend-relative path. Directories exist
implicitly while they contain files, or explicitly once created. The whole
store can be serialized to and from a JSON blob.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Set, Union

from loguru import logger

from docs_client.exceptions import StorageError
from docs_client.storage.base import StorageBackend
from docs_client.utils import dirname, normalize_path


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MemoryFile:
    content: str
    created_at: datetime
    updated_at: datetime


class MemoryStorage(StorageBackend):
    def __init__(self, files: Optional[Mapping[str, str]] = None, base_path: str = "/memory"):
        self._files: Dict[str, MemoryFile] = {}
        self._directories: Set[str] = set()
        self._base_path = base_path
        for path, content in (files or {}).items():
            self._store(normalize_path(path), content)

    @classmethod
    def from_files(cls, files: Mapping[str, str], base_path: str = "/memory") -> "MemoryStorage":
        return cls(files, base_path)

    @classmethod
    def from_json(cls, text: str, base_path: str = "/memory") -> "MemoryStorage":
        """Load a blob written by :meth:`to_json`, or a plain ``{path: content}`` object."""
        data = json.loads(text)
        if "files" in data and isinstance(data["files"], dict):
            storage = cls(data["files"], base_path)
            for directory in data.get("directories", []):
                storage._directories.add(normalize_path(directory))
            return storage
        return cls(data, base_path)

    def to_json(self) -> str:
        return json.dumps(
            {
                "files": {path: file.content for path, file in sorted(self._files.items())},
                "directories": sorted(self._directories),
            },
            ensure_ascii=False,
            indent=2,
        )

    def _store(self, path: str, content: str, created_at: Optional[datetime] = None) -> None:
        now = _now()
        self._files[path] = MemoryFile(content=content, created_at=created_at or now, updated_at=now)

    def _has_directory(self, path: str) -> bool:
        if path == "" or path in self._directories:
            return True
        prefix = f"{path}/"
        return any(name.startswith(prefix) for name in self._files) or any(
            name.startswith(prefix) for name in self._directories
        )

    async def read_file(self, path: str) -> Union[str, None, StorageError]:
        file = self._files.get(normalize_path(path))
        return file.content if file else None

    async def read_directory_file_names(self, path: str) -> Union[List[str], StorageError]:
        path = normalize_path(path)
        if not self._has_directory(path):
            return StorageError(f"Directory not found: {path}", path)

        prefix = f"{path}/" if path else ""
        names: Set[str] = set()
        for entry in [*self._files, *self._directories]:
            if entry.startswith(prefix) and entry != path:
                names.add(entry[len(prefix) :].split("/")[0])
        return sorted(names)

    async def read_directory_file_paths(self, path: str) -> Union[List[str], StorageError]:
        path = normalize_path(path)
        if not self._has_directory(path):
            return StorageError(f"Directory not found: {path}", path)
        return sorted(name for name in self._files if dirname(name) == path)

    async def is_file(self, path: str) -> bool:
        return normalize_path(path) in self._files

    async def is_directory(self, path: str) -> bool:
        path = normalize_path(path)
        return path not in self._files and self._has_directory(path)

    async def exists(self, path: str) -> bool:
        return await self.is_file(path) or await self.is_directory(path)

    async def get_file_size(self, path: str) -> Union[int, StorageError]:
        file = self._files.get(normalize_path(path))
        if file is None:
            return StorageError(f"File not found: {path}", path)
        return len(file.content.encode("utf-8"))

    async def get_file_updated_time(self, path: str) -> Union[datetime, StorageError]:
        file = self._files.get(normalize_path(path))
        if file is None:
            return StorageError(f"File not found: {path}", path)
        return file.updated_at

    async def get_file_created_time(self, path: str) -> Union[datetime, StorageError]:
        file = self._files.get(normalize_path(path))
        if file is None:
            return StorageError(f"File not found: {path}", path)
        return file.created_at

    def get_base_path(self) -> str:
        return self._base_path

    def resolve(self, path: str) -> str:
        relative = normalize_path(path)
        return f"{self._base_path.rstrip('/')}/{relative}" if relative else self._base_path

    async def write_file(self, path: str, text: str) -> Optional[StorageError]:
        path = normalize_path(path)
        if not path:
            return StorageError("Cannot write to the root directory", path)
        existing = self._files.get(path)
        self._store(path, text, existing.created_at if existing else None)
        logger.trace(f"Wrote {path} ({len(text)} chars)")
        return None

    async def delete_file(self, path: str) -> Optional[StorageError]:
        path = normalize_path(path)
        if self._files.pop(path, None) is None:
            return StorageError(f"File not found: {path}", path)
        return None

    async def copy_file(self, source: str, destination: str) -> Optional[StorageError]:
        file = self._files.get(normalize_path(source))
        if file is None:
            return StorageError(f"File not found: {source}", source)
        self._store(normalize_path(destination), file.content)
        return None

    async def move_file(self, source: str, destination: str) -> Optional[StorageError]:
        source = normalize_path(source)
        destination = normalize_path(destination)
        file = self._files.pop(source, None)
        if file is None:
            return StorageError(f"File not found: {source}", source)
        file.updated_at = _now()
        self._files[destination] = file
        return None

    async def create_directory(self, path: str) -> Optional[StorageError]:
        path = normalize_path(path)
        if path in self._files:
            return StorageError(f"A file exists at {path}", path)
        if path:
            self._directories.add(path)
        return None

    async def create_empty_directory(self, path: str) -> Optional[StorageError]:
        return await self.create_directory(path)

    def file_paths(self) -> List[str]:
        """Every stored file path, sorted."""
        return sorted(self._files)
