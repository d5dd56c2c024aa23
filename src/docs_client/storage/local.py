"""Local-disk storage backend built on aiofiles."""

import asyncio
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

import aiofiles
import aiofiles.os
from loguru import logger

from docs_client.exceptions import StorageError
from docs_client.storage.base import StorageBackend
from docs_client.utils import join_path, normalize_path


class LocalStorage(StorageBackend):
    """Files under ``base_path`` on the local filesystem.

    Every ``OSError`` is converted to a returned :class:`StorageError`. Moves use
    ``os.replace``, which is atomic within one filesystem.
    """

    def __init__(self, base_path: Union[str, Path]):
        self.base_path = Path(base_path).expanduser().resolve()

    def _full_path(self, path: str) -> Path:
        relative = normalize_path(path)
        full_path = (self.base_path / relative).resolve() if relative else self.base_path
        if full_path != self.base_path and self.base_path not in full_path.parents:
            raise ValueError(f"Path escapes the storage root: {path}")
        return full_path

    def _error(self, action: str, path: str, e: Exception) -> StorageError:
        logger.error(f"Failed to {action} {path}: {e}")
        return StorageError(f"Failed to {action} {path}: {e}", path)

    async def read_file(self, path: str) -> Union[str, None, StorageError]:
        try:
            full_path = self._full_path(path)
            if not await aiofiles.os.path.isfile(full_path):
                return None
            async with aiofiles.open(full_path, mode="r", encoding="utf-8") as f:
                return await f.read()
        except (OSError, ValueError) as e:
            return self._error("read", path, e)

    async def read_directory_file_names(self, path: str) -> Union[List[str], StorageError]:
        try:
            return sorted(await aiofiles.os.listdir(self._full_path(path)))
        except (OSError, ValueError) as e:
            return self._error("list", path, e)

    async def read_directory_file_paths(self, path: str) -> Union[List[str], StorageError]:
        try:
            entries = await aiofiles.os.scandir(self._full_path(path))
            with entries:
                names = [entry.name for entry in entries if entry.is_file()]
        except (OSError, ValueError) as e:
            return self._error("list", path, e)
        return [join_path(path, name) for name in sorted(names)]

    async def is_file(self, path: str) -> bool:
        try:
            return await aiofiles.os.path.isfile(self._full_path(path))
        except ValueError:
            return False

    async def is_directory(self, path: str) -> bool:
        try:
            return await aiofiles.os.path.isdir(self._full_path(path))
        except ValueError:
            return False

    async def exists(self, path: str) -> bool:
        try:
            return await aiofiles.os.path.exists(self._full_path(path))
        except ValueError:
            return False

    async def get_file_size(self, path: str) -> Union[int, StorageError]:
        try:
            return (await aiofiles.os.stat(self._full_path(path))).st_size
        except (OSError, ValueError) as e:
            return self._error("stat", path, e)

    async def get_file_updated_time(self, path: str) -> Union[datetime, StorageError]:
        try:
            stat = await aiofiles.os.stat(self._full_path(path))
        except (OSError, ValueError) as e:
            return self._error("stat", path, e)
        return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)

    async def get_file_created_time(self, path: str) -> Union[datetime, StorageError]:
        try:
            stat = await aiofiles.os.stat(self._full_path(path))
        except (OSError, ValueError) as e:
            return self._error("stat", path, e)
        # st_birthtime is not available on every platform
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        return datetime.fromtimestamp(created, tz=timezone.utc)

    def get_base_path(self) -> str:
        return str(self.base_path)

    def resolve(self, path: str) -> str:
        return str(self._full_path(path))

    async def write_file(self, path: str, text: str) -> Optional[StorageError]:
        try:
            full_path = self._full_path(path)
            await aiofiles.os.makedirs(full_path.parent, exist_ok=True)
            async with aiofiles.open(full_path, mode="w", encoding="utf-8") as f:
                await f.write(text)
        except (OSError, ValueError) as e:
            return self._error("write", path, e)
        return None

    async def delete_file(self, path: str) -> Optional[StorageError]:
        try:
            await aiofiles.os.remove(self._full_path(path))
        except (OSError, ValueError) as e:
            return self._error("delete", path, e)
        return None

    async def copy_file(self, source: str, destination: str) -> Optional[StorageError]:
        try:
            target = self._full_path(destination)
            await aiofiles.os.makedirs(target.parent, exist_ok=True)
            await asyncio.to_thread(shutil.copy2, self._full_path(source), target)
        except (OSError, ValueError) as e:
            return self._error("copy", source, e)
        return None

    async def move_file(self, source: str, destination: str) -> Optional[StorageError]:
        try:
            target = self._full_path(destination)
            await aiofiles.os.makedirs(target.parent, exist_ok=True)
            await aiofiles.os.replace(self._full_path(source), target)
        except (OSError, ValueError) as e:
            return self._error("move", source, e)
        return None

    async def create_directory(self, path: str) -> Optional[StorageError]:
        try:
            await aiofiles.os.makedirs(self._full_path(path), exist_ok=True)
        except (OSError, ValueError) as e:
            return self._error("create directory", path, e)
        return None

    async def create_empty_directory(self, path: str) -> Optional[StorageError]:
        return await self.create_directory(path)
