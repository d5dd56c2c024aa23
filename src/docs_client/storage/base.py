"""The capability interface every storage backend implements.

Paths are backend-relative POSIX strings; the root is "". Methods return
``None`` on success (write side) or the requested value (read side), and a
:class:`StorageError` instance when the backend fails. ``read_file`` returns
``None`` for a file that does not exist, which is not a failure.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Union

from docs_client.exceptions import StorageError


class StorageBackend(ABC):
    # Read side

    @abstractmethod
    async def read_file(self, path: str) -> Union[str, None, StorageError]: ...

    @abstractmethod
    async def read_directory_file_names(self, path: str) -> Union[List[str], StorageError]:
        """Names of the immediate children (files and directories) of ``path``."""

    @abstractmethod
    async def read_directory_file_paths(self, path: str) -> Union[List[str], StorageError]:
        """Backend-relative paths of the files directly inside ``path``."""

    @abstractmethod
    async def is_file(self, path: str) -> bool: ...

    @abstractmethod
    async def is_directory(self, path: str) -> bool: ...

    @abstractmethod
    async def exists(self, path: str) -> bool: ...

    @abstractmethod
    async def get_file_size(self, path: str) -> Union[int, StorageError]: ...

    @abstractmethod
    async def get_file_updated_time(self, path: str) -> Union[datetime, StorageError]: ...

    @abstractmethod
    async def get_file_created_time(self, path: str) -> Union[datetime, StorageError]: ...

    @abstractmethod
    def get_base_path(self) -> str: ...

    @abstractmethod
    def resolve(self, path: str) -> str:
        """Backend-absolute form of a relative path."""

    # Write side

    @abstractmethod
    async def write_file(self, path: str, text: str) -> Optional[StorageError]: ...

    @abstractmethod
    async def delete_file(self, path: str) -> Optional[StorageError]: ...

    @abstractmethod
    async def copy_file(self, source: str, destination: str) -> Optional[StorageError]: ...

    @abstractmethod
    async def move_file(self, source: str, destination: str) -> Optional[StorageError]: ...

    @abstractmethod
    async def create_directory(self, path: str) -> Optional[StorageError]: ...

    @abstractmethod
    async def create_empty_directory(self, path: str) -> Optional[StorageError]:
        """Create a directory that stays visible even while it holds no files."""
