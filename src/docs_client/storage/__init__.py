"""Storage backends the reference layer reads from and writes to."""

from docs_client.storage.base import StorageBackend
from docs_client.storage.local import LocalStorage
from docs_client.storage.memory import MemoryStorage

__all__ = ["LocalStorage", "MemoryStorage", "StorageBackend"]
