"""Exceptions for docs-client.

Recoverable failures (missing files, backend I/O errors) are returned as
instances of these classes. Programmer errors are raised.
"""

from typing import Any, Optional


class DocsClientError(Exception):
    """Base exception for docs-client errors."""


class DocumentNotFoundError(DocsClientError):
    """No document exists at the requested path (or its archived location)."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Document not found: {path}")


class StorageError(DocsClientError):
    """A storage backend failed to complete an I/O operation."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class SchemaFieldError(DocsClientError, KeyError):
    """A key was accessed that the schema does not declare."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Field '{key}' is not declared in the schema")

    def __str__(self) -> str:
        return self.args[0]


class InvalidFieldValueError(DocsClientError, ValueError):
    """A value does not match the declared field type."""

    def __init__(self, key: str, field_type: Any, value: Any):
        self.key = key
        self.field_type = field_type
        self.value = value
        super().__init__(f"Invalid value for field '{key}' ({field_type}): {value!r}")


class NotArchivedError(DocsClientError):
    """Restore was requested for a file that is not inside an archive directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File is not in an archive directory: {path}")


class InvalidPathError(DocsClientError, ValueError):
    """A path was handed to a reference that cannot handle it."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")
