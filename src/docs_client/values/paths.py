"""Path values for files and directories inside a storage backend."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from docs_client.utils import basename, dirname, extname, join_path, normalize_path, stem


class FilePath(BaseModel):
    """Location of a file.

    ``name`` is the file name without extension, except for index files, which
    take the name of the directory they describe.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    full_path: str
    name_with_extension: str

    @classmethod
    def from_path(
        cls,
        path: str,
        full_path: Optional[str] = None,
        index_file_name: str = "index.md",
        archive_directory_name: str = "_",
        default_directory_name: Optional[str] = None,
    ) -> "FilePath":
        """Build a file path. A root index takes ``default_directory_name`` when given."""
        path = normalize_path(path)
        file_name = basename(path)
        name = stem(path)

        if file_name == index_file_name:
            parent = dirname(path)
            if basename(parent) == archive_directory_name:
                parent = dirname(parent)
            if parent:
                name = basename(parent)
            elif default_directory_name:
                name = default_directory_name

        return cls(
            name=name,
            path=path,
            full_path=full_path if full_path is not None else path,
            name_with_extension=file_name,
        )

    @property
    def directory_path(self) -> str:
        return dirname(self.path)

    @property
    def extension(self) -> str:
        """Extension without the leading dot."""
        return extname(self.path).lstrip(".")


class DirectoryPath(BaseModel):
    """Location of a directory. The root is the empty path."""

    model_config = ConfigDict(frozen=True)

    path: str
    name: str
    full_path: str
    archive_directory_name: str = "_"

    @classmethod
    def from_path(
        cls, path: str, full_path: Optional[str] = None, archive_directory_name: str = "_"
    ) -> "DirectoryPath":
        path = normalize_path(path)
        return cls(
            path=path,
            name=basename(path),
            full_path=full_path if full_path is not None else path,
            archive_directory_name=archive_directory_name,
        )

    @property
    def segments(self) -> List[str]:
        return self.path.split("/") if self.path else []

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return self.path == ""

    @property
    def is_archived(self) -> bool:
        return self.name == self.archive_directory_name

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def parent(self) -> Optional["DirectoryPath"]:
        if self.is_root:
            return None
        return DirectoryPath.from_path(
            dirname(self.path), archive_directory_name=self.archive_directory_name
        )

    def file_path(self, file_name: str) -> str:
        return join_path(self.path, file_name)

    def index_file_path(self, index_file_name: str = "index.md") -> str:
        return self.file_path(index_file_name)

    def subdirectory(self, name: str) -> "DirectoryPath":
        return DirectoryPath.from_path(
            join_path(self.path, name), archive_directory_name=self.archive_directory_name
        )

    def contains(self, path: str) -> bool:
        """Whether ``path`` lies strictly below this directory."""
        path = normalize_path(path)
        if self.is_root:
            return path != ""
        return path.startswith(f"{self.path}/")
