from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class FileSystemException(OSError):
    """Raised when a resource cannot be listed or read."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message


class InvalidPathError(ValueError):
    """Raised for a path that is not absolute or otherwise malformed."""


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """A value, an absence, or an environmental error."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @property
    def absent(self) -> bool:
        return self.error is None and self.value is None

    def or_default(self, default: T) -> T:
        if self.value is None:
            return default
        return self.value


class Resource:
    def __init__(self, provider: "ResourceProvider", path: str) -> None:
        self.provider = provider
        self.path = path

    @property
    def short_name(self) -> str:
        return self.provider.path_context.basename(self.path)

    @property
    def parent(self) -> "Folder | None":
        context = self.provider.path_context
        parent_path = context.dirname(self.path)
        if parent_path == self.path:
            return None
        return self.provider.get_folder(parent_path)

    @property
    def exists(self) -> bool:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.provider is other.provider
            and self.path == other.path
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class File(Resource):
    @property
    def exists(self) -> bool:
        return self.provider.is_file(self.path)

    def read_as_string(self) -> str:
        return self.provider.read_text(self.path)


class Folder(Resource):
    @property
    def exists(self) -> bool:
        return self.provider.is_folder(self.path)

    @property
    def is_link(self) -> bool:
        return self.provider.is_link(self.path)

    def contains(self, path: str) -> bool:
        """True if `path` is strictly nested under this folder."""
        context = self.provider.path_context
        prefix = self.path if self.path.endswith(context.sep) else self.path + context.sep
        return path.startswith(prefix) and path != self.path

    def is_or_contains(self, path: str) -> bool:
        return path == self.path or self.contains(path)

    def get_child(self, name: str) -> Resource:
        return self.provider.get_resource(self.provider.path_context.join(self.path, name))

    def get_child_assuming_file(self, name: str) -> File:
        return self.provider.get_file(self.provider.path_context.join(self.path, name))

    def get_child_assuming_folder(self, name: str) -> "Folder":
        return self.provider.get_folder(self.provider.path_context.join(self.path, name))

    def get_children(self) -> list[Resource]:
        return [
            self.provider.get_resource(self.provider.path_context.join(self.path, name))
            for name in self.provider.list_names(self.path)
        ]


class ResourceProvider:
    """Access to a tree of files and folders addressed by absolute paths.

    Subclasses implement the primitive queries; `get_resource` and friends
    build `File`/`Folder` handles on top of them.
    """

    path_context = posixpath

    def normalize(self, path: str) -> str:
        if not isinstance(path, str) or not path or "\0" in path:
            raise InvalidPathError(f"Invalid path: {path!r}")
        if not self.path_context.isabs(path):
            raise InvalidPathError(f"Path must be absolute: {path}")
        return self.path_context.normpath(path)

    def get_resource(self, path: str) -> Resource:
        path = self.normalize(path)
        if self.is_folder(path):
            return Folder(self, path)
        return File(self, path)

    def get_file(self, path: str) -> File:
        return File(self, self.normalize(path))

    def get_folder(self, path: str) -> Folder:
        return Folder(self, self.normalize(path))

    def is_file(self, path: str) -> bool:
        raise NotImplementedError

    def is_folder(self, path: str) -> bool:
        raise NotImplementedError

    def is_link(self, path: str) -> bool:
        return False

    def list_names(self, path: str) -> list[str]:
        raise NotImplementedError

    def read_text(self, path: str) -> str:
        raise NotImplementedError


def try_read(file: File) -> Outcome[str]:
    if not file.exists:
        return Outcome()
    try:
        return Outcome(value=file.read_as_string())
    except FileSystemException as exc:
        return Outcome(error=exc)


def try_children(folder: Folder) -> Outcome[list[Resource]]:
    try:
        return Outcome(value=folder.get_children())
    except FileSystemException as exc:
        return Outcome(error=exc)

