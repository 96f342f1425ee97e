from __future__ import annotations

from .base import File, FileSystemException, Folder, ResourceProvider


class MemoryResourceProvider(ResourceProvider):
    """An in-memory POSIX tree.

    Folders are created implicitly for every ancestor of a new file or folder.
    Paths added to `unreadable` behave as if permission were denied: listing
    or reading them raises `FileSystemException`.
    """

    def __init__(self) -> None:
        self._files: dict[str, str] = {}
        self._folders: set[str] = {"/"}
        self.unreadable: set[str] = set()

    def _add_ancestors(self, path: str) -> None:
        parent = self.path_context.dirname(path)
        while parent not in self._folders:
            self._folders.add(parent)
            parent = self.path_context.dirname(parent)

    def new_file(self, path: str, content: str = "") -> File:
        path = self.normalize(path)
        if path in self._folders:
            raise FileSystemException(path, "Folder exists")
        self._add_ancestors(path)
        self._files[path] = content
        return File(self, path)

    def new_folder(self, path: str) -> Folder:
        path = self.normalize(path)
        if path in self._files:
            raise FileSystemException(path, "File exists")
        self._add_ancestors(path)
        self._folders.add(path)
        return Folder(self, path)

    def delete(self, path: str) -> None:
        path = self.normalize(path)
        self._files.pop(path, None)
        if path in self._folders and path != "/":
            prefix = path + "/"
            self._folders = {
                p for p in self._folders if p != path and not p.startswith(prefix)
            }
            self._files = {
                p: c for p, c in self._files.items() if not p.startswith(prefix)
            }

    def is_file(self, path: str) -> bool:
        return path in self._files

    def is_folder(self, path: str) -> bool:
        return path in self._folders

    def list_names(self, path: str) -> list[str]:
        if path not in self._folders:
            raise FileSystemException(path, "Folder does not exist")
        if path in self.unreadable:
            raise FileSystemException(path, "Permission denied")
        names = {
            self.path_context.basename(p)
            for p in (*self._folders, *self._files)
            if p != path and self.path_context.dirname(p) == path
        }
        return sorted(names)

    def read_text(self, path: str) -> str:
        if path not in self._files:
            raise FileSystemException(path, "File does not exist")
        if path in self.unreadable:
            raise FileSystemException(path, "Permission denied")
        return self._files[path]
