from __future__ import annotations

import os

from .base import FileSystemException, ResourceProvider


class PhysicalResourceProvider(ResourceProvider):
    """Resources backed by the local filesystem."""

    path_context = os.path

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_folder(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    def list_names(self, path: str) -> list[str]:
        try:
            with os.scandir(path) as entries:
                return sorted(entry.name for entry in entries)
        except OSError as exc:
            raise FileSystemException(path, exc.strerror or str(exc)) from exc

    def read_text(self, path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileSystemException(path, str(exc)) from exc


PHYSICAL_PROVIDER = PhysicalResourceProvider()
