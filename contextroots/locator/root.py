from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from ..resources import File, Folder, Resource, try_children
from ..runtime import log
from .exclusions import ExclusionPattern


@dataclass
class ContextRoot:
    """A directory tree analyzed with one options file and one package manifest.

    `included` and `excluded` keep insertion order. `parent` is the index, in
    the list returned by the locator, of the root this one was carved out of.
    """

    root: Folder
    options_file: File | None = None
    packages_file: File | None = None
    included: list[Resource] = field(default_factory=list)
    excluded: list[Resource] = field(default_factory=list)
    excluded_globs: tuple[ExclusionPattern, ...] = ()
    parent: int | None = None

    @property
    def included_paths(self) -> list[str]:
        return [resource.path for resource in self.included]

    @property
    def excluded_paths(self) -> list[str]:
        return [resource.path for resource in self.excluded]

    def is_analyzed(self, path: str) -> bool:
        """Return whether this root is responsible for `path`."""
        for resource in self.included:
            if resource.path == path:
                return isinstance(resource, File) or not self._is_excluded(path)
            if isinstance(resource, Folder) and resource.contains(path):
                return not self._is_excluded(path)
        return False

    def analyzed_files(self) -> Iterator[str]:
        """Yield the paths of all files analyzed in this root."""
        for resource in self.included:
            if isinstance(resource, File):
                yield resource.path
            elif isinstance(resource, Folder):
                yield from self._files_in(resource)

    def _files_in(self, folder: Folder) -> Iterator[str]:
        children = try_children(folder)
        if children.error is not None:
            log(f"Skipping unreadable folder {folder.path}: {children.error}")
        for child in children.or_default([]):
            if self._is_excluded(child.path, is_folder=isinstance(child, Folder)):
                continue
            if isinstance(child, Folder):
                if not child.is_link:
                    yield from self._files_in(child)
            elif child.exists:
                yield child.path

    def _is_excluded(self, path: str, *, is_folder: bool = False) -> bool:
        for resource in self.excluded:
            if resource.path == path:
                return True
            if isinstance(resource, Folder) and resource.contains(path):
                return True
        for pattern in self.excluded_globs:
            if pattern.matches(path, is_folder=is_folder):
                return True
        return self._has_hidden_segment(path)

    def _has_hidden_segment(self, path: str) -> bool:
        if not self.root.contains(path):
            return False
        context = self.root.provider.path_context
        relative = context.relpath(path, self.root.path)
        return any(part.startswith(".") for part in relative.split(context.sep))

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root.path,
            "options_file": self.options_file.path if self.options_file else None,
            "packages_file": self.packages_file.path if self.packages_file else None,
            "included": self.included_paths,
            "excluded": self.excluded_paths,
            "exclude_patterns": [p.pattern for p in self.excluded_globs],
            "parent": self.parent,
        }
