from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..resources import PHYSICAL_PROVIDER, File, Folder, ResourceProvider, try_children
from ..runtime import log
from .config_files import (
    find_options_file,
    find_packages_file,
    get_options_file,
    get_packages_file,
)
from .exclusions import ExclusionPattern, excluded_patterns
from .paths import filter_included, resources_from_paths
from .root import ContextRoot


@dataclass(frozen=True)
class _WalkState:
    """What a folder inherits from the folders above it."""

    containing_root: int
    excluded_globs: tuple[ExclusionPattern, ...]
    options_file: File | None
    packages_file: File | None


class ContextLocator:
    """Partition a set of paths into independently configured context roots."""

    def __init__(self, resource_provider: ResourceProvider | None = None) -> None:
        self.resource_provider = resource_provider or PHYSICAL_PROVIDER

    def locate_roots(
        self,
        included_paths: Sequence[str],
        excluded_paths: Sequence[str] | None = None,
        options_file: str | None = None,
        packages_file: str | None = None,
    ) -> list[ContextRoot]:
        """Return the context roots covering `included_paths`.

        An `options_file` or `packages_file` that exists is used for every
        root, suppressing discovery of local files; one that does not exist
        is ignored.
        """
        provider = self.resource_provider
        included = resources_from_paths(provider, included_paths or [])
        excluded = resources_from_paths(provider, excluded_paths or [])
        included = filter_included(included, excluded)

        default_options = self._existing_file(options_file)
        default_packages = self._existing_file(packages_file)

        roots: list[ContextRoot] = []
        for folder in included.folders:
            root = ContextRoot(
                folder,
                options_file=default_options or find_options_file(folder),
                packages_file=default_packages or find_packages_file(folder),
            )
            root.included.append(folder)
            root.excluded_globs = excluded_patterns(root.options_file)
            roots.append(root)
            log(f"Created context root {folder.path}")
            state = _WalkState(
                containing_root=len(roots) - 1,
                excluded_globs=root.excluded_globs,
                options_file=default_options,
                packages_file=default_packages,
            )
            self._create_context_roots_in(roots, folder, excluded.folders, state)

        for file in excluded.files:
            owner = self._owning_root(roots, file)
            if owner is not None:
                owner.excluded.append(file)

        roots_by_parent: dict[Folder, ContextRoot] = {}
        for file in included.files:
            parent = file.parent
            root = roots_by_parent.get(parent)
            if root is None:
                root = ContextRoot(
                    parent,
                    options_file=default_options or find_options_file(parent),
                    packages_file=default_packages or find_packages_file(parent),
                )
                root.excluded_globs = excluded_patterns(root.options_file)
                roots_by_parent[parent] = root
                roots.append(root)
                log(f"Created context root {parent.path} for {file.path}")
            root.included.append(file)
        return roots

    @staticmethod
    def _owning_root(roots: list[ContextRoot], file: File) -> ContextRoot | None:
        """The root whose folders cover `file` without carving it out."""
        for root in roots:
            covered = any(
                isinstance(resource, Folder) and resource.contains(file.path)
                for resource in root.included
            )
            carved_out = any(
                isinstance(resource, Folder) and resource.contains(file.path)
                for resource in root.excluded
            )
            if covered and not carved_out:
                return root
        return None

    def _existing_file(self, path: str | None) -> File | None:
        if path is None:
            return None
        file = self.resource_provider.get_file(path)
        if not file.exists:
            log(f"Ignoring missing file {path}")
            return None
        return file

    def _create_context_roots(
        self,
        roots: list[ContextRoot],
        folder: Folder,
        excluded_folders: list[Folder],
        state: _WalkState,
    ) -> None:
        """Start a new root at `folder` if it has local configuration, then
        descend into its subdirectories.

        A forced options or packages file in `state` suppresses discovery of
        that kind of file; when the other kind is found locally the forced
        file still wins.
        """
        local_options = None
        if state.options_file is None:
            local_options = get_options_file(folder)
        local_packages = None
        if state.packages_file is None:
            local_packages = get_packages_file(folder)

        if local_options is not None or local_packages is not None:
            local_options = state.options_file or local_options
            local_packages = state.packages_file or local_packages
            containing = roots[state.containing_root]
            root = ContextRoot(
                folder,
                options_file=local_options or containing.options_file,
                packages_file=local_packages or containing.packages_file,
                parent=state.containing_root,
            )
            root.included.append(folder)
            root.excluded_globs = excluded_patterns(root.options_file)
            containing.excluded.append(folder)
            roots.append(root)
            log(f"Created context root {folder.path}")
            state = _WalkState(
                containing_root=len(roots) - 1,
                excluded_globs=root.excluded_globs,
                options_file=state.options_file,
                packages_file=state.packages_file,
            )
        self._create_context_roots_in(roots, folder, excluded_folders, state)

    def _create_context_roots_in(
        self,
        roots: list[ContextRoot],
        folder: Folder,
        excluded_folders: list[Folder],
        state: _WalkState,
    ) -> None:
        children = try_children(folder)
        if children.error is not None:
            log(f"Not descending into {folder.path}: {children.error}")
        for child in children.or_default([]):
            if not isinstance(child, Folder):
                continue
            if child.is_link:
                log(f"Not following symlinked folder {child.path}")
                continue
            if self._is_excluded(child, excluded_folders, state.excluded_globs):
                roots[state.containing_root].excluded.append(child)
            else:
                self._create_context_roots(roots, child, excluded_folders, state)

    @staticmethod
    def _is_excluded(
        folder: Folder,
        excluded_folders: Iterable[Folder],
        excluded_globs: Iterable[ExclusionPattern],
    ) -> bool:
        if folder in excluded_folders or folder.short_name.startswith("."):
            return True
        return any(
            pattern.matches(folder.path, is_folder=True) for pattern in excluded_globs
        )
