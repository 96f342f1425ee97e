from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..resources import File, Folder, Resource, ResourceProvider


def unique_sorted_paths(paths: Iterable[str]) -> list[str]:
    """Drop duplicates and order so that shorter (ancestor) paths come first."""
    return sorted(set(paths), key=lambda path: (len(path), path))


def contained_in_any(folders: Iterable[Folder], resource: Resource) -> bool:
    return any(folder.is_or_contains(resource.path) for folder in folders)


@dataclass
class ResourceSet:
    folders: list[Folder] = field(default_factory=list)
    files: list[File] = field(default_factory=list)


def resources_from_paths(
    provider: ResourceProvider, paths: Iterable[str]
) -> ResourceSet:
    """Resolve `paths` into existing folders and files.

    Paths that do not exist are dropped, as are paths already covered by a
    folder accepted earlier in the same pass.
    """
    result = ResourceSet()
    for path in unique_sorted_paths(provider.normalize(p) for p in paths):
        resource = provider.get_resource(path)
        if not resource.exists or contained_in_any(result.folders, resource):
            continue
        if isinstance(resource, Folder):
            result.folders.append(resource)
        elif isinstance(resource, File):
            result.files.append(resource)
    return result


def filter_included(included: ResourceSet, excluded: ResourceSet) -> ResourceSet:
    """Remove included resources shadowed by an exclusion."""
    excluded_files = set(excluded.files)
    folders = [
        folder
        for folder in included.folders
        if not contained_in_any(excluded.folders, folder)
    ]
    files = [
        file
        for file in included.files
        if not contained_in_any(excluded.folders, file)
        and file not in excluded_files
        and not contained_in_any(folders, file)
    ]
    return ResourceSet(folders=folders, files=files)
