from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .locator import ContextRoot
    from .resources import ResourceProvider


def locate_roots(
    included_paths: Sequence[str],
    excluded_paths: Sequence[str] | None = None,
    *,
    options_file: str | None = None,
    packages_file: str | None = None,
    resource_provider: ResourceProvider | None = None,
) -> list[ContextRoot]:
    from .locator import ContextLocator

    locator = ContextLocator(resource_provider)
    return locator.locate_roots(
        included_paths,
        excluded_paths,
        options_file=options_file,
        packages_file=packages_file,
    )


def analyzed_files(
    included_paths: Sequence[str],
    excluded_paths: Sequence[str] | None = None,
    *,
    options_file: str | None = None,
    packages_file: str | None = None,
    resource_provider: ResourceProvider | None = None,
) -> dict[str, list[str]]:
    roots = locate_roots(
        included_paths,
        excluded_paths,
        options_file=options_file,
        packages_file=packages_file,
        resource_provider=resource_provider,
    )
    return {root.root.path: list(root.analyzed_files()) for root in roots}


__all__ = [
    "locate_roots",
    "analyzed_files",
]
