"""Discovery of analysis options files and package manifests."""

from __future__ import annotations

from ..resources import File, Folder

ANALYSIS_OPTIONS_NAME = "analysis_options.yaml"
DOT_DART_TOOL_NAME = ".dart_tool"
PACKAGE_CONFIG_JSON_NAME = "package_config.json"
DOT_PACKAGES_NAME = ".packages"


def _get_file(folder: Folder, name: str) -> File | None:
    resource = folder.get_child(name)
    if isinstance(resource, File) and resource.exists:
        return resource
    return None


def get_options_file(folder: Folder) -> File | None:
    """Return the analysis options file directly inside `folder`, if any."""
    return _get_file(folder, ANALYSIS_OPTIONS_NAME)


def get_packages_file(folder: Folder) -> File | None:
    """Return the package manifest directly inside `folder`, if any.

    `.dart_tool/package_config.json` takes precedence over `.packages`.
    """
    package_config = folder.get_child_assuming_folder(
        DOT_DART_TOOL_NAME
    ).get_child_assuming_file(PACKAGE_CONFIG_JSON_NAME)
    if package_config.exists:
        return package_config
    return _get_file(folder, DOT_PACKAGES_NAME)


def find_options_file(folder: Folder | None) -> File | None:
    """Return the options file in `folder` or its nearest ancestor."""
    while folder is not None:
        options_file = get_options_file(folder)
        if options_file is not None:
            return options_file
        folder = folder.parent
    return None


def find_packages_file(folder: Folder | None) -> File | None:
    """Return the package manifest in `folder` or its nearest ancestor."""
    while folder is not None:
        packages_file = get_packages_file(folder)
        if packages_file is not None:
            return packages_file
        folder = folder.parent
    return None
