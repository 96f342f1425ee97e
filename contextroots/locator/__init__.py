from .builder import ContextLocator
from .config_files import (
    ANALYSIS_OPTIONS_NAME,
    DOT_DART_TOOL_NAME,
    DOT_PACKAGES_NAME,
    PACKAGE_CONFIG_JSON_NAME,
    find_options_file,
    find_packages_file,
    get_options_file,
    get_packages_file,
)
from .exclusions import (
    ExclusionPattern,
    OptionsParseError,
    excluded_patterns,
    parse_exclude_list,
)
from .paths import filter_included, resources_from_paths, unique_sorted_paths
from .root import ContextRoot

__all__ = [
    "ContextLocator",
    "ContextRoot",
    "ExclusionPattern",
    "OptionsParseError",
    "excluded_patterns",
    "parse_exclude_list",
    "find_options_file",
    "find_packages_file",
    "get_options_file",
    "get_packages_file",
    "filter_included",
    "resources_from_paths",
    "unique_sorted_paths",
    "ANALYSIS_OPTIONS_NAME",
    "DOT_DART_TOOL_NAME",
    "DOT_PACKAGES_NAME",
    "PACKAGE_CONFIG_JSON_NAME",
]
