from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml
from pathspec import GitIgnoreSpec

from ..resources import File, try_read
from ..runtime import log
from ..utils import brace_expand

ANALYZER_KEY = "analyzer"
EXCLUDE_KEY = "exclude"


class OptionsParseError(ValueError):
    """Raised when an options file does not have the expected shape."""


@dataclass(frozen=True)
class ExclusionPattern:
    """A glob anchored to an absolute path, matched against full paths.

    `{a,b}` alternatives are expanded before compiling, so one pattern can
    stand for several gitignore-style lines.
    """

    pattern: str
    _spec: GitIgnoreSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_spec", GitIgnoreSpec.from_lines(brace_expand(self.pattern))
        )

    def matches(self, path: str, *, is_folder: bool = False) -> bool:
        if self._spec.match_file(path):
            return True
        return is_folder and self._spec.match_file(path.rstrip("/") + "/")


def parse_exclude_list(content: str) -> list[str]:
    """Return the `analyzer: exclude:` strings from options file `content`."""
    try:
        doc: Any = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise OptionsParseError(f"Invalid YAML: {exc}") from exc
    if doc is None:
        return []
    if not isinstance(doc, dict):
        raise OptionsParseError("Options file must be a YAML mapping")
    analyzer = doc.get(ANALYZER_KEY)
    if analyzer is None:
        return []
    if not isinstance(analyzer, dict):
        raise OptionsParseError(f"'{ANALYZER_KEY}' must be a mapping")
    exclude = analyzer.get(EXCLUDE_KEY)
    if exclude is None:
        return []
    if not isinstance(exclude, list):
        raise OptionsParseError(f"'{EXCLUDE_KEY}' must be a list")
    if not all(isinstance(item, str) for item in exclude):
        raise OptionsParseError(f"'{EXCLUDE_KEY}' entries must be strings")
    return list(exclude)


def excluded_patterns(options_file: File | None) -> tuple[ExclusionPattern, ...]:
    """Compile the exclusion globs declared by `options_file`.

    Relative patterns are joined to the options file's directory. Any problem
    reading or parsing the file yields no patterns.
    """
    if options_file is None:
        return ()
    content = try_read(options_file)
    if content.error is not None:
        log(f"Could not read {options_file.path}: {content.error}")
        return ()
    if content.absent:
        return ()
    try:
        excludes = parse_exclude_list(content.value)
    except OptionsParseError as exc:
        log(f"Ignoring exclusions in {options_file.path}: {exc}")
        return ()

    context = options_file.provider.path_context
    base = context.dirname(options_file.path)
    patterns = []
    for excluded_path in excludes:
        if not context.isabs(excluded_path):
            excluded_path = context.join(base, excluded_path)
        try:
            patterns.append(ExclusionPattern(excluded_path))
        except ValueError as exc:
            log(f"Skipping invalid pattern {excluded_path!r}: {exc}")
    return tuple(patterns)
