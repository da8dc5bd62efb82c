"""
Ignore-list path filtering.

Ignore lists are newline-separated glob patterns. Matching is done on the
full path with ``fnmatch``, where ``*`` also matches ``/``, so a pattern
like ``vendor/*`` excludes every file below ``vendor/``.
"""

import fnmatch
from typing import Iterable, List, Optional, Union

from lintbot.errors import ConfigResolutionError


def parse_ignore_list(value: Optional[Union[str, Iterable[str]]]) -> List[str]:
    """
    Split an ignore-list configuration value into glob patterns.

    Args:
        value: Newline-separated string, list of patterns, or None

    Returns:
        Patterns with blank lines and ``#`` comments removed

    Raises:
        ConfigResolutionError: If the value is neither a string nor a list
    """
    if value is None:
        return []

    if isinstance(value, str):
        lines = value.splitlines()
    elif isinstance(value, (list, tuple)):
        if not all(isinstance(v, str) for v in value):
            raise ConfigResolutionError(f"Ignore list entries must be strings, got {value!r}")
        lines = list(value)
    else:
        raise ConfigResolutionError(
            f"Ignore list must be a string or a list of patterns, got {type(value).__name__}"
        )

    patterns = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


class PathFilter:
    """Decides whether a filename survives an ignore list."""

    def __init__(self, patterns: Iterable[str] = ()):
        self._patterns = list(patterns)

    @classmethod
    def from_config_value(cls, value: Optional[Union[str, Iterable[str]]]) -> "PathFilter":
        return cls(parse_ignore_list(value))

    @property
    def patterns(self) -> List[str]:
        return list(self._patterns)

    def is_excluded(self, filename: str) -> bool:
        return any(fnmatch.fnmatchcase(filename, pattern) for pattern in self._patterns)

    def is_included(self, filename: str) -> bool:
        return not self.is_excluded(filename)
