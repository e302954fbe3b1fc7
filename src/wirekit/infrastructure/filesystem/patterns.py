import fnmatch
from typing import Iterable


def matches_pattern(relative_path: str, pattern: str) -> bool:
    """Glob match of a POSIX relative path, where a leading ``**/`` also matches no directory."""
    if fnmatch.fnmatch(relative_path, pattern):
        return True
    return pattern.startswith("**/") and fnmatch.fnmatch(relative_path, pattern[3:])


def is_excluded(relative_path: str, patterns: Iterable[str]) -> bool:
    return any(matches_pattern(relative_path, pattern) for pattern in patterns)
