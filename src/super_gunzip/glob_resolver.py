"""
Glob pattern expansion into the list of files a run will process.
"""

import glob
import os
import re
from typing import List

from .errors import PatternError


_SEPARATORS = re.escape(os.sep + (os.altsep or ""))


def validate_pattern(pattern: str):
    """
    Check a glob pattern for syntax errors.

    The standard glob module silently treats malformed patterns as literals,
    so unterminated character classes and misplaced recursive wildcards are
    rejected here instead.

    Args:
        pattern: Glob pattern to check

    Raises:
        PatternError: If the pattern is empty or malformed
    """
    if not pattern:
        raise PatternError(pattern, "pattern is empty")
    if "\0" in pattern:
        raise PatternError(pattern, "pattern contains a NUL byte")

    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            # A ']' right after '[' or '[!' is a literal member of the class
            j = i + 1
            if j < len(pattern) and pattern[j] == "!":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise PatternError(pattern, f"unterminated character class at position {i}")
            i = close + 1
            continue
        i += 1

    for component in re.split(f"[{_SEPARATORS}]", pattern):
        if "**" in component and component != "**":
            raise PatternError(
                pattern, f"recursive wildcard '**' must be a whole path component, got '{component}'"
            )


def resolve_pattern(pattern: str) -> List[str]:
    """
    Expand a glob pattern into matching filesystem paths.

    Wildcards do not match a leading dot, so hidden files are only found
    by a pattern component that itself starts with ".".

    Args:
        pattern: Glob pattern (supports *, ?, [...] and ** components)

    Returns:
        Sorted list of unique matching paths, empty if nothing matches

    Raises:
        PatternError: If the pattern is malformed
    """
    validate_pattern(pattern)
    matches = glob.glob(pattern, recursive=True)
    return sorted(dict.fromkeys(matches))
