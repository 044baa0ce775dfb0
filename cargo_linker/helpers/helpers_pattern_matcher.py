"""Pattern-based filtering of discovered manifest paths.

The filter behaves like piping the path list through ``grep``: a path is kept
when the pattern matches anywhere in it, so a plain substring is a valid
pattern. Paths are matched in their relative form without the "./"
prefix that ``find .`` would print, so "^a/" selects the top-level "a"
directory.
"""

import re

from cargo_linker.core.errors import PatternError


def compile_filter_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile a filter pattern.

    Args:
        pattern: Regular expression or substring, or None

    Returns:
        Compiled pattern, or None when pattern is absent or empty
        (meaning every path matches)

    Raises:
        PatternError: If pattern is not a valid regular expression

    Examples:
        >>> compile_filter_pattern(None) is None
        True
        >>> compile_filter_pattern("") is None
        True
        >>> compile_filter_pattern("b/").pattern
        'b/'
    """
    if not pattern:
        return None

    try:
        return re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid filter pattern '{pattern}': {exc}"
        raise PatternError(msg) from exc


def filter_paths(paths: list[str], pattern: str | None) -> list[str]:
    """Keep paths containing a match of pattern, preserving order.

    Args:
        paths: Manifest paths to filter
        pattern: Regular expression or substring, or None for no filtering

    Returns:
        Matching paths (empty list when nothing matches)

    Raises:
        PatternError: If pattern is not a valid regular expression

    Examples:
        >>> filter_paths(['a/Cargo.toml', 'b/c/Cargo.toml'], 'b/')
        ['b/c/Cargo.toml']
        >>> filter_paths(['a/Cargo.toml'], None)
        ['a/Cargo.toml']
        >>> filter_paths(['a/Cargo.toml'], 'zzz')
        []
    """
    regex = compile_filter_pattern(pattern)
    if regex is None:
        return list(paths)
    return [path for path in paths if regex.search(path)]
