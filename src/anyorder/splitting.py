"""Split a query pattern into components.

The separator is either a regex string (the default is a run of spaces) or a
callable that performs the split itself. Empty components are dropped, so
leading, trailing and doubled separators never produce a component.

Example:
    >>> split_pattern("foo  bar ")
    ['foo', 'bar']
    >>> split_pattern(r"foo\\ bar baz", escapable_split_on_space)
    ['foo bar', 'baz']

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeAlias

__all__ = [
    "DEFAULT_SEPARATOR",
    "Separator",
    "escapable_split_on_space",
    "split_pattern",
]

Separator: TypeAlias = str | Callable[[str], list[str]]

DEFAULT_SEPARATOR = " +"

# An escaped backslash (group 1, kept as is), an escaped space (group 2),
# or a run of plain spaces
_ESCAPABLE_SPACE_RE = re.compile(r"(\\\\)|(\\ )| +")


def split_pattern(pattern: str, separator: Separator = DEFAULT_SEPARATOR) -> list[str]:
    """Split pattern into components.

    Args:
        pattern: Raw query text
        separator: Regex to split on, or a callable returning the components

    Returns:
        Components in pattern order, empty strings removed
    """
    if callable(separator):
        parts = separator(pattern)
    else:
        parts = re.split(separator, pattern)
    return [part for part in parts if part]


def escapable_split_on_space(pattern: str) -> list[str]:
    """Split on runs of spaces, treating backslash-space as a literal space.

    Use as a separator when components themselves need to contain spaces:
    ``"foo\\ bar baz"`` gives ``["foo bar", "baz"]``. A doubled backslash
    stays as it is, so ``"foo\\\\ bar"`` gives ``["foo\\\\", "bar"]``.

    Args:
        pattern: Raw query text

    Returns:
        Components with escaped spaces unescaped
    """
    components: list[str] = []
    current: list[str] = []
    pos = 0
    for match in _ESCAPABLE_SPACE_RE.finditer(pattern):
        current.append(pattern[pos : match.start()])
        if match.group(1):
            current.append(match.group(1))
        elif match.group(2):
            current.append(" ")
        else:
            components.append("".join(current))
            current = []
        pos = match.end()
    current.append(pattern[pos:])
    components.append("".join(current))
    return [component for component in components if component]
