"""Text helpers shared by the compiler and the filtering boundary.

Example:
    >>> from anyorder.utils.text import has_uppercase
    >>> has_uppercase("fooBar")
    True
    >>> has_uppercase(r"foo\\W")
    False
"""

from __future__ import annotations

import re

_ESCAPE_RE = re.compile(r"\\.", re.DOTALL)


def has_uppercase(pattern: str) -> bool:
    """Check whether pattern contains an uppercase letter.

    Backslash escapes are skipped, so regex classes such as ``\\W`` or
    ``\\S`` do not count as uppercase input.

    Args:
        pattern: Raw query text

    Returns:
        True if an unescaped uppercase letter is present
    """
    if not pattern:
        return False
    return any(ch.isupper() for ch in _ESCAPE_RE.sub("", pattern))
