"""Candidate filtering: the boundary between compiled patterns and callers.

A candidate matches a pattern when every component regex matches somewhere
in it. Where each match lands, and in which order, does not matter.

Invalid Regexes:
    A regexp-style component may not be a valid regex (the user is still
    typing "foo[", say). filter_candidates(), matches() and search() treat
    that as "no results" for the whole query and never raise.

Case Handling:
    Matching ignores case when MatchConfig.ignore_case is set, or when
    MatchConfig.smart_case is set and the pattern contains no uppercase
    letter outside a backslash escape.

Example:
    >>> filter_candidates("bar foo", ["foo-bar", "foobaz", "bar.foo"])
    ['foo-bar', 'bar.foo']

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from anyorder.compiler import compile_pattern
from anyorder.config import get_match_config
from anyorder.errors import PatternError
from anyorder.highlighting import highlight_candidate
from anyorder.utils.logger import get_logger
from anyorder.utils.text import has_uppercase

if TYPE_CHECKING:
    from anyorder.config import MatchConfig
    from anyorder.highlighting import Highlighted

logger = get_logger(__name__)


def ignores_case(pattern: str, config: MatchConfig | None = None) -> bool:
    """Decide whether pattern should match case-insensitively."""
    if config is None:
        config = get_match_config()
    if config.ignore_case:
        return True
    return config.smart_case and not has_uppercase(pattern)


def compile_regexes(regexes: Sequence[str], *, ignore_case: bool = False) -> list[re.Pattern[str]]:
    """Compile component regexes with the regex engine.

    Args:
        regexes: Compiled pattern, as returned by compile_pattern()
        ignore_case: Compile with re.IGNORECASE

    Returns:
        Compiled regex objects, in the same order

    Raises:
        PatternError: If any regex is invalid
    """
    flags = re.IGNORECASE if ignore_case else 0
    compiled: list[re.Pattern[str]] = []
    for regex in regexes:
        try:
            compiled.append(re.compile(regex, flags))
        except re.error as e:
            raise PatternError(regex, e.msg, e.pos) from e
    return compiled


def _prepare(pattern: str, config: MatchConfig) -> list[re.Pattern[str]] | None:
    """Compile pattern for filtering, or None if a regex is invalid."""
    ignore_case = ignores_case(pattern, config)
    try:
        return compile_regexes(compile_pattern(pattern, config), ignore_case=ignore_case)
    except PatternError as e:
        logger.debug("Pattern %r yields no matches: %s", pattern, e)
        return None


def _all_match(compiled: Sequence[re.Pattern[str]], candidate: str) -> bool:
    return all(regex.search(candidate) for regex in compiled)


def filter_candidates(
    pattern: str,
    candidates: Iterable[str],
    config: MatchConfig | None = None,
) -> list[str]:
    """Return the candidates matching every component of pattern.

    Args:
        pattern: Raw query text
        candidates: Strings to filter
        config: Configuration to use (defaults to the active MatchConfig)

    Returns:
        Matching candidates in input order; empty if any component regex is
        invalid. An empty pattern matches every candidate.
    """
    if config is None:
        config = get_match_config()
    compiled = _prepare(pattern, config)
    if compiled is None:
        return []
    return [candidate for candidate in candidates if _all_match(compiled, candidate)]


def matches(pattern: str, candidate: str, config: MatchConfig | None = None) -> bool:
    """Check whether a single candidate matches pattern."""
    return bool(filter_candidates(pattern, (candidate,), config))


def search(
    pattern: str,
    candidates: Iterable[str],
    config: MatchConfig | None = None,
) -> list[Highlighted]:
    """Filter candidates and highlight the matches.

    Compiles the pattern once and uses the same case handling for filtering
    and highlighting.

    Args:
        pattern: Raw query text
        candidates: Strings to filter
        config: Configuration to use (defaults to the active MatchConfig)

    Returns:
        Highlighted matches in input order; empty if any component regex is
        invalid
    """
    if config is None:
        config = get_match_config()
    compiled = _prepare(pattern, config)
    if compiled is None:
        return []
    style_count = config.highlight_style_count
    return [
        highlight_candidate(compiled, candidate, style_count)
        for candidate in candidates
        if _all_match(compiled, candidate)
    ]


__all__ = [
    "compile_regexes",
    "filter_candidates",
    "ignores_case",
    "matches",
    "search",
]
