"""Match highlighting for anyorder.

Given the compiled regexes of a pattern and candidates already known to
match all of them, computes which parts of each candidate each component
matched. Spans are returned alongside the candidate text; the candidate
string itself is never touched.

Span Selection:
    For each regex, the capture groups that took part in the match are
    highlighted. A regex without participating groups (a plain regexp
    component, say) highlights its whole match. Empty spans are dropped,
    so zero-width styles such as without_literal contribute nothing.

Cyclic Styles:
    Spans from the i-th regex get style ``i % highlight_style_count``. The
    index follows the regex position, not the number of spans, so a
    component keeps its style however many pieces it matched.

Usage:
    >>> from anyorder import compile_pattern, highlight, render_highlighted
    >>> regexes = compile_pattern("fb", MatchConfig(base_styles=("initialism",)))
    >>> [h] = highlight(regexes, ["foo bar"])
    >>> h.spans
    (Span(start=0, end=1, style=0), Span(start=4, end=5, style=0))
    >>> render_highlighted(h, lambda text, style: f"[{text}]")
    '[f]oo [b]ar'

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple, TypeAlias

from anyorder.config import get_match_config
from anyorder.utils.text import has_uppercase

__all__ = [
    "Highlighted",
    "SegmentRenderer",
    "Span",
    "highlight",
    "highlight_candidate",
    "match_spans",
    "render_highlighted",
]

# Renders one highlighted run: (text, style index) -> markup
SegmentRenderer: TypeAlias = Callable[[str, int], str]


class Span(NamedTuple):
    """Highlighted range of a candidate.

    Attributes:
        start: Start offset (inclusive)
        end: End offset (exclusive)
        style: Cyclic highlight style index

    """

    start: int
    end: int
    style: int


@dataclass(frozen=True, slots=True)
class Highlighted:
    """A candidate together with its highlight spans.

    Attributes:
        text: The candidate, unchanged
        spans: Spans in regex order, then group order within a regex

    """

    text: str
    spans: tuple[Span, ...] = ()

    def segments(self) -> Iterator[tuple[str, int | None]]:
        """Split the text into runs of equal highlight style.

        Where spans overlap, the span listed later wins.

        Yields:
            (text, style) pairs; style is None for unhighlighted runs
        """
        if not self.text:
            return
        styles: list[int | None] = [None] * len(self.text)
        for span in self.spans:
            for i in range(span.start, span.end):
                styles[i] = span.style

        start = 0
        for i in range(1, len(self.text) + 1):
            if i == len(self.text) or styles[i] != styles[start]:
                yield self.text[start:i], styles[start]
                start = i


def match_spans(match: re.Match[str]) -> list[tuple[int, int]]:
    """Extract the highlightable (start, end) ranges of a match.

    Args:
        match: A successful match

    Returns:
        Non-empty ranges of participating groups, or of the whole match
        when no group participated
    """
    ranges = [match.span(i) for i in range(1, match.re.groups + 1)]
    ranges = [(start, end) for start, end in ranges if start != -1]
    if not ranges:
        ranges = [match.span()]
    return [(start, end) for start, end in ranges if end > start]


def highlight_candidate(
    compiled: Sequence[re.Pattern[str]],
    candidate: str,
    style_count: int,
) -> Highlighted:
    """Highlight one candidate against already compiled regexes.

    A regex that does not match the candidate contributes no spans; callers
    are expected to pass matching candidates only.
    """
    spans: list[Span] = []
    for index, regex in enumerate(compiled):
        match = regex.search(candidate)
        if match is None:
            continue
        style = index % style_count
        spans.extend(Span(start, end, style) for start, end in match_spans(match))
    return Highlighted(candidate, tuple(spans))


def highlight(
    regexes: Sequence[str],
    candidates: Iterable[str],
    *,
    ignore_case: bool | None = None,
    style_count: int | None = None,
) -> list[Highlighted]:
    """Highlight matching candidates.

    Precondition: every regex matches every candidate (as guaranteed by
    filter_candidates()). Regexes are compiled once for the whole batch.

    Args:
        regexes: Compiled pattern, as returned by compile_pattern()
        candidates: Candidates known to match
        ignore_case: Match case-insensitively. None (the default) follows
            the active MatchConfig the same way filter_candidates() does:
            ignore_case, or smart_case when no regex has an uppercase letter
            outside a backslash escape
        style_count: Number of cyclic styles (defaults to
            MatchConfig.highlight_style_count)

    Returns:
        One Highlighted per candidate, in input order

    Raises:
        re.error: If a regex is invalid
        ValueError: If style_count is not positive
    """
    config = get_match_config()
    if style_count is None:
        style_count = config.highlight_style_count
    if style_count < 1:
        raise ValueError(f"style_count must be positive, got {style_count}")
    if ignore_case is None:
        ignore_case = config.ignore_case or (
            config.smart_case and not any(has_uppercase(regex) for regex in regexes)
        )

    flags = re.IGNORECASE if ignore_case else 0
    compiled = [re.compile(regex, flags) for regex in regexes]
    return [highlight_candidate(compiled, candidate, style_count) for candidate in candidates]


def render_highlighted(highlighted: Highlighted, wrap: SegmentRenderer) -> str:
    """Render a highlighted candidate as markup.

    Args:
        highlighted: Candidate and spans
        wrap: Called as wrap(text, style) for each highlighted run;
            unhighlighted runs are emitted as-is

    Returns:
        The candidate with highlighted runs wrapped

    Example:
        >>> h = Highlighted("foo bar", (Span(0, 1, 0), Span(4, 5, 1)))
        >>> render_highlighted(h, lambda s, i: f"<m{i}>{s}</m{i}>")
        '<m0>f</m0>oo <m1>b</m1>ar'
    """
    parts: list[str] = []
    for text, style in highlighted.segments():
        parts.append(text if style is None else wrap(text, style))
    return "".join(parts)
