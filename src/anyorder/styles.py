"""Matching styles for query components.

A matching style turns one component of the query into regex text. Styles
are pure functions: the same component always yields the same regex, and the
component itself is never modified.

Built-in styles:
- regexp: the component is itself a regex
- literal: the component must appear verbatim
- literal_prefix: the candidate must start with the component
- without_literal: the candidate must NOT contain the component
- flex: the component's characters appear in order, anything in between
- initialism: each character starts a word, in order
- strict_initialism: each character starts a word of consecutive words
- strict_leading_initialism: as above, starting at the first word
- strict_full_initialism: as above, spanning first to last word
- prefixes: each word-piece of the component starts a word, in order

Highlighting:
Every multi-piece style wraps each matched piece in its own capture group,
so the highlighter can mark the pieces instead of the whole match.

Word Characters:
Letters and digits are word characters. Underscore is not, so
``initialism("fb")`` matches ``foo_bar`` the same way it matches ``foo-bar``.

Example:
    >>> from anyorder.styles import get_style
    >>> get_style("literal")("a.b")
    'a\\\\.b'
    >>> import re
    >>> bool(re.search(get_style("initialism")("fb"), "find buffer"))
    True

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Literal, TypeAlias

from anyorder.errors import StyleError

__all__ = [
    "BUILTIN_STYLES",
    "Style",
    "StyleSet",
    "flex",
    "get_style",
    "initialism",
    "literal",
    "literal_prefix",
    "normalize_styles",
    "prefixes",
    "regexp",
    "register_style",
    "strict_full_initialism",
    "strict_initialism",
    "strict_leading_initialism",
    "style_name",
    "without_literal",
]

Style: TypeAlias = Callable[[str], str]
StyleSet: TypeAlias = tuple[Style, ...]

# Regex building blocks
WORD = r"[^\W_]"
WORD_START = rf"(?<!{WORD})(?={WORD})"
WORD_END = rf"(?<={WORD})(?!{WORD})"
WORD_BOUNDARY = rf"(?:{WORD_START}|{WORD_END})"
NOT_ALPHA = r"[\W\d_]"
ANY = ".*"

_WORD_END_RE = re.compile(WORD_END)

# Registry of built-in styles, in registration order
BUILTIN_STYLES: dict[str, Style] = {}


def register_style(name: str) -> Callable[[Style], Style]:
    """Decorator to register a matching style.

    Args:
        name: Style name for lookup (used in configuration)

    Returns:
        Decorator function that registers and returns the style

    Usage:
        @register_style("suffix")
        def suffix(component: str) -> str:
            return re.escape(component) + r"\\Z"

    """

    def decorator(func: Style) -> Style:
        BUILTIN_STYLES[name] = func
        return func

    return decorator


def get_style(name: str) -> Style:
    """Get a style function by name.

    Args:
        name: Style name (e.g., "literal", "flex")

    Returns:
        Style function

    Raises:
        StyleError: If style name is not recognized (a KeyError subclass)

    """
    try:
        return BUILTIN_STYLES[name]
    except KeyError:
        raise StyleError(name, sorted(BUILTIN_STYLES)) from None


def style_name(style: Style) -> str:
    """Best-effort display name for a style, for logs and error messages."""
    for name, func in BUILTIN_STYLES.items():
        if func is style:
            return name
    return getattr(style, "__qualname__", None) or repr(style)


def normalize_styles(value: str | Style | Iterable[str | Style]) -> Style | StyleSet:
    """Turn a style specification into callables.

    A single name or callable stays single: the compiler applies it verbatim.
    Any other iterable becomes a style set, with names looked up.

    Args:
        value: Style name, style callable, or sequence of either

    Returns:
        A single style, or a non-empty tuple of styles

    Raises:
        StyleError: If a style name is not registered
        ValueError: If the sequence is empty
    """
    if isinstance(value, str):
        return get_style(value)
    if callable(value):
        return value
    styles = tuple(get_style(s) if isinstance(s, str) else s for s in value)
    if not styles:
        raise ValueError("Style set must contain at least one style")
    return styles


def _separated_by(
    separator: str,
    pieces: Iterable[str],
    before: str = "",
    after: str = "",
) -> str:
    """Capture each piece in its own group and join them with separator."""
    return before + separator.join(f"({piece})" for piece in pieces) + after


@register_style("regexp")
def regexp(component: str) -> str:
    """Match the component as a regex."""
    return component


@register_style("literal")
def literal(component: str) -> str:
    """Match the component as a literal string."""
    return re.escape(component)


@register_style("literal_prefix")
def literal_prefix(component: str) -> str:
    """Match the component as a literal prefix of the candidate."""
    return rf"\A{re.escape(component)}"


@register_style("without_literal")
def without_literal(component: str) -> str:
    """Match candidates that do not contain the component literally.

    The regex is a zero-width assertion at the start of the candidate, so
    it contributes no highlighting. An empty component matches everything.
    """
    if not component:
        return ""
    return rf"\A(?!(?s:.)*?{re.escape(component)})"


@register_style("flex")
def flex(component: str) -> str:
    """Match the characters of the component in order, anywhere.

    Example:
        ``flex("abc")`` matches ``"axbyc"`` but not ``"acb"``.
    """
    return _separated_by(ANY, (re.escape(ch) for ch in component))


@register_style("initialism")
def initialism(component: str) -> str:
    """Match each character at the start of a word, in order.

    Example:
        ``initialism("fb")`` matches ``"foo-bar"`` and ``"find buffer"``
        but not ``"fabulous"``.
    """
    return _separated_by(ANY, (WORD_START + re.escape(ch) for ch in component))


def _strict_initialism(
    component: str,
    anchored: Literal["leading", "both"] | None = None,
) -> str:
    """Build a strict initialism regex.

    Between consecutive initials only the rest of the current word (letters
    or digits) and non-letters are allowed, so the initials come from
    adjacent words.
    """
    separator = rf"{WORD}*{WORD_END}{NOT_ALPHA}*"
    before = rf"\A{NOT_ALPHA}*" if anchored else ""
    after = rf"{separator}\Z" if anchored == "both" else ""
    return _separated_by(
        separator,
        (WORD_START + re.escape(ch) for ch in component),
        before,
        after,
    )


@register_style("strict_initialism")
def strict_initialism(component: str) -> str:
    """Match each character at the start of consecutive words."""
    return _strict_initialism(component)


@register_style("strict_leading_initialism")
def strict_leading_initialism(component: str) -> str:
    """Strict initialism whose first initial starts the candidate's first word."""
    return _strict_initialism(component, anchored="leading")


@register_style("strict_full_initialism")
def strict_full_initialism(component: str) -> str:
    """Strict initialism covering every word of the candidate.

    Example:
        ``strict_full_initialism("fb")`` matches ``"foo-bar"`` but not
        ``"foo-bar-baz"`` or ``"xfoo-bar"``.
    """
    return _strict_initialism(component, anchored="both")


@register_style("prefixes")
def prefixes(component: str) -> str:
    """Match word-pieces of the component as prefixes of words, in order.

    The component is split at its word ends; each piece must start at a word
    boundary of the candidate. ``"re-re"`` matches ``"query-replace-regexp"``
    and ``"f-d.t"`` matches ``"final-draft.txt"``.
    """
    pieces = [piece for piece in _WORD_END_RE.split(component) if piece]
    return _separated_by(ANY, (WORD_BOUNDARY + re.escape(piece) for piece in pieces))
