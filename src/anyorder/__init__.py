"""
anyorder: order-independent multi-component matching and highlighting

Split a query into space-separated components, compile each one through
pluggable matching styles and dispatchers, and keep the candidates that
match every component, in any order. Zero runtime dependencies.

Quick Start:
    >>> from anyorder import filter_candidates, search, render_highlighted
    >>> filter_candidates("buf fi", ["find-file", "find-buffer", "switch-to-buffer"])
    ['find-buffer']

    >>> [hit] = search("fb", ["foo bar"])
    >>> render_highlighted(hit, lambda text, style: f"[{text}]")
    '[f]oo [b]ar'

Configuration:
    >>> from anyorder import MatchConfig, affix_dispatch, match_config_context
    >>>
    >>> config = MatchConfig(
    ...     base_styles=("literal", "flex"),
    ...     component_dispatchers=(affix_dispatch,),
    ... )
    >>> with match_config_context(config):
    ...     filter_candidates("=a.b !tmp", ["a.b.txt", "axb", "a.b.tmp"])
    ['a.b.txt']

Custom Styles:
    >>> import re
    >>> from anyorder import register_style
    >>>
    >>> @register_style("suffix")
    ... def suffix(component):
    ...     return re.escape(component) + r"\\Z"
"""

from anyorder.compiler import apply_styles, compile_pattern, default_compiler
from anyorder.config import (
    MatchConfig,
    get_match_config,
    match_config_context,
    override_separator,
    reset_match_config,
    restore_separator,
    set_match_config,
    temporary_separator,
)
from anyorder.dispatch import (
    DECLINE,
    Decline,
    DispatchOutcome,
    DispatchResult,
    Resolve,
    Rewrite,
    affix_dispatch,
    position_dispatcher,
    resolve_dispatch,
    style_dispatcher,
)
from anyorder.errors import AnyorderError, DispatchContractError, PatternError, StyleError
from anyorder.filtering import compile_regexes, filter_candidates, ignores_case, matches, search
from anyorder.highlighting import Highlighted, Span, highlight, render_highlighted
from anyorder.splitting import escapable_split_on_space, split_pattern
from anyorder.styles import (
    BUILTIN_STYLES,
    flex,
    get_style,
    initialism,
    literal,
    literal_prefix,
    prefixes,
    regexp,
    register_style,
    strict_full_initialism,
    strict_initialism,
    strict_leading_initialism,
    without_literal,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "compile_pattern",
    "filter_candidates",
    "highlight",
    "matches",
    "search",
    "render_highlighted",
    # Compiler building blocks
    "apply_styles",
    "compile_regexes",
    "default_compiler",
    "ignores_case",
    "split_pattern",
    "escapable_split_on_space",
    # Configuration
    "MatchConfig",
    "get_match_config",
    "set_match_config",
    "reset_match_config",
    "match_config_context",
    "override_separator",
    "restore_separator",
    "temporary_separator",
    # Dispatch
    "DECLINE",
    "Decline",
    "DispatchOutcome",
    "DispatchResult",
    "Resolve",
    "Rewrite",
    "resolve_dispatch",
    "affix_dispatch",
    "position_dispatcher",
    "style_dispatcher",
    # Styles
    "BUILTIN_STYLES",
    "get_style",
    "register_style",
    "regexp",
    "literal",
    "literal_prefix",
    "without_literal",
    "flex",
    "initialism",
    "strict_initialism",
    "strict_leading_initialism",
    "strict_full_initialism",
    "prefixes",
    # Highlighting
    "Highlighted",
    "Span",
    # Errors
    "AnyorderError",
    "DispatchContractError",
    "PatternError",
    "StyleError",
    "__version__",
]
