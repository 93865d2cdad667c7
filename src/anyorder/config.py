"""ContextVar-based match configuration for anyorder.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Every compile, filter and highlight call reads the active MatchConfig once at
entry; nothing mutates it during a call.

Thread Safety:
    Each thread has independent ContextVar storage, so no locks are needed
    and one thread's configuration never leaks into another's results.

Usage:
    from anyorder.config import MatchConfig, match_config_context

    with match_config_context(MatchConfig(base_styles=("literal",))):
        regexes = compile_pattern("a.b c")

    # Or set it for the rest of the context
    set_match_config(MatchConfig(highlight_style_count=2))
    try:
        ...
    finally:
        reset_match_config()

Separator Override:
    A single input session may need a different separator (say, a comma)
    without touching the rest of the configuration. override_separator()
    returns the previous separator and restore_separator() puts it back;
    temporary_separator() wraps the pair in a context manager.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from anyorder.splitting import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from anyorder.dispatch import Dispatcher
    from anyorder.splitting import Separator
    from anyorder.styles import Style

# Affix character -> style name, tried on the first then the last character
DEFAULT_AFFIX_STYLES: tuple[tuple[str, str], ...] = (
    ("!", "without_literal"),
    (",", "initialism"),
    ("=", "literal"),
    ("^", "literal_prefix"),
    ("~", "flex"),
)

_TUPLE_FIELDS = frozenset(
    {"base_styles", "global_dispatchers", "component_dispatchers", "affix_styles"}
)


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable match configuration.

    Attributes:
        separator: Regex (or splitting callable) dividing a pattern into components
        base_styles: Default style set, as style names or callables
        global_dispatchers: Dispatchers run once over the whole pattern
        component_dispatchers: Dispatchers run over each component
        highlight_style_count: Number of cyclic highlight styles
        compiler: Replacement for the whole pattern compiler (pattern -> regexes)
        ignore_case: Always match case-insensitively
        smart_case: Match case-insensitively unless the pattern has uppercase
        strict_dispatch: Raise on dispatcher contract violations instead of
            logging and declining
        affix_styles: (character, style) pairs used by affix_dispatch

    """

    separator: Separator = DEFAULT_SEPARATOR
    base_styles: tuple[str | Style, ...] = ("regexp", "initialism")
    global_dispatchers: tuple[Dispatcher, ...] = ()
    component_dispatchers: tuple[Dispatcher, ...] = ()
    highlight_style_count: int = 4
    compiler: Callable[[str], list[str]] | None = None
    ignore_case: bool = False
    smart_case: bool = True
    strict_dispatch: bool = False
    affix_styles: tuple[tuple[str, str | Style], ...] = DEFAULT_AFFIX_STYLES

    def __post_init__(self) -> None:
        if not self.base_styles:
            raise ValueError("base_styles must contain at least one style")
        if self.highlight_style_count < 1:
            raise ValueError(
                f"highlight_style_count must be positive, got {self.highlight_style_count}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> MatchConfig:
        """Create MatchConfig from dictionary.

        Only includes keys that are valid MatchConfig fields; unknown keys
        are silently ignored. Lists are converted to tuples, and a mapping
        is accepted for affix_styles.

        Args:
            config_dict: Dictionary with config values. Keys should match
                MatchConfig attribute names.

        Returns:
            New MatchConfig instance with values from dict.

        Example:
            >>> config = MatchConfig.from_dict({
            ...     "base_styles": ["literal", "flex"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.base_styles
            ('literal', 'flex')

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            if key not in valid_fields:
                continue
            if key == "affix_styles" and isinstance(value, dict):
                value = tuple(value.items())
            elif key in _TUPLE_FIELDS and isinstance(value, list):
                value = tuple(tuple(v) if key == "affix_styles" else v for v in value)
            filtered[key] = value
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: MatchConfig = MatchConfig()

# Thread-local configuration via ContextVar
_match_config: ContextVar[MatchConfig] = ContextVar(
    "match_config",
    default=_DEFAULT_CONFIG,
)


def get_match_config() -> MatchConfig:
    """Get current match configuration (thread-local).

    Returns:
        The active MatchConfig for this thread/context.

    """
    return _match_config.get()


def set_match_config(config: MatchConfig) -> None:
    """Set match configuration for current context.

    Args:
        config: MatchConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _match_config.set(config)


def reset_match_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _match_config.set(_DEFAULT_CONFIG)


@contextmanager
def match_config_context(config: MatchConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: MatchConfig to use within the context.

    Yields:
        None

    Example:
        >>> with match_config_context(MatchConfig(base_styles=("flex",))):
        ...     compile_pattern("abc")
        ['(a).*(b).*(c)']
        >>> # Automatically reset to previous config

    """
    previous = _match_config.get()
    _match_config.set(config)
    try:
        yield
    finally:
        _match_config.set(previous)


def override_separator(separator: Separator) -> Separator:
    """Replace the separator of the current config.

    Args:
        separator: Separator to use from now on

    Returns:
        The previous separator, to hand back to restore_separator()

    """
    config = _match_config.get()
    _match_config.set(replace(config, separator=separator))
    return config.separator


def restore_separator(previous: Separator) -> None:
    """Put back a separator saved by override_separator().

    Only the separator is restored; other fields keep their current values.

    Args:
        previous: Value returned by override_separator()

    """
    _match_config.set(replace(_match_config.get(), separator=previous))


@contextmanager
def temporary_separator(separator: Separator) -> Iterator[None]:
    """Use separator for the duration of one input session.

    Example:
        >>> with temporary_separator(","):
        ...     len(compile_pattern("foo bar,baz"))
        2

    """
    previous = override_separator(separator)
    try:
        yield
    finally:
        restore_separator(previous)


__all__ = [
    "DEFAULT_AFFIX_STYLES",
    "MatchConfig",
    "get_match_config",
    "match_config_context",
    "override_separator",
    "reset_match_config",
    "restore_separator",
    "set_match_config",
    "temporary_separator",
]
