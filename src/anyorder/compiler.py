"""Pattern compiler: pattern string -> ordered list of component regexes.

Compilation runs in two dispatch tiers:

1. Global dispatchers see the whole pattern. Their result becomes the
   default style set for every component, and they may rewrite the pattern.
2. The (rewritten) pattern is split into components. Component dispatchers
   see each component with its index and the component count, falling back
   to the global result.

Each component then becomes one regex: a single style (or custom regex
function) is applied verbatim; a style set is applied style by style and
the results are joined as alternatives.

The compiler can be swapped out entirely through MatchConfig.compiler. The
rest of the library only relies on the contract: one regex per component,
and a candidate matches when every regex matches somewhere in it.

Thread Safety:
compile_pattern() keeps no state between calls and never mutates its
configuration. Concurrent calls with different patterns are independent.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anyorder.config import get_match_config
from anyorder.dispatch.resolver import resolve_dispatch
from anyorder.splitting import split_pattern
from anyorder.styles import normalize_styles
from anyorder.utils.logger import get_logger

if TYPE_CHECKING:
    from anyorder.config import MatchConfig
    from anyorder.styles import Style, StyleSet

logger = get_logger(__name__)


def apply_styles(styles: Style | StyleSet, component: str) -> str:
    """Build the regex for one component.

    Args:
        styles: A single style/regex function, or a style set
        component: Component text after dispatch

    Returns:
        The component regex. A style set of several styles becomes
        ``(?:(?:r1)|(?:r2)...)``.
    """
    if callable(styles):
        return styles(component)
    if len(styles) == 1:
        return styles[0](component)
    alternatives = "|".join(f"(?:{style(component)})" for style in styles)
    return f"(?:{alternatives})"


def default_compiler(pattern: str, config: MatchConfig | None = None) -> list[str]:
    """Compile pattern with the configured dispatchers and styles.

    Args:
        pattern: Raw query text
        config: Configuration to use (defaults to the active MatchConfig)

    Returns:
        One regex per component, in split order

    Raises:
        StyleError: If a style name is not registered
        DispatchContractError: If a dispatcher misbehaves in strict mode
    """
    if config is None:
        config = get_match_config()
    strict = config.strict_dispatch

    global_default, pattern = resolve_dispatch(
        config.global_dispatchers,
        config.base_styles,
        pattern,
        strict=strict,
    )

    components = split_pattern(pattern, config.separator)
    total = len(components)

    regexes: list[str] = []
    for index, component in enumerate(components):
        styles, component = resolve_dispatch(
            config.component_dispatchers,
            global_default,
            component,
            index,
            total,
            strict=strict,
        )
        regexes.append(apply_styles(normalize_styles(styles), component))

    logger.debug("Compiled %r into %d component regexes", pattern, len(regexes))
    return regexes


def compile_pattern(pattern: str, config: MatchConfig | None = None) -> list[str]:
    """Compile pattern into component regexes.

    Uses MatchConfig.compiler when set, otherwise default_compiler().

    Args:
        pattern: Raw query text
        config: Configuration to use (defaults to the active MatchConfig)

    Returns:
        Regexes that must all match a candidate, in any order

    Example:
        >>> compile_pattern("a.b", MatchConfig(base_styles=("literal",)))
        ['a\\\\.b']
    """
    if config is None:
        config = get_match_config()
    if config.compiler is not None:
        return list(config.compiler(pattern))
    return default_compiler(pattern, config)


__all__ = [
    "apply_styles",
    "compile_pattern",
    "default_compiler",
]
