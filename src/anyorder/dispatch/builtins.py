"""Built-in component dispatchers.

affix_dispatch reads a one-character marker at either end of a component
and picks the style mapped to it in MatchConfig.affix_styles:

    !foo   candidates without "foo"
    ,fb    initialism
    =a.b   literal
    ^foo   literal prefix
    ~abc   flex

The factories build dispatchers for the common cases of "this marker means
that style" and "the first/last component uses that style".

Example:
    >>> config = MatchConfig(component_dispatchers=(affix_dispatch,))
    >>> with match_config_context(config):
    ...     compile_pattern("=a.b")
    ['a\\\\.b']

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anyorder.config import get_match_config
from anyorder.dispatch.outcomes import DECLINE, Resolve
from anyorder.styles import without_literal

if TYPE_CHECKING:
    from anyorder.dispatch.outcomes import DispatchOutcome
    from anyorder.dispatch.resolver import Dispatcher
    from anyorder.styles import Style


def affix_dispatch(component: str, index: int, total: int) -> DispatchOutcome:
    """Choose a style from a prefix or suffix marker character.

    The first character is checked before the last. A component made of the
    negation marker alone resolves to a literal empty string so that typing
    "!" on its way to "!foo" does not filter everything out.

    Args:
        component: Component text
        index: Position of the component (unused)
        total: Number of components (unused)

    Returns:
        Resolve with the marker stripped, or DECLINE
    """
    if not component:
        return DECLINE

    affixes = dict(get_match_config().affix_styles)

    if len(component) == 1 and affixes.get(component) in ("without_literal", without_literal):
        return Resolve("literal", "")

    style = affixes.get(component[0])
    if style is not None:
        return Resolve(style, component[1:])

    style = affixes.get(component[-1])
    if style is not None:
        return Resolve(style, component[:-1])

    return DECLINE


def style_dispatcher(
    style: str | Style,
    *,
    prefix: str | None = None,
    suffix: str | None = None,
) -> Dispatcher:
    """Build a dispatcher resolving marked components to style.

    Args:
        style: Style name or callable to resolve to
        prefix: Marker that must start the component (stripped)
        suffix: Marker that must end the component (stripped)

    Returns:
        Component dispatcher

    Raises:
        ValueError: If neither prefix nor suffix is given

    Example:
        >>> flex_if_twiddle = style_dispatcher("flex", suffix="~")
        >>> flex_if_twiddle("abc~", 0, 1)
        Resolve(styles='flex', text='abc')
    """
    if not prefix and not suffix:
        raise ValueError("style_dispatcher needs a prefix or a suffix marker")

    def dispatch(component: str, index: int, total: int) -> DispatchOutcome:
        if prefix and component.startswith(prefix):
            return Resolve(style, component[len(prefix) :])
        if suffix and component.endswith(suffix):
            return Resolve(style, component[: -len(suffix)])
        return DECLINE

    dispatch.__qualname__ = f"style_dispatcher({style!r})"
    return dispatch


def position_dispatcher(
    style: str | Style,
    *,
    first: bool = False,
    last: bool = False,
) -> Dispatcher:
    """Build a dispatcher resolving the first and/or last component to style.

    Example:
        >>> first_literal = position_dispatcher("literal", first=True)
        >>> first_literal("foo", 0, 2)
        Resolve(styles='literal', text=None)
    """
    if not first and not last:
        raise ValueError("position_dispatcher needs first=True or last=True")

    def dispatch(component: str, index: int, total: int) -> DispatchOutcome:
        if (first and index == 0) or (last and index == total - 1):
            return Resolve(style)
        return DECLINE

    dispatch.__qualname__ = f"position_dispatcher({style!r})"
    return dispatch


__all__ = [
    "affix_dispatch",
    "position_dispatcher",
    "style_dispatcher",
]
