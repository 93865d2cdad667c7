"""Dispatch resolver: the fallback chain shared by both compiler tiers.

The resolver walks an ordered list of dispatchers. Each one sees the current
(possibly already rewritten) string and the extra context, and answers with
a dispatch outcome. The first Resolve ends the walk; if nobody resolves, the
default comes back unchanged together with the current string.

The compiler uses the resolver twice: once over the whole pattern with the
base style set as default, and once per component with the *global* result
as default. A component dispatcher falling back therefore gets whatever the
global dispatchers chose, not the base configuration.

Contract Violations:
A dispatcher returning anything other than None or an outcome is a bug in
that dispatcher. In strict mode this raises DispatchContractError; otherwise
it is logged and treated as Decline.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, NamedTuple, TypeAlias

from anyorder.dispatch.outcomes import Decline, Resolve, Rewrite
from anyorder.errors import DispatchContractError
from anyorder.utils.logger import get_logger

if TYPE_CHECKING:
    from anyorder.dispatch.outcomes import DispatchOutcome
    from anyorder.styles import Style

logger = get_logger(__name__)

Dispatcher: TypeAlias = Callable[..., "DispatchOutcome | None"]


class DispatchResult(NamedTuple):
    """Final style choice and string after dispatch."""

    styles: Any
    text: str


def _dispatcher_name(dispatcher: Dispatcher) -> str:
    return getattr(dispatcher, "__qualname__", None) or type(dispatcher).__name__


def resolve_dispatch(
    dispatchers: Sequence[Dispatcher],
    default: str | Style | Sequence[str | Style],
    subject: str,
    *context: Any,
    strict: bool = False,
) -> DispatchResult:
    """Run dispatchers in order and determine the final styles and string.

    Args:
        dispatchers: Dispatchers, tried in order
        default: Styles to use when no dispatcher resolves, or when one
            resolves with Resolve.default()
        subject: The string being dispatched (a pattern or a component)
        *context: Extra arguments passed to every dispatcher after the
            string (index and total for component dispatch)
        strict: Raise on contract violations instead of declining

    Returns:
        DispatchResult(styles, text). styles is exactly what the resolving
        outcome named (or default); names are not looked up here.

    Raises:
        DispatchContractError: In strict mode, if a dispatcher returns
            something that is not a dispatch outcome
    """
    text = subject
    for dispatcher in dispatchers:
        outcome = dispatcher(text, *context)
        if outcome is None or isinstance(outcome, Decline):
            continue
        if isinstance(outcome, Rewrite):
            text = outcome.text
            continue
        if isinstance(outcome, Resolve):
            styles = default if outcome.uses_default else outcome.styles
            if outcome.text is not None:
                text = outcome.text
            return DispatchResult(styles, text)

        name = _dispatcher_name(dispatcher)
        if strict:
            raise DispatchContractError(
                name, f"returned {outcome!r}, expected Decline, Rewrite, Resolve or None"
            )
        logger.warning(
            "Dispatcher %s returned %r, treating it as Decline",
            name,
            outcome,
        )
    return DispatchResult(default, text)


__all__ = [
    "DispatchResult",
    "Dispatcher",
    "resolve_dispatch",
]
