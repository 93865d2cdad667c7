"""Dispatch system for anyorder.

Dispatchers are plain callables that can rewrite a string and/or choose its
matching styles. Global dispatchers are called as ``d(pattern)``; component
dispatchers as ``d(component, index, total)``. Both answer with a dispatch
outcome (or None to decline).

Usage:
    >>> from anyorder import MatchConfig, Resolve, DECLINE
    >>>
    >>> def literal_if_equals(component, index, total):
    ...     if component.startswith("="):
    ...         return Resolve("literal", component[1:])
    ...     return DECLINE
    >>>
    >>> config = MatchConfig(component_dispatchers=(literal_if_equals,))

Thread Safety:
Dispatchers must be stateless; the compiler may call them from any thread.

"""

from anyorder.dispatch.builtins import affix_dispatch, position_dispatcher, style_dispatcher
from anyorder.dispatch.outcomes import DECLINE, Decline, DispatchOutcome, Resolve, Rewrite
from anyorder.dispatch.resolver import Dispatcher, DispatchResult, resolve_dispatch

__all__ = [
    "DECLINE",
    "Decline",
    "DispatchOutcome",
    "DispatchResult",
    "Dispatcher",
    "Resolve",
    "Rewrite",
    "affix_dispatch",
    "position_dispatcher",
    "resolve_dispatch",
    "style_dispatcher",
]
