"""Dispatch outcomes.

A dispatcher answers with one of three outcomes:

- Decline: no opinion, try the next dispatcher
- Rewrite(text): replace the string and keep dispatching
- Resolve(styles, text): stop here with these styles, optionally with a
  rewritten string; ``Resolve.default(text)`` asks for the default style set
  that was handed to the resolver

Returning ``None`` from a dispatcher is the same as returning ``DECLINE``.

Thread Safety:
All outcomes are frozen and safe to share.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from anyorder.errors import DispatchContractError

if TYPE_CHECKING:
    from anyorder.styles import Style


@dataclass(frozen=True, slots=True)
class Decline:
    """Dispatcher has no opinion about the string."""


@dataclass(frozen=True, slots=True)
class Rewrite:
    """Replace the string and continue with the remaining dispatchers.

    Attributes:
        text: The rewritten string

    """

    text: str


@dataclass(frozen=True, slots=True)
class Resolve:
    """Stop dispatching with a style choice.

    Attributes:
        styles: A style name or callable (applied verbatim), a non-empty
            sequence of them (a style set), or None for the resolver's default
        text: Rewritten string, or None to keep the current one

    """

    styles: str | Style | tuple[str | Style, ...] | None
    text: str | None = None

    def __post_init__(self) -> None:
        styles = self.styles
        if styles is None or isinstance(styles, str) or callable(styles):
            return
        if not isinstance(styles, Iterable):
            raise DispatchContractError(
                "Resolve", f"styles must be a style, a sequence of styles or None, got {styles!r}"
            )
        # Freeze sequences so the outcome stays hashable and immutable
        frozen = tuple(styles)
        if not frozen:
            raise DispatchContractError("Resolve", "style set must not be empty")
        object.__setattr__(self, "styles", frozen)

    @classmethod
    def default(cls, text: str | None = None) -> Resolve:
        """Resolve to the default style set, optionally rewriting the string."""
        return cls(None, text)

    @property
    def uses_default(self) -> bool:
        """True if this outcome asks for the resolver's default styles."""
        return self.styles is None


DECLINE = Decline()

DispatchOutcome: TypeAlias = Decline | Rewrite | Resolve

__all__ = [
    "DECLINE",
    "Decline",
    "DispatchOutcome",
    "Resolve",
    "Rewrite",
]
