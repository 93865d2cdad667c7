"""Exception classes for anyorder.

Provides standardized exceptions for error handling throughout anyorder.
"""

from __future__ import annotations


class AnyorderError(Exception):
    """Base exception for all anyorder errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(AnyorderError):
    """A compiled component regex is not a valid regular expression.

    Raised when a regexp-style component (or a custom style) produces text
    that Python's ``re`` module refuses. The filtering boundary catches this
    and reports no matches instead.
    """

    def __init__(self, regex: str, message: str, position: int | None = None) -> None:
        """Initialize pattern error.

        Args:
            regex: The offending regex text
            message: Description from the regex engine
            position: Offset of the error inside the regex (optional)
        """
        self.regex = regex
        self.message = message
        self.position = position

        location = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid regex {regex!r}{location}: {message}")


class DispatchContractError(AnyorderError):
    """A dispatcher broke the dispatch contract.

    Raised when a dispatcher returns something other than a dispatch outcome,
    or when an outcome would resolve to an empty style set.
    """

    def __init__(self, dispatcher: str, message: str) -> None:
        """Initialize dispatch contract error.

        Args:
            dispatcher: Name of the offending dispatcher
            message: Description of the contract violation
        """
        self.dispatcher = dispatcher
        super().__init__(f"Dispatcher '{dispatcher}': {message}")


class StyleError(AnyorderError, KeyError):
    """Unknown matching style name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown style: {name!r}. Available: {', '.join(available)}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


__all__ = [
    "AnyorderError",
    "DispatchContractError",
    "PatternError",
    "StyleError",
]
