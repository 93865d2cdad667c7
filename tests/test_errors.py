"""Tests for the exception hierarchy."""

import pytest

from anyorder.errors import AnyorderError, DispatchContractError, PatternError, StyleError
from anyorder.styles import get_style


class TestHierarchy:
    """All errors share one base."""

    @pytest.mark.parametrize("cls", [PatternError, DispatchContractError, StyleError])
    def test_subclasses_base(self, cls: type) -> None:
        assert issubclass(cls, AnyorderError)

    def test_style_error_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_style("nope")


class TestPatternError:
    def test_message_with_position(self) -> None:
        err = PatternError("foo[", "unterminated character set", 3)
        assert str(err) == "Invalid regex 'foo[' at position 3: unterminated character set"
        assert err.regex == "foo["
        assert err.message == "unterminated character set"
        assert err.position == 3

    def test_message_without_position(self) -> None:
        err = PatternError("x", "bad")
        assert str(err) == "Invalid regex 'x': bad"
        assert err.position is None


class TestDispatchContractError:
    def test_message(self) -> None:
        err = DispatchContractError("my_dispatch", "returned 1")
        assert str(err) == "Dispatcher 'my_dispatch': returned 1"
        assert err.dispatcher == "my_dispatch"


class TestStyleError:
    def test_message_is_unquoted(self) -> None:
        err = StyleError("nope", ["flex", "literal"])
        assert str(err) == "Unknown style: 'nope'. Available: flex, literal"
        assert err.name == "nope"
        assert err.available == ["flex", "literal"]

    def test_lookup_lists_builtins(self) -> None:
        with pytest.raises(StyleError, match="Available: .*initialism"):
            get_style("nope")
