"""Tests for dispatch outcomes and the dispatch resolver."""

from __future__ import annotations

import logging

import pytest

from anyorder.dispatch import (
    DECLINE,
    Decline,
    DispatchResult,
    Resolve,
    Rewrite,
    resolve_dispatch,
)
from anyorder.errors import DispatchContractError
from anyorder.styles import flex

DEFAULT = ("regexp", "initialism")


def fail_if_called(text: str, *context: object) -> None:
    raise AssertionError("dispatcher after a resolution must not run")


class TestOutcomes:
    """Outcome construction and invariants."""

    def test_decline_singleton_equality(self) -> None:
        assert DECLINE == Decline()

    def test_resolve_freezes_sequences(self) -> None:
        outcome = Resolve(["literal", "flex"])
        assert outcome.styles == ("literal", "flex")
        hash(outcome)

    def test_resolve_single_style_kept(self) -> None:
        assert Resolve("literal").styles == "literal"
        assert Resolve(flex).styles is flex

    def test_resolve_default(self) -> None:
        outcome = Resolve.default("x")
        assert outcome.uses_default
        assert outcome.text == "x"
        assert not Resolve("literal").uses_default

    def test_resolve_rejects_empty_style_set(self) -> None:
        with pytest.raises(DispatchContractError, match="must not be empty"):
            Resolve([])

    def test_resolve_rejects_non_styles(self) -> None:
        with pytest.raises(DispatchContractError):
            Resolve(42)  # type: ignore[arg-type]

    def test_outcomes_are_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Rewrite("a").text = "b"  # type: ignore[misc]


class TestResolveDispatch:
    """The fallback chain."""

    def test_no_dispatchers_returns_default(self) -> None:
        result = resolve_dispatch([], DEFAULT, "foo")
        assert result == DispatchResult(DEFAULT, "foo")
        styles, text = result
        assert styles is DEFAULT
        assert text == "foo"

    def test_all_decline(self) -> None:
        dispatchers = [lambda t: DECLINE, lambda t: None]
        assert resolve_dispatch(dispatchers, DEFAULT, "foo") == (DEFAULT, "foo")

    def test_rewrite_continues_with_new_text(self) -> None:
        seen: list[str] = []

        def record(text: str) -> None:
            seen.append(text)

        dispatchers = [lambda t: Rewrite(t.upper()), record, lambda t: Rewrite(t + "!")]
        assert resolve_dispatch(dispatchers, DEFAULT, "foo") == (DEFAULT, "FOO!")
        assert seen == ["FOO"]

    def test_resolve_stops_the_chain(self) -> None:
        dispatchers = [lambda t: Resolve("literal"), fail_if_called]
        assert resolve_dispatch(dispatchers, DEFAULT, "foo") == ("literal", "foo")

    def test_resolve_with_rewrite(self) -> None:
        dispatchers = [lambda t: Resolve("flex", t[1:])]
        assert resolve_dispatch(dispatchers, DEFAULT, "~abc") == ("flex", "abc")

    def test_resolve_keeps_earlier_rewrite(self) -> None:
        dispatchers = [lambda t: Rewrite("bar"), lambda t: Resolve("literal")]
        assert resolve_dispatch(dispatchers, DEFAULT, "foo") == ("literal", "bar")

    def test_resolve_default_uses_passed_default(self) -> None:
        dispatchers = [lambda t: Resolve.default(), fail_if_called]
        styles, text = resolve_dispatch(dispatchers, ("prefixes",), "foo")
        assert styles == ("prefixes",)
        assert text == "foo"

    def test_resolve_default_with_rewrite(self) -> None:
        dispatchers = [lambda t: Resolve.default(t.strip("#"))]
        assert resolve_dispatch(dispatchers, DEFAULT, "#foo#") == (DEFAULT, "foo")

    def test_resolve_with_custom_regex_function(self) -> None:
        def anchored(component: str) -> str:
            return f"^{component}$"

        styles, _ = resolve_dispatch([lambda t: Resolve(anchored)], DEFAULT, "foo")
        assert styles is anchored

    def test_context_passed_to_every_dispatcher(self) -> None:
        calls: list[tuple[str, int, int]] = []

        def record(text: str, index: int, total: int) -> None:
            calls.append((text, index, total))

        def rewrite(text: str, index: int, total: int) -> Rewrite:
            return Rewrite("zz")

        resolve_dispatch([record, rewrite, record], DEFAULT, "a", 1, 3)
        assert calls == [("a", 1, 3), ("zz", 1, 3)]


class TestContractViolations:
    """Dispatchers returning something that is not an outcome."""

    def test_lenient_mode_declines_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        def broken(text: str) -> object:
            return 42

        with caplog.at_level(logging.WARNING, logger="anyorder"):
            result = resolve_dispatch([broken, lambda t: Resolve("literal")], DEFAULT, "foo")

        assert result == ("literal", "foo")
        assert "treating it as Decline" in caplog.text
        assert "broken" in caplog.text

    def test_strict_mode_raises(self) -> None:
        def broken(text: str) -> object:
            return "literal"

        with pytest.raises(DispatchContractError) as exc_info:
            resolve_dispatch([broken], DEFAULT, "foo", strict=True)

        assert "broken" in exc_info.value.dispatcher
        assert "expected Decline, Rewrite, Resolve or None" in str(exc_info.value)

    def test_strict_mode_accepts_valid_outcomes(self) -> None:
        dispatchers = [lambda t: None, lambda t: DECLINE, lambda t: Rewrite("x")]
        assert resolve_dispatch(dispatchers, DEFAULT, "foo", strict=True) == (DEFAULT, "x")
