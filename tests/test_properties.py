"""Property-based tests for pattern matching using Hypothesis.

These tests verify invariants that hold for any pattern:
1. Component order never changes which candidates match
2. A multi-component filter equals the intersection of single-component filters
3. Compilation yields one regex per component and is deterministic
4. Highlight spans always lie inside the candidate

Property-based testing finds edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from anyorder import (
    MatchConfig,
    compile_pattern,
    filter_candidates,
    highlight,
    split_pattern,
)
from anyorder.styles import BUILTIN_STYLES

words = st.text(alphabet="abcdefxyz.-_", min_size=1, max_size=6)
components = st.lists(words, min_size=1, max_size=4)
candidates = st.lists(st.text(alphabet="abcdefxyz.-_ ", max_size=20), max_size=8)

# Styles whose output is a valid regex for any input
safe_styles = st.sampled_from(sorted(name for name in BUILTIN_STYLES if name != "regexp"))


class TestOrderIndependence:
    """Permuting components never changes the result."""

    @given(parts=components, pool=candidates, data=st.data())
    @settings(max_examples=100)
    def test_permutation_gives_same_matches(
        self, parts: list[str], pool: list[str], data: st.DataObject
    ) -> None:
        config = MatchConfig(base_styles=("literal", "initialism"))
        shuffled = data.draw(st.permutations(parts))
        assert filter_candidates(" ".join(parts), pool, config) == filter_candidates(
            " ".join(shuffled), pool, config
        )

    @given(parts=components, pool=candidates)
    @settings(max_examples=100)
    def test_filter_is_intersection_of_components(
        self, parts: list[str], pool: list[str]
    ) -> None:
        config = MatchConfig(base_styles=("literal", "flex"))
        combined = filter_candidates(" ".join(parts), pool, config)
        singles = [set(filter_candidates(part, pool, config)) for part in parts]
        assert combined == [c for c in pool if all(c in s for s in singles)]


class TestCompilation:
    """Structural properties of compile_pattern()."""

    @given(pattern=st.text(alphabet="ab .", max_size=20), style=safe_styles)
    @settings(max_examples=100)
    def test_one_regex_per_component(self, pattern: str, style: str) -> None:
        config = MatchConfig(base_styles=(style,))
        assert len(compile_pattern(pattern, config)) == len(split_pattern(pattern))

    @given(pattern=st.text(max_size=20))
    @settings(max_examples=100)
    def test_deterministic(self, pattern: str) -> None:
        assert compile_pattern(pattern) == compile_pattern(pattern)

    @given(pool=candidates)
    def test_empty_pattern_matches_everything(self, pool: list[str]) -> None:
        assert filter_candidates("", pool) == pool


class TestHighlightProperties:
    """Spans are well-formed for any input."""

    @given(parts=components, pool=candidates)
    @settings(max_examples=100)
    def test_spans_inside_candidate(self, parts: list[str], pool: list[str]) -> None:
        config = MatchConfig(base_styles=("literal", "flex"))
        regexes = compile_pattern(" ".join(parts), config)
        for h in highlight(regexes, pool, style_count=3):
            for span in h.spans:
                assert 0 <= span.start < span.end <= len(h.text)
                assert 0 <= span.style < 3

    @given(parts=components, pool=candidates)
    @settings(max_examples=50)
    def test_segments_reassemble_text(self, parts: list[str], pool: list[str]) -> None:
        regexes = compile_pattern(" ".join(parts), MatchConfig(base_styles=("literal",)))
        for h in highlight(regexes, pool):
            assert "".join(text for text, _ in h.segments()) == h.text
