"""Property-based tests for scanner invariants using Hypothesis.

These tests verify properties that must hold for any input, helping
catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from luascan.errors import LexError
from luascan.lexer import Scanner
from luascan.tokens import TokenKind

# Characters that exercise every dispatch branch of the scanner
LUA_ALPHABET = "abcxyzEe_019 \t\n'\"\\[]=-.:<>~/+*#(){};,@$"


def _recovering(source: str) -> list:
    return list(Scanner(source, error_recovery=True, diagnostic_sink=lambda _: None))


class TestTermination:
    """Every scan is finite and ends with exactly one EOF."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_recovery_always_ends_with_single_eof(self, source: str) -> None:
        """Recovery mode never raises and always reaches EOF."""
        tokens = _recovering(source)

        assert tokens[-1].kind == TokenKind.EOF
        assert sum(1 for t in tokens if t.kind == TokenKind.EOF) == 1

    @given(st.text(alphabet=LUA_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_strict_mode_raises_or_ends_with_eof(self, source: str) -> None:
        """Strict mode either raises LexError or ends with exactly one EOF."""
        try:
            tokens = list(Scanner(source))
        except LexError as err:
            assert err.line >= 1
            assert err.column >= 1
            return

        assert tokens[-1].kind == TokenKind.EOF
        assert sum(1 for t in tokens if t.kind == TokenKind.EOF) == 1

    @given(st.text(alphabet=LUA_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_strict_tokens_are_prefix_of_recovered_tokens(self, source: str) -> None:
        """Up to the first error, both modes produce the same tokens."""
        strict = []
        try:
            for token in Scanner(source):
                strict.append(token)
        except LexError:
            pass

        recovered = _recovering(source)
        assert recovered[: len(strict)] == strict


class TestPositions:
    """Positions are 1-based and move forward."""

    @given(st.text(alphabet=LUA_ALPHABET, max_size=300))
    @settings(max_examples=150)
    def test_positions_never_below_one(self, source: str) -> None:
        for token in _recovering(source):
            assert token.line >= 1
            assert token.column >= 1
            assert token.location.offset >= 0

    @given(st.text(alphabet=LUA_ALPHABET, max_size=300))
    @settings(max_examples=150)
    def test_offsets_increase_monotonically(self, source: str) -> None:
        """Every token consumes at least one character."""
        offsets = [t.location.offset for t in _recovering(source)]
        for i in range(1, len(offsets)):
            assert offsets[i] > offsets[i - 1]

    @given(st.text(alphabet=LUA_ALPHABET, max_size=300))
    @settings(max_examples=150)
    def test_lexeme_matches_source_span(self, source: str) -> None:
        """Non-keyword lexemes are exactly the source text they cover."""
        for token in _recovering(source):
            if token.kind.is_keyword or token.kind == TokenKind.EOF:
                assert token.lexeme == ""
                continue
            loc = token.location
            assert source[loc.offset : loc.end_offset] == token.lexeme

    @given(st.text(alphabet=LUA_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_line_matches_newlines_before_token(self, source: str) -> None:
        """A token's line is one more than the newlines preceding it."""
        for token in _recovering(source):
            offset = token.location.offset
            assert token.line == source.count("\n", 0, offset) + 1
            line_start = source.rfind("\n", 0, offset) + 1
            assert token.column == offset - line_start + 1


class TestDeterminism:
    """Independent scanners over the same text agree."""

    @given(st.text(alphabet=LUA_ALPHABET, max_size=200))
    @settings(max_examples=50)
    def test_fresh_scanners_produce_equal_sequences(self, source: str) -> None:
        assert _recovering(source) == _recovering(source)


class TestNames:
    """Identifier and keyword classification over generated names."""

    @given(st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,20}", fullmatch=True))
    @settings(max_examples=200)
    def test_name_is_keyword_or_exact_identifier(self, name: str) -> None:
        from luascan.lexer import KEYWORDS

        tokens = list(Scanner(name))
        assert len(tokens) == 2

        token = tokens[0]
        if name in KEYWORDS:
            assert token.kind == KEYWORDS[name]
            assert token.lexeme == ""
        else:
            assert token.kind == TokenKind.IDENTIFIER
            assert token.lexeme == name


class TestBoundaryConditions:
    """Boundary conditions and sizes."""

    @pytest.mark.parametrize("length", [0, 1, 2, 10, 100, 1000])
    def test_various_source_lengths(self, length: int) -> None:
        tokens = list(Scanner("a " * length))
        assert len(tokens) == length + 1
        assert tokens[-1].kind == TokenKind.EOF

    @pytest.mark.parametrize("newlines", [0, 1, 10, 100])
    def test_only_newlines(self, newlines: int) -> None:
        tokens = list(Scanner("\n" * newlines))
        assert [t.kind for t in tokens] == [TokenKind.EOF]
        assert tokens[0].line == newlines + 1

    @given(st.integers(min_value=0, max_value=30))
    @settings(max_examples=20)
    def test_any_level_long_string(self, level: int) -> None:
        eq = "=" * level
        source = f"[{eq}[x ]{eq}=] y]{eq}]"
        tokens = list(Scanner(source))
        assert [t.kind for t in tokens] == [TokenKind.STRING, TokenKind.EOF]
        assert tokens[0].literal == f"x ]{eq}=] y"
