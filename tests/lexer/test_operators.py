"""Tests for operator and punctuation scanning.

Operators are scanned greedily: each step looks at one more character and
takes the longest spelling that matches.
"""

import pytest

from luascan.errors import LexError
from luascan.lexer import Scanner
from luascan.tokens import TokenKind


def _kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in Scanner(source)]


SPELLINGS = [
    ("+", TokenKind.PLUS),
    ("-", TokenKind.MINUS),
    ("*", TokenKind.STAR),
    ("/", TokenKind.SLASH),
    ("//", TokenKind.DOUBLE_SLASH),
    ("^", TokenKind.CARET),
    ("%", TokenKind.PERCENT),
    ("&", TokenKind.AMPERSAND),
    ("~", TokenKind.TILDE),
    ("|", TokenKind.BAR),
    (">>", TokenKind.SHIFT_RIGHT),
    ("<<", TokenKind.SHIFT_LEFT),
    ("..", TokenKind.DOT_DOT),
    ("<", TokenKind.LESS),
    ("<=", TokenKind.LESS_EQUAL),
    (">", TokenKind.GREATER),
    (">=", TokenKind.GREATER_EQUAL),
    ("==", TokenKind.EQUAL_EQUAL),
    ("~=", TokenKind.NOT_EQUAL),
    ("#", TokenKind.HASH),
    (";", TokenKind.SEMICOLON),
    (":", TokenKind.COLON),
    ("::", TokenKind.COLON_COLON),
    ("=", TokenKind.EQUAL),
    (",", TokenKind.COMMA),
    (".", TokenKind.DOT),
    ("...", TokenKind.DOT_DOT_DOT),
    ("(", TokenKind.LEFT_PAREN),
    (")", TokenKind.RIGHT_PAREN),
    ("[", TokenKind.LEFT_BRACKET),
    ("]", TokenKind.RIGHT_BRACKET),
    ("{", TokenKind.LEFT_BRACE),
    ("}", TokenKind.RIGHT_BRACE),
]


class TestSingleSpellings:
    """Each operator spelling on its own is exactly one token."""

    @pytest.mark.parametrize(("spelling", "kind"), SPELLINGS)
    def test_spelling_is_one_token(self, spelling: str, kind: TokenKind) -> None:
        tokens = list(Scanner(spelling))
        assert [t.kind for t in tokens] == [kind, TokenKind.EOF]
        assert tokens[0].lexeme == spelling
        assert tokens[0].literal is None

    @pytest.mark.parametrize(("spelling", "kind"), SPELLINGS)
    def test_kind_is_punctuation(self, spelling: str, kind: TokenKind) -> None:
        assert kind.is_punctuation
        assert not kind.is_keyword


class TestMaximalMunch:
    """Longer spellings win, and leftovers start the next token."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (">>=", [TokenKind.SHIFT_RIGHT, TokenKind.EQUAL]),
            ("<<=", [TokenKind.SHIFT_LEFT, TokenKind.EQUAL]),
            (">=>", [TokenKind.GREATER_EQUAL, TokenKind.GREATER]),
            ("....", [TokenKind.DOT_DOT_DOT, TokenKind.DOT]),
            ("===", [TokenKind.EQUAL_EQUAL, TokenKind.EQUAL]),
            ("~==", [TokenKind.NOT_EQUAL, TokenKind.EQUAL]),
            ("::=", [TokenKind.COLON_COLON, TokenKind.EQUAL]),
            ("///", [TokenKind.DOUBLE_SLASH, TokenKind.SLASH]),
            ("~~", [TokenKind.TILDE, TokenKind.TILDE]),
        ],
    )
    def test_greedy_sequences(self, source: str, expected: list[TokenKind]) -> None:
        assert _kinds(source) == [*expected, TokenKind.EOF]

    def test_vararg_between_names(self) -> None:
        assert _kinds("f(a, ...)") == [
            TokenKind.IDENTIFIER,
            TokenKind.LEFT_PAREN,
            TokenKind.IDENTIFIER,
            TokenKind.COMMA,
            TokenKind.DOT_DOT_DOT,
            TokenKind.RIGHT_PAREN,
            TokenKind.EOF,
        ]

    def test_concat_between_strings(self) -> None:
        assert _kinds("'a'..'b'") == [
            TokenKind.STRING,
            TokenKind.DOT_DOT,
            TokenKind.STRING,
            TokenKind.EOF,
        ]


class TestBrackets:
    """Square brackets that do not open long strings."""

    def test_double_close_is_two_tokens(self) -> None:
        """]] never combines, so nested indexing stays parseable."""
        assert _kinds("]]") == [
            TokenKind.RIGHT_BRACKET,
            TokenKind.RIGHT_BRACKET,
            TokenKind.EOF,
        ]

    def test_nested_index(self) -> None:
        assert _kinds("a[b[1]]") == [
            TokenKind.IDENTIFIER,
            TokenKind.LEFT_BRACKET,
            TokenKind.IDENTIFIER,
            TokenKind.LEFT_BRACKET,
            TokenKind.NUMBER,
            TokenKind.RIGHT_BRACKET,
            TokenKind.RIGHT_BRACKET,
            TokenKind.EOF,
        ]

    @pytest.mark.parametrize("source", ["[=", "[=x", "[==x", "a[=1]"])
    def test_bracket_then_equal_without_opener(self, source: str) -> None:
        """[ followed by = signs must open a long string."""
        with pytest.raises(LexError) as exc_info:
            list(Scanner(source))
        err = exc_info.value
        assert err.message == "invalid long string delimiter"
        assert err.column == source.index("[") + 1

    def test_bracket_then_spaced_equal(self) -> None:
        assert _kinds("[ =") == [TokenKind.LEFT_BRACKET, TokenKind.EQUAL, TokenKind.EOF]

    def test_double_bracket_kinds_never_emitted(self) -> None:
        kinds = set(_kinds("a[b[1]] = [[x]] ]]"))
        assert TokenKind.DOUBLE_LEFT_BRACKET not in kinds
        assert TokenKind.DOUBLE_RIGHT_BRACKET not in kinds


class TestMinus:
    """A single dash is subtraction, a double dash starts a comment."""

    def test_subtraction(self) -> None:
        assert _kinds("a-b") == [
            TokenKind.IDENTIFIER,
            TokenKind.MINUS,
            TokenKind.IDENTIFIER,
            TokenKind.EOF,
        ]

    def test_double_dash_is_comment(self) -> None:
        assert _kinds("a--b") == [TokenKind.IDENTIFIER, TokenKind.EOF]

    def test_negative_number(self) -> None:
        assert _kinds("-1") == [TokenKind.MINUS, TokenKind.NUMBER, TokenKind.EOF]
