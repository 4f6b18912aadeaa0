"""Character sets and lookup tables for O(1) classification.

All sets are frozensets and all tables are read-only mappings, built once
at import and shared by every Scanner.

Usage:
    from luascan.lexer.charsets import KEYWORDS

    kind = KEYWORDS.get(lexeme)  # O(1) lookup
"""

from __future__ import annotations

from types import MappingProxyType

from luascan.tokens import TokenKind

DIGITS: frozenset[str] = frozenset("0123456789")

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Lua names are ASCII only
NAME_START: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
NAME_CHARS: frozenset[str] = NAME_START | DIGITS

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

QUOTES: frozenset[str] = frozenset("'\"")

# Punctuation that never combines with the following character.
# "[" and "-" are absent: they may open long strings and comments.
SINGLE_CHAR_TOKENS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "+": TokenKind.PLUS,
        "*": TokenKind.STAR,
        "^": TokenKind.CARET,
        "%": TokenKind.PERCENT,
        "&": TokenKind.AMPERSAND,
        "|": TokenKind.BAR,
        "#": TokenKind.HASH,
        ";": TokenKind.SEMICOLON,
        ",": TokenKind.COMMA,
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "]": TokenKind.RIGHT_BRACKET,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
    }
)

KEYWORDS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "or": TokenKind.OR,
        "not": TokenKind.NOT,
        "nil": TokenKind.NIL,
        "false": TokenKind.FALSE,
        "true": TokenKind.TRUE,
        "for": TokenKind.FOR,
        "while": TokenKind.WHILE,
        "repeat": TokenKind.REPEAT,
        "until": TokenKind.UNTIL,
        "do": TokenKind.DO,
        "if": TokenKind.IF,
        "then": TokenKind.THEN,
        "elseif": TokenKind.ELSEIF,
        "else": TokenKind.ELSE,
        "end": TokenKind.END,
        "break": TokenKind.BREAK,
        "goto": TokenKind.GOTO,
        "return": TokenKind.RETURN,
        "function": TokenKind.FUNCTION,
        "local": TokenKind.LOCAL,
        "in": TokenKind.IN,
    }
)

# Simple escapes accepted in short strings when decoding is enabled
SIMPLE_ESCAPES: MappingProxyType[str, str] = MappingProxyType(
    {
        "a": "\a",
        "b": "\b",
        "f": "\f",
        "n": "\n",
        "r": "\r",
        "t": "\t",
        "v": "\v",
        "\\": "\\",
        '"': '"',
        "'": "'",
    }
)
