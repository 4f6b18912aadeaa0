"""Operator and punctuation scanner mixin."""

from __future__ import annotations

from luascan.lexer.charsets import SINGLE_CHAR_TOKENS
from luascan.tokens import Token, TokenKind

# Greedy lookahead chains: first char -> ((next char, kind after it), ...), fallback.
# Each step looks at one more character; the first hit wins.
_LOOKAHEAD: dict[str, tuple[tuple[tuple[str, TokenKind], ...], TokenKind]] = {
    ":": (((":", TokenKind.COLON_COLON),), TokenKind.COLON),
    "=": ((("=", TokenKind.EQUAL_EQUAL),), TokenKind.EQUAL),
    "/": ((("/", TokenKind.DOUBLE_SLASH),), TokenKind.SLASH),
    "~": ((("=", TokenKind.NOT_EQUAL),), TokenKind.TILDE),
    ">": (((">", TokenKind.SHIFT_RIGHT), ("=", TokenKind.GREATER_EQUAL)), TokenKind.GREATER),
    "<": ((("<", TokenKind.SHIFT_LEFT), ("=", TokenKind.LESS_EQUAL)), TokenKind.LESS),
    "-": ((), TokenKind.MINUS),
    "[": ((), TokenKind.LEFT_BRACKET),
}


class OperatorScannerMixin:
    """Mixin providing maximal-munch operator scanning.

    Every decision uses at most one character of lookahead past what has
    already been consumed, so there is never any backtracking.

    """

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _match(self, expected: str) -> bool:
        """Consume expected if it is next. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(
        self,
        kind: TokenKind,
        *,
        lexeme: str | None = None,
        literal: float | int | str | None = None,
    ) -> Token:
        """Create token from the saved start. Implemented by Scanner."""
        raise NotImplementedError

    def _try_scan_operator(self, char: str) -> Token | None:
        """Scan an operator or punctuation token starting with char.

        Args:
            char: Character at the cursor

        Returns:
            Token, or None if char starts no operator.
        """
        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            self._advance()
            return self._make_token(kind)

        if char == ".":
            self._advance()
            if self._match("."):
                kind = TokenKind.DOT_DOT_DOT if self._match(".") else TokenKind.DOT_DOT
            else:
                kind = TokenKind.DOT
            return self._make_token(kind)

        chain = _LOOKAHEAD.get(char)
        if chain is None:
            return None

        self._advance()
        followers, fallback = chain
        for follower, kind in followers:
            if self._match(follower):
                return self._make_token(kind)
        return self._make_token(fallback)
