"""Identifier and keyword scanner mixin."""

from __future__ import annotations

from luascan.lexer.charsets import KEYWORDS, NAME_CHARS
from luascan.tokens import Token, TokenKind


class NameScannerMixin:
    """Mixin providing identifier scanning and keyword lookup."""

    # These will be set by the Scanner class
    _source: str
    _pos: int
    _start_pos: int

    def _consume_while(self, chars: frozenset[str]) -> int:
        """Consume a run of chars. Implemented by Scanner."""
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

    def _scan_name(self) -> Token:
        """Scan a name starting at the cursor.

        Reserved words become kind-only tokens with an empty lexeme; any
        other name is an IDENTIFIER carrying its exact spelling.
        """
        self._consume_while(NAME_CHARS)
        lexeme = self._source[self._start_pos : self._pos]
        kind = KEYWORDS.get(lexeme)
        if kind is not None:
            return self._make_token(kind, lexeme="")
        return self._make_token(TokenKind.IDENTIFIER, lexeme=lexeme)
