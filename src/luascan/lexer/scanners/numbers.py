"""Numeric literal scanner mixin."""

from __future__ import annotations

from luascan.errors import LexError
from luascan.lexer.charsets import DIGITS, HEX_DIGITS, NAME_CHARS
from luascan.tokens import Token, TokenKind


class NumberScannerMixin:
    """Mixin providing decimal and hexadecimal numeral scanning.

    Decimal: ``digits [. digit digits] [(e|E) [+|-] digit digits]``,
    decoded with float(). A ``.`` not followed by a digit is left for the
    operator scanner, so ``1..2`` scans as NUMBER DOT_DOT NUMBER.

    Hexadecimal: ``0x`` or ``0X`` then hex digits, decoded as an int.

    """

    # These will be set by the Scanner class
    _source: str
    _pos: int
    _start_pos: int
    _start_line: int
    _start_col: int

    def _peek(self, offset: int = 0) -> str:
        """Look ahead without consuming. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _advance_to(self, target: int) -> None:
        """Advance to target position. Implemented by Scanner."""
        raise NotImplementedError

    def _consume_while(self, chars: frozenset[str]) -> int:
        """Consume a run of chars. Implemented by Scanner."""
        raise NotImplementedError

    def _error_at(self, message: str, line: int, column: int) -> LexError:
        """Build a LexError at a given position. Implemented by Scanner."""
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

    def _scan_number(self) -> Token:
        """Scan a numeral starting with a decimal digit at the cursor.

        Raises:
            LexError: Malformed numeral (no hex digits, no exponent digits,
                or a name character glued to the numeral).
        """
        if self._peek() == "0" and self._peek(1) in ("x", "X"):
            self._advance_to(self._pos + 2)
            if self._consume_while(HEX_DIGITS) == 0 or self._peek() in NAME_CHARS:
                raise self._malformed_number()
            lexeme = self._source[self._start_pos : self._pos]
            return self._make_token(TokenKind.NUMBER, literal=int(lexeme[2:], 16))

        self._consume_while(DIGITS)

        if self._peek() == "." and self._peek(1) in DIGITS:
            self._advance()
            self._consume_while(DIGITS)

        if self._peek() in ("e", "E"):
            self._advance()
            if self._peek() in ("+", "-"):
                self._advance()
            if self._consume_while(DIGITS) == 0:
                raise self._malformed_number()

        if self._peek() in NAME_CHARS:
            raise self._malformed_number()

        lexeme = self._source[self._start_pos : self._pos]
        try:
            value = float(lexeme)
        except ValueError:
            raise self._malformed_number() from None
        return self._make_token(TokenKind.NUMBER, literal=value)

    def _malformed_number(self) -> LexError:
        """Swallow the rest of the numeral and build the error for it.

        The error points at the first character of the numeral.
        """
        self._consume_while(NAME_CHARS | {"."})
        text = self._source[self._start_pos : self._pos]
        return self._error_at(
            f"malformed number near '{text}'", self._start_line, self._start_col
        )
