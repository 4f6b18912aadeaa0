"""String literal scanner mixin.

Handles both string forms:
- short strings delimited by ``'`` or ``"``, one line, backslash escapes
- long strings delimited by long brackets, any number of lines, no escapes

"""

from __future__ import annotations

from luascan.errors import LexError
from luascan.lexer.charsets import DIGITS, HEX_DIGITS, SIMPLE_ESCAPES, WHITESPACE
from luascan.tokens import Token, TokenKind

_MAX_DECIMAL_ESCAPE = 255
_MAX_UNICODE_ESCAPE = 0x10FFFF


class StringScannerMixin:
    """Mixin providing short-string and long-string scanning."""

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _line: int
    _col: int
    _decode_escapes: bool

    def _peek(self, offset: int = 0) -> str:
        """Look ahead without consuming. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _advance_to(self, target: int) -> None:
        """Advance to target position. Implemented by Scanner."""
        raise NotImplementedError

    def _error(self, message: str) -> LexError:
        """Build a LexError at the cursor. Implemented by Scanner."""
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

    def _long_bracket_level(self, at: int | None = None) -> int | None:
        """Detect a long-bracket opener. Implemented by LongBracketScannerMixin."""
        raise NotImplementedError

    def _read_long_bracket(self, level: int) -> str:
        """Consume a long-bracket body. Implemented by LongBracketScannerMixin."""
        raise NotImplementedError

    # =========================================================================
    # Long strings
    # =========================================================================

    def _try_scan_long_string(self) -> Token | None:
        """Scan a long string if the cursor sits on a long-bracket opener.

        Returns:
            STRING token, or None when the ``[`` is an ordinary bracket.

        Raises:
            LexError: ``[`` followed by ``=`` signs but no second ``[``.
        """
        level = self._long_bracket_level()
        if level is None:
            if self._peek(1) == "=":
                raise self._error("invalid long string delimiter")
            return None

        self._advance_to(self._pos + level + 2)
        body = self._read_long_bracket(level)

        # A newline right after the opener is not part of the string
        for newline in ("\r\n", "\n\r", "\n", "\r"):
            if body.startswith(newline):
                body = body[len(newline) :]
                break

        return self._make_token(TokenKind.STRING, literal=body)

    # =========================================================================
    # Short strings
    # =========================================================================

    def _scan_short_string(self) -> Token:
        """Scan a quoted string starting at the cursor.

        A backslash always swallows the character after it, so an escaped
        quote never closes the string. Without escape decoding the literal
        is the raw text between the quotes.

        Raises:
            LexError: Newline or end of input before the closing quote, or an
                invalid escape when decoding is enabled.
        """
        source = self._source
        source_len = self._source_len
        decode = self._decode_escapes
        quote = self._advance()
        body_start = self._pos
        parts: list[str] = []

        while True:
            if self._pos >= source_len:
                raise self._error("unfinished string")
            char = source[self._pos]
            if char == quote:
                break
            if char in "\r\n":
                raise self._error("unfinished string")
            if char == "\\":
                if decode:
                    parts.append(self._read_escape())
                    continue
                self._advance()
                if self._pos >= source_len:
                    raise self._error("unfinished string")
                escaped = source[self._pos]
                if escaped in "\r\n":
                    # \r\n and \n\r after a backslash form one line break
                    self._advance()
                    following = self._peek()
                    if following and following in "\r\n" and following != escaped:
                        self._advance()
                    continue
            if decode:
                parts.append(char)
            self._advance()

        body_end = self._pos
        self._advance()  # closing quote

        literal = "".join(parts) if decode else source[body_start:body_end]
        return self._make_token(TokenKind.STRING, literal=literal)

    def _read_escape(self) -> str:
        """Decode one escape sequence; the cursor sits on the backslash.

        Returns:
            Decoded text (empty for ``\\z``).
        """
        line, column = self._line, self._col
        self._advance()
        char = self._peek()

        if char == "":
            raise self._error("unfinished string")

        # Backslash-newline: any of \n, \r, \r\n, \n\r becomes one newline
        if char in "\r\n":
            self._advance()
            following = self._peek()
            if following and following in "\r\n" and following != char:
                self._advance()
            return "\n"

        simple = SIMPLE_ESCAPES.get(char)
        if simple is not None:
            self._advance()
            return simple

        if char == "z":
            self._advance()
            while self._peek() in WHITESPACE:
                self._advance()
            return ""

        if char == "x":
            digits = self._source[self._pos + 1 : self._pos + 3]
            if len(digits) != 2 or not all(d in HEX_DIGITS for d in digits):
                raise self._error_at("invalid escape sequence '\\x'", line, column)
            self._advance_to(self._pos + 3)
            return chr(int(digits, 16))

        if char in DIGITS:
            end = self._pos
            while end < self._source_len and end - self._pos < 3 and self._source[end] in DIGITS:
                end += 1
            value = int(self._source[self._pos : end])
            if value > _MAX_DECIMAL_ESCAPE:
                raise self._error_at("decimal escape too large", line, column)
            self._advance_to(end)
            return chr(value)

        if char == "u":
            return self._read_unicode_escape(line, column)

        raise self._error_at(f"invalid escape sequence '\\{char}'", line, column)

    def _read_unicode_escape(self, line: int, column: int) -> str:
        """Decode ``\\u{XXX}``; the cursor sits on the ``u``."""
        source = self._source
        start = self._pos + 1
        if start >= self._source_len or source[start] != "{":
            raise self._error_at("invalid escape sequence '\\u'", line, column)
        end = start + 1
        while end < self._source_len and source[end] in HEX_DIGITS:
            end += 1
        if end == start + 1 or end >= self._source_len or source[end] != "}":
            raise self._error_at("invalid escape sequence '\\u'", line, column)
        value = int(source[start + 1 : end], 16)
        if value > _MAX_UNICODE_ESCAPE:
            raise self._error_at("UTF-8 value too large", line, column)
        self._advance_to(end + 1)
        return chr(value)
