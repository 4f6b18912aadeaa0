"""Whitespace and comment scanner mixin."""

from __future__ import annotations

from luascan.lexer.charsets import WHITESPACE


class TriviaScannerMixin:
    """Mixin that skips whitespace and comments between tokens.

    Comments are discarded, never tokenized:
    - ``--`` followed by a long-bracket opener is a long comment, closed by
      the same rule as long strings
    - any other ``--`` runs to the end of the line

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _advance_to(self, target: int) -> None:
        """Advance to target position. Implemented by Scanner."""
        raise NotImplementedError

    def _long_bracket_level(self, at: int | None = None) -> int | None:
        """Detect a long-bracket opener. Implemented by LongBracketScannerMixin."""
        raise NotImplementedError

    def _read_long_bracket(self, level: int) -> str:
        """Consume a long-bracket body. Implemented by LongBracketScannerMixin."""
        raise NotImplementedError

    def _skip_trivia(self) -> None:
        """Skip whitespace and comments up to the next significant character."""
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            char = source[self._pos]
            if char in WHITESPACE:
                self._advance()
            elif char == "-" and source.startswith("--", self._pos):
                self._skip_comment()
            else:
                return

    def _skip_comment(self) -> None:
        """Skip a comment starting at the cursor (which sits on ``--``)."""
        self._advance_to(self._pos + 2)

        level = self._long_bracket_level()
        if level is not None:
            self._advance_to(self._pos + level + 2)
            self._read_long_bracket(level)
            return

        # Short comment: stop before the newline, whitespace skipping eats it
        line_end = self._source.find("\n", self._pos)
        self._advance_to(line_end if line_end != -1 else self._source_len)
