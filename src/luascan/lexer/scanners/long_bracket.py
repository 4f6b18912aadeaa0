"""Long-bracket scanner mixin.

Shared by long strings (``[==[ ... ]==]``) and long comments
(``--[==[ ... ]==]``). The number of ``=`` signs is the bracket level and
must match exactly between the opener and the closer.
"""

from __future__ import annotations

from luascan.errors import LexError


class LongBracketScannerMixin:
    """Mixin providing long-bracket level detection and the closing rule."""

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int

    def _advance_to(self, target: int) -> None:
        """Advance to target position. Implemented by Scanner."""
        raise NotImplementedError

    def _error(self, message: str) -> LexError:
        """Build a LexError at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _long_bracket_level(self, at: int | None = None) -> int | None:
        """Check for a long-bracket opener without consuming anything.

        Args:
            at: Position of the candidate ``[`` (defaults to the cursor)

        Returns:
            Number of ``=`` signs if ``[=*[`` starts at ``at``, else None.
            Examples: ``[[`` -> 0, ``[=[`` -> 1, ``[==[`` -> 2
        """
        source = self._source
        source_len = self._source_len
        i = self._pos if at is None else at
        if i >= source_len or source[i] != "[":
            return None
        j = i + 1
        while j < source_len and source[j] == "=":
            j += 1
        if j < source_len and source[j] == "[":
            return j - i - 1
        return None

    def _read_long_bracket(self, level: int) -> str:
        """Consume a long-bracket body and its closer.

        The cursor must sit just past the opener. A ``]`` opens a candidate
        close; the ``=`` run after it is counted, and the candidate closes
        only when the next character is ``]`` and the count equals level.
        Anything else breaks the candidate, and a breaking ``]`` starts the
        next one.

        Args:
            level: Opening bracket level

        Returns:
            Text between the opener and the matching closer.

        Raises:
            LexError: End of input before a matching closer.
        """
        source = self._source
        source_len = self._source_len
        body_start = self._pos
        i = body_start
        while i < source_len:
            if source[i] != "]":
                i += 1
                continue
            j = i + 1
            while j < source_len and source[j] == "=":
                j += 1
            if j < source_len and source[j] == "]" and j - i - 1 == level:
                body = source[body_start:i]
                self._advance_to(j + 1)
                return body
            i = j

        self._advance_to(source_len)
        raise self._error(f"expected closing bracket ']{'=' * level}]'")
