"""Exception classes for luascan.

Provides standardized exceptions for error handling throughout luascan.
"""

from __future__ import annotations

from luascan.location import SourceLocation


class LuaScanError(Exception):
    """Base exception for all luascan errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(LuaScanError):
    """Error while scanning Lua source.

    Raised when the scanner meets text that cannot start or finish a token:
    an unexpected character, an unfinished string, an unclosed long
    bracket, a malformed number or an invalid escape sequence.

    The string form is ``At <line>:<column>: <message>``, prefixed with the
    source file when one is known.
    """

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with its location.

        Args:
            message: Error description
            line: Line of the offending character (1-indexed)
            column: Column of the offending character (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.line = line
        self.column = column
        self.source_file = source_file
        super().__init__(self.format(with_file=True))

    def format(self, *, with_file: bool = False) -> str:
        """Render the diagnostic line.

        Args:
            with_file: Prefix the source file path when one is known

        Returns:
            ``At line:column: message``, optionally ``file: `` prefixed
        """
        text = f"At {self.line}:{self.column}: {self.message}"
        if with_file and self.source_file:
            return f"{self.source_file}: {text}"
        return text

    @property
    def location(self) -> SourceLocation:
        """Location of the offending character."""
        return SourceLocation(
            line=self.line, column=self.column, source_file=self.source_file
        )
