"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for tracking positions in Lua source text.
Used by tokens and LexError for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (line and column start at 1).
    Offsets are 0-indexed positions into the source string.

    Attributes:
        line: Starting line number (1-indexed)
        column: Starting column (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        end_line: Line just past the end of the span (optional)
        end_column: Column just past the end of the span (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(line=3, column=7)
            >>> str(loc)
            '3:7'

            >>> loc = SourceLocation(1, 1, 0, 5, source_file="init.lua")
            >>> str(loc)
            'init.lua:1:1'

    """

    line: int
    column: int
    offset: int = 0
    end_offset: int = 0
    end_line: int | None = None
    end_column: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "init.lua:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

