"""Token and TokenKind definitions for the Lua scanner.

The scanner produces a stream of Token objects that a parser consumes.
Each Token has a kind, the matched lexeme, an optional decoded literal,
and a 1-based source position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens never have their full location read.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from luascan.location import SourceLocation


class TokenKind(Enum):
    """Kinds of tokens produced by the scanner.

    Organized by category:
    - Operators and punctuation
    - Literals (identifiers, numbers, strings)
    - Reserved words
    - End of input

    """

    # Arithmetic and bitwise operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    DOUBLE_SLASH = auto()  # //
    CARET = auto()  # ^
    PERCENT = auto()  # %
    AMPERSAND = auto()  # &
    TILDE = auto()  # ~
    BAR = auto()  # |
    SHIFT_RIGHT = auto()  # >>
    SHIFT_LEFT = auto()  # <<
    DOT_DOT = auto()  # ..

    # Comparison
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    EQUAL_EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # ~=

    # Punctuation
    HASH = auto()  # #
    SEMICOLON = auto()  # ;
    COLON = auto()  # :
    COLON_COLON = auto()  # ::
    EQUAL = auto()  # =
    COMMA = auto()  # ,
    DOT = auto()  # .
    DOT_DOT_DOT = auto()  # ...
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACKET = auto()  # [
    DOUBLE_LEFT_BRACKET = auto()  # [[ (reserved, never emitted)
    RIGHT_BRACKET = auto()  # ]
    DOUBLE_RIGHT_BRACKET = auto()  # ]] (reserved, never emitted)
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }

    # Literals
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()

    # Reserved words
    AND = auto()
    OR = auto()
    NOT = auto()
    NIL = auto()
    FALSE = auto()
    TRUE = auto()
    FOR = auto()
    WHILE = auto()
    REPEAT = auto()
    UNTIL = auto()
    DO = auto()
    IF = auto()
    THEN = auto()
    ELSEIF = auto()
    ELSE = auto()
    END = auto()
    BREAK = auto()
    GOTO = auto()
    RETURN = auto()
    FUNCTION = auto()
    LOCAL = auto()
    IN = auto()

    # End of input
    EOF = auto()

    @property
    def is_keyword(self) -> bool:
        """True for reserved words (``and`` through ``in``)."""
        return self in _KEYWORD_KINDS

    @property
    def is_punctuation(self) -> bool:
        """True for operators and punctuation."""
        return self in _PUNCTUATION_KINDS


_KEYWORD_KINDS = frozenset(
    kind for kind in TokenKind if TokenKind.AND.value <= kind.value <= TokenKind.IN.value
)
_PUNCTUATION_KINDS = frozenset(
    kind for kind in TokenKind if kind.value < TokenKind.IDENTIFIER.value
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenKind enum)
        lexeme: Exact source text of the match. Empty for reserved words
            and EOF, where the kind alone says everything.
        literal: Decoded value: float for decimal numerals, int for hex
            numerals, str for strings, None otherwise
        line: Start line number (1-indexed)
        column: Start column (1-indexed)
        _offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _end_line: Line just past the match
        _end_column: Column just past the match
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    lexeme: str
    literal: float | int | str | None
    line: int
    column: int
    _offset: int = 0
    _end_offset: int = 0
    _end_line: int | None = None
    _end_column: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from luascan.location import SourceLocation

        loc = SourceLocation(
            line=self.line,
            column=self.column,
            offset=self._offset,
            end_offset=self._end_offset,
            end_line=self._end_line,
            end_column=self._end_column,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_keyword(self) -> bool:
        """Whether this token is a reserved word."""
        return self.kind.is_keyword

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.lexeme
        if len(text) > 20:
            text = text[:17] + "..."
        if self.literal is None:
            return f"Token({self.kind.name}, {text!r}, {self.line}:{self.column})"
        literal = self.literal
        if isinstance(literal, str) and len(literal) > 20:
            literal = literal[:17] + "..."
        return f"Token({self.kind.name}, {text!r} -> {literal!r}, {self.line}:{self.column})"
