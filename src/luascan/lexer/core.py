"""Pull-based Lua scanner.

Produces one token per request from an immutable source string. Whitespace
and comments are consumed while searching for the next token; the position
recorded for a token is taken after that skipping.

No regex in the hot path. Every loop advances the cursor, so scanning
always terminates.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from luascan.config import get_scan_config
from luascan.errors import LexError
from luascan.lexer.charsets import DIGITS, NAME_START, QUOTES, WHITESPACE
from luascan.lexer.scanners import (
    LongBracketScannerMixin,
    NameScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    StringScannerMixin,
    TriviaScannerMixin,
)
from luascan.tokens import Token, TokenKind
from luascan.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    # Providers first: the other mixins declare these helpers as stubs
    LongBracketScannerMixin,
    TriviaScannerMixin,
    OperatorScannerMixin,
    StringScannerMixin,
    NumberScannerMixin,
    NameScannerMixin,
):
    """Lua lexical scanner.

    Usage:
            >>> scanner = Scanner("local x = 10 -- ten")
            >>> for token in scanner:
            ...     print(token)
        Token(LOCAL, '', 1:1)
        Token(IDENTIFIER, 'x', 1:7)
        Token(EQUAL, '=', 1:9)
        Token(NUMBER, '10' -> 10.0, 1:11)
        Token(EOF, '', 1:20)

    Error handling:
        By default the first LexError propagates to the caller and ends the
        sequence. With error_recovery the error is handed to the diagnostic
        sink as ``At line:col: message``, recorded in ``errors``, and
        scanning resumes at the next whitespace character.

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_source_file",
        "_pos",
        "_line",
        "_col",
        # Start of the token attempt in flight
        "_start_pos",
        "_start_line",
        "_start_col",
        "_error_recovery",
        "_decode_escapes",
        "_diagnostic_sink",
        "_errors",
        "_failure",
        "_exhausted",
        "_started",
        "_token_count",
    )

    def __init__(
        self,
        source: str,
        *,
        source_file: str | None = None,
        error_recovery: bool | None = None,
        diagnostic_sink: Callable[[str], None] | None = None,
        decode_escapes: bool | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Options left as None are taken from the active ScanConfig.

        Args:
            source: Lua source text
            source_file: Optional source file path for error messages
            error_recovery: Report errors and keep scanning instead of raising
            diagnostic_sink: Receives formatted diagnostics in recovery mode
            decode_escapes: Decode escape sequences in short strings
        """
        config = get_scan_config()

        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._line = 1
        self._col = 1
        self._start_pos = 0
        self._start_line = 1
        self._start_col = 1

        self._error_recovery = (
            config.error_recovery if error_recovery is None else error_recovery
        )
        self._decode_escapes = (
            config.decode_escapes if decode_escapes is None else decode_escapes
        )
        self._diagnostic_sink = diagnostic_sink or config.diagnostic_sink

        self._errors: list[LexError] = []
        self._failure: LexError | None = None
        self._exhausted = False
        self._started = False
        self._token_count = 0

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def errors(self) -> tuple[LexError, ...]:
        """Errors reported so far in recovery mode."""
        return tuple(self._errors)

    @property
    def exhausted(self) -> bool:
        """True once EOF has been produced or a fatal error was raised."""
        return self._exhausted

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with exactly one EOF token.

        Nothing is scanned ahead of demand. Iterating again after the
        sequence has ended yields nothing.

        Yields:
            Token objects one at a time

        Raises:
            LexError: First lexical error, when recovery is off.
        """
        while not self._exhausted:
            yield self.next_token()

    def next_token(self) -> Token:
        """Scan and return the next token.

        Once EOF has been returned, every further call returns a new EOF
        token at the end position. After a fatal error, further calls raise
        that same error again.

        Raises:
            LexError: Lexical error, when recovery is off.
        """
        if self._failure is not None:
            raise self._failure
        if self._exhausted:
            self._save_location()
            return self._make_token(TokenKind.EOF, lexeme="")

        if not self._started:
            self._started = True
            logger.debug(
                "Scanning %s (%d chars, recovery=%s)",
                self._source_file or "<string>",
                self._source_len,
                self._error_recovery,
            )

        while True:
            try:
                token = self._scan_token()
            except LexError as err:
                if not self._error_recovery:
                    self._failure = err
                    self._exhausted = True
                    raise
                self._recover(err)
                continue

            self._token_count += 1
            if token.kind is TokenKind.EOF:
                self._exhausted = True
                logger.debug(
                    "Finished %s: %d tokens, %d errors",
                    self._source_file or "<string>",
                    self._token_count,
                    len(self._errors),
                )
            return token

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_token(self) -> Token:
        """Skip trivia, then dispatch on the first significant character."""
        self._save_location()
        self._skip_trivia()
        self._save_location()

        if self._pos >= self._source_len:
            return self._make_token(TokenKind.EOF, lexeme="")

        char = self._source[self._pos]

        if char in NAME_START:
            return self._scan_name()
        if char in DIGITS:
            return self._scan_number()
        if char in QUOTES:
            return self._scan_short_string()
        if char == "[":
            token = self._try_scan_long_string()
            if token is not None:
                return token

        token = self._try_scan_operator(char)
        if token is not None:
            return token

        self._advance()
        raise self._error_at(
            f"unexpected character '{char}'", self._start_line, self._start_col
        )

    def _recover(self, err: LexError) -> None:
        """Report err and skip forward to the next whitespace character."""
        self._errors.append(err)
        message = err.format()
        if self._diagnostic_sink is not None:
            self._diagnostic_sink(message)
        else:
            logger.warning("%s", err)

        # Always make progress past the point where the attempt started
        if self._pos == self._start_pos and self._pos < self._source_len:
            self._advance()
        source = self._source
        while self._pos < self._source_len and source[self._pos] not in WHITESPACE:
            self._advance()

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Look ahead without consuming.

        Returns:
            Character at cursor + offset, or empty string past the end.
        """
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Consume one character, updating line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _advance_to(self, target: int) -> None:
        """Advance to target, updating line/column for the skipped segment.

        Counts newlines with str.count instead of walking characters.

        Args:
            target: Position to advance to (clamped to end of source)
        """
        target = min(target, self._source_len)
        if target <= self._pos:
            return

        segment = self._source[self._pos : target]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._line += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = target

    def _match(self, expected: str) -> bool:
        """Consume expected if it is the next character."""
        if self._pos < self._source_len and self._source[self._pos] == expected:
            self._advance()
            return True
        return False

    def _consume_while(self, chars: frozenset[str]) -> int:
        """Consume a run of characters from chars.

        Returns:
            Number of characters consumed.
        """
        source = self._source
        end = self._pos
        while end < self._source_len and source[end] in chars:
            end += 1
        count = end - self._pos
        self._advance_to(end)
        return count

    # =========================================================================
    # Location tracking and construction
    # =========================================================================

    def _save_location(self) -> None:
        """Record the cursor as the start of the token attempt in flight."""
        self._start_pos = self._pos
        self._start_line = self._line
        self._start_col = self._col

    def _make_token(
        self,
        kind: TokenKind,
        *,
        lexeme: str | None = None,
        literal: float | int | str | None = None,
    ) -> Token:
        """Create a Token spanning from the saved start to the cursor.

        Args:
            kind: The token kind.
            lexeme: Lexeme override; defaults to the source text matched.
            literal: Decoded value, if any.

        Returns:
            Token positioned at the saved start.
        """
        if lexeme is None:
            lexeme = self._source[self._start_pos : self._pos]
        return Token(
            kind=kind,
            lexeme=lexeme,
            literal=literal,
            line=self._start_line,
            column=self._start_col,
            _offset=self._start_pos,
            _end_offset=self._pos,
            _end_line=self._line,
            _end_column=self._col,
            _source_file=self._source_file,
        )

    def _error(self, message: str) -> LexError:
        """Build a LexError at the cursor."""
        return self._error_at(message, self._line, self._col)

    def _error_at(self, message: str, line: int, column: int) -> LexError:
        """Build a LexError at the given position."""
        return LexError(message, line, column, source_file=self._source_file)
