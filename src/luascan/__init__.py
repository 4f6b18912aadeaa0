"""
luascan: Lua lexical scanner for Python

Turns Lua source text into a lazy stream of classified tokens for a
downstream parser. Handles long brackets of any level, long comments,
greedy operators, hex and decimal numerals, and tracks 1-based line and
column positions for diagnostics. Zero runtime dependencies.

Quick Start:
    >>> from luascan import scan
    >>> [t.kind.name for t in scan("local t = {1, 2}")]
    ['LOCAL', 'IDENTIFIER', 'EQUAL', 'LEFT_BRACE', 'NUMBER', 'COMMA', 'NUMBER', 'RIGHT_BRACE', 'EOF']

    >>> # Keep going past bad input, collecting diagnostics
    >>> messages = []
    >>> tokens = list(scan("x = @ 1", error_recovery=True, diagnostic_sink=messages.append))
    >>> messages
    ["At 1:5: unexpected character '@'"]

Command line:
    luascan script.lua     # print every token of a file
    luascan                # interactive token REPL
"""

from collections.abc import Callable, Iterator

from luascan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from luascan.errors import LexError, LuaScanError
from luascan.lexer import KEYWORDS, Scanner
from luascan.location import SourceLocation
from luascan.tokens import Token, TokenKind

__version__ = "0.1.0"


def scan(
    source: str,
    *,
    source_file: str | None = None,
    error_recovery: bool | None = None,
    diagnostic_sink: Callable[[str], None] | None = None,
    decode_escapes: bool | None = None,
) -> Iterator[Token]:
    """Scan Lua source into a lazy token stream.

    Each call builds a fresh Scanner, so scanning the same text twice
    gives two equal, independent sequences.

    Args:
        source: Lua source text
        source_file: Optional source file path for error messages
        error_recovery: Report lexical errors and keep scanning
        diagnostic_sink: Receives ``At line:col: message`` in recovery mode
        decode_escapes: Decode escape sequences in short strings

    Returns:
        Iterator of tokens ending with exactly one EOF token

    Raises:
        LexError: On the first lexical error, when recovery is off.
            Raised while iterating, not by this call.

    Example:
        >>> tok = next(scan("0x1A"))
        >>> tok.kind.name, tok.literal
        ('NUMBER', 26)
    """
    scanner = Scanner(
        source,
        source_file=source_file,
        error_recovery=error_recovery,
        diagnostic_sink=diagnostic_sink,
        decode_escapes=decode_escapes,
    )
    return scanner.tokenize()


__all__ = [
    "KEYWORDS",
    "LexError",
    "LuaScanError",
    "ScanConfig",
    "Scanner",
    "SourceLocation",
    "Token",
    "TokenKind",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan",
    "scan_config_context",
    "set_scan_config",
]
