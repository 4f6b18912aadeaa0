"""Token-family scanners for the luascan lexer.

Each scanner is a mixin that provides scanning logic for one family of
tokens (trivia, operators, long brackets, strings, numbers, names).
"""

from __future__ import annotations

from luascan.lexer.scanners.long_bracket import LongBracketScannerMixin
from luascan.lexer.scanners.names import NameScannerMixin
from luascan.lexer.scanners.numbers import NumberScannerMixin
from luascan.lexer.scanners.operators import OperatorScannerMixin
from luascan.lexer.scanners.strings import StringScannerMixin
from luascan.lexer.scanners.trivia import TriviaScannerMixin

__all__ = [
    "LongBracketScannerMixin",
    "NameScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "StringScannerMixin",
    "TriviaScannerMixin",
]
