"""Pull-based state-machine scanner for Lua source.

The Scanner is composed of one mixin per token family, all sharing the
cursor helpers defined on the core class.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + cursor + recovery)
├── charsets.py          # Character sets, punctuation and keyword tables
└── scanners/            # Token-family scanners
    ├── trivia.py        # Whitespace, short and long comments
    ├── operators.py     # Punctuation and greedy multi-char operators
    ├── long_bracket.py  # Long-bracket levels and the closing rule
    ├── strings.py       # Short strings and long strings
    ├── numbers.py       # Decimal and hexadecimal numerals
    └── names.py         # Identifiers and reserved words

Usage:
    >>> from luascan.lexer import Scanner
    >>> [t.kind.name for t in Scanner("x ~= 1")]
    ['IDENTIFIER', 'NOT_EQUAL', 'NUMBER', 'EOF']

"""

from luascan.lexer.charsets import KEYWORDS
from luascan.lexer.core import Scanner

__all__ = ["KEYWORDS", "Scanner"]
