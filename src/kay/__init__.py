"""
KAY Scanner - Lexical Analysis for the KAY Language
===================================================

This package turns KAY source text into a linear sequence of classified
tokens for a later parsing stage.

Main Components
---------------
- **lexer**: the tokenizer (Lexer, Token, TokenKind)
- **source**: character source adapter over files and strings
- **config**: options for opening source files
- **errors**: exception hierarchy (raised only when a source cannot be opened)
- **cli**: the kayscan command-line driver

Quick Start
-----------
Scan a string:
    >>> from kay import tokenize
    >>> [str(t) for t in tokenize("x := 31")]
    ['Type: Identifier - Value: x', 'Type: Operator - Value: :=', 'Type: Literal - Value: 31', 'Type: EndOfStream - Value: EOF']

Scan a file:
    >>> from kay import Lexer
    >>> with Lexer.from_file("prog1.kay") as lexer:
    ...     for token in lexer:
    ...         print(token)

Or use the command-line tool:
    $ kayscan prog1.kay
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from kay.config import ScannerOptions
from kay.errors import KayError, SourceLocation, SourceUnavailableError
from kay.lexer import (
    BOOLEAN_LITERALS,
    KEYWORDS,
    OPERATORS,
    SEPARATORS,
    Lexer,
    Token,
    TokenKind,
    tokenize,
)
from kay.source import EOF, CharacterSource

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize",
    "KEYWORDS",
    "BOOLEAN_LITERALS",
    "OPERATORS",
    "SEPARATORS",
    # Character source
    "CharacterSource",
    "EOF",
    # Configuration
    "ScannerOptions",
    # Exception hierarchy
    "KayError",
    "SourceLocation",
    "SourceUnavailableError",
]
