"""
KAY Lexer (Tokenizer)
=====================

This module implements the lexer for KAY, a small imperative language.
It converts source text into a stream of classified tokens for a later
parsing stage.

Token Kinds
-----------
- Keyword: main, integer, bool, if, else, while
- Identifier: a letter followed by letters, digits and underscores
- Literal: decimal integers (31) and the booleans True and False
- Operator: := && || ! != < <= > >= = == + - * / %
- Separator: ( ) { } ; ,
- Other: anything malformed (3a, a lone ':', '&' or '|', unknown characters)
- EndOfStream: sentinel returned once the input is exhausted

Malformed input never raises. It is returned as an Other token carrying
the offending text, and scanning carries on with the next character. The
caller decides whether Other tokens are a program error.

Comments
--------
- Single-line: // comment (ends at \\n or \\r)
- Multi-line: /* comment */ (an unterminated comment runs to end of input)

Example Usage
-------------
>>> from kay.lexer import Lexer
>>> lexer = Lexer.from_string("main(){ x := 5; }")
>>> for token in lexer.tokenize():
...     print(token)
Type: Keyword - Value: main
Type: Separator - Value: (
Type: Separator - Value: )
Type: Separator - Value: {
Type: Identifier - Value: x
Type: Operator - Value: :=
Type: Literal - Value: 5
Type: Separator - Value: ;
Type: Separator - Value: }
Type: EndOfStream - Value: EOF
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Union
import logging

from kay.config import ScannerOptions
from kay.errors import SourceLocation
from kay.source import CharacterSource

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the KAY language.

    The value of each member is its display name, as printed by the
    kayscan driver ("Type: Keyword - Value: main").
    """

    END_OF_STREAM = "EndOfStream"
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    OPERATOR = "Operator"
    SEPARATOR = "Separator"
    OTHER = "Other"         # Lexical error signal


# =============================================================================
# Lexical Tables
# =============================================================================

KEYWORDS = frozenset({"main", "integer", "bool", "if", "else", "while"})

# Checked before KEYWORDS, case-sensitive
BOOLEAN_LITERALS = frozenset({"True", "False"})

OPERATORS = frozenset({
    ":=", "&&", "||", "!", "!=",
    "<", "<=", ">", ">=", "=", "==",
    "+", "-", "*", "/", "%",
})

SEPARATORS = frozenset("(){};,")

# Lexeme of the EndOfStream sentinel
EOF_LEXEME = "EOF"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from KAY source text.

    Tokens compare by kind and lexeme only, so ``Token(TokenKind.LITERAL, "5")``
    equals a scanned literal 5 wherever it appears.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text matched ("EOF" for EndOfStream)
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        offset: Character offset of the first character (0-indexed)
        filename: Name of the source the token came from
    """
    kind: TokenKind
    lexeme: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    offset: int = field(default=0, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __str__(self) -> str:
        return f"Type: {self.kind.value} - Value: {self.lexeme}"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.value}, {self.lexeme!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_error(self) -> bool:
        """Return True if this token signals a lexical error."""
        return self.kind is TokenKind.OTHER


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes KAY source text one token at a time.

    The lexer pulls characters from a CharacterSource with a single
    character of lookahead and always takes the longest lexeme the
    current rule allows (``<=`` over ``<``, ``&&`` over ``&``).

    Usage:
        with Lexer.from_file("prog1.kay") as lexer:
            for token in lexer:
                print(token)

    Once EndOfStream has been returned the character source is closed,
    and every further next_token() call returns EndOfStream again.

    Attributes:
        source: The CharacterSource being scanned
    """

    def __init__(self, source: CharacterSource):
        self.source = source
        self._finished = False
        self._token_count = 0

        # Start position of the token being scanned
        self._mark_start()

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        options: Optional[ScannerOptions] = None,
    ) -> "Lexer":
        """
        Create a lexer over a source file.

        Raises:
            SourceUnavailableError: If the file cannot be opened
        """
        return cls(CharacterSource.open(path, options))

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "Lexer":
        """Create a lexer over in-memory text."""
        return cls(CharacterSource.from_string(text, filename))

    # =========================================================================
    # Public Token API
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EndOfStream once the input is exhausted
        """
        if self._finished:
            return self._end_of_stream()

        # A lone '/' is found while looking for comments
        slash = self._skip_whitespace_and_comments()
        if slash is not None:
            return self._emit(slash)

        if self.source.at_end:
            self._finished = True
            token = self._end_of_stream()
            logger.debug(f"{token.location}: end of stream after {self._token_count} tokens")
            self.source.close()
            return token

        return self._emit(self._scan_token())

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including EndOfStream.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_STREAM:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def at_end(self) -> bool:
        """True once EndOfStream has been returned."""
        return self._finished

    @property
    def token_count(self) -> int:
        """Number of tokens returned so far, not counting EndOfStream."""
        return self._token_count

    def close(self) -> None:
        """Release the character source."""
        self.source.close()

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _mark_start(self) -> None:
        self._start_line = self.source.line
        self._start_column = self.source.column
        self._start_offset = self.source.offset

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create a token starting at the marked start position."""
        return Token(
            kind=kind,
            lexeme=lexeme,
            line=self._start_line,
            column=self._start_column,
            offset=self._start_offset,
            filename=self.source.name,
        )

    def _end_of_stream(self) -> Token:
        self._mark_start()
        return self._make_token(TokenKind.END_OF_STREAM, EOF_LEXEME)

    def _emit(self, token: Token) -> Token:
        self._token_count += 1
        if token.is_error():
            logger.debug(f"{token.location}: unrecognized lexeme {token.lexeme!r}")
        return token

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> Optional[Token]:
        """
        Skip any run of whitespace and comments.

        Returns:
            The Operator "/" token if a '/' turned out not to start a
            comment, otherwise None
        """
        src = self.source
        while True:
            while src.current.isspace():
                src.advance()

            if src.current != "/":
                return None

            self._mark_start()
            src.advance()

            if src.current == "/":
                self._skip_line_comment()
            elif src.current == "*":
                self._skip_block_comment()
            else:
                return self._make_token(TokenKind.OPERATOR, "/")

    def _skip_line_comment(self) -> None:
        """Skip to end of line; the line break itself is left for whitespace skipping."""
        src = self.source
        while not src.at_end and src.current not in "\n\r":
            src.advance()

    def _skip_block_comment(self) -> None:
        """
        Skip a block comment whose '/' has been consumed.

        Reaching end of input before */ ends the comment silently.
        """
        src = self.source
        src.advance()  # consume *

        while not src.at_end:
            if src.advance() == "*" and src.match("/"):
                return

    # =========================================================================
    # Token Scanning
    # =========================================================================

    @staticmethod
    def _is_word_char(char: str) -> bool:
        return char.isalpha() or char.isdecimal() or char == "_"

    def _scan_token(self) -> Token:
        """Scan one token; the source is not at end and not at whitespace or '/'."""
        self._mark_start()
        char = self.source.advance()

        # Identifiers, keywords and boolean literals
        if char.isalpha():
            return self._scan_word(char)

        # Integer literals and malformed numerals
        if char.isdecimal():
            return self._scan_number(char)

        return self._scan_operator(char)

    def _scan_word(self, first: str) -> Token:
        """
        Scan an identifier, keyword or boolean literal.

        Boolean spellings win over keywords, keywords over identifiers.
        """
        chars = [first]
        while self._is_word_char(self.source.current):
            chars.append(self.source.advance())

        word = "".join(chars)

        if word in BOOLEAN_LITERALS:
            return self._make_token(TokenKind.LITERAL, word)

        if word in KEYWORDS:
            return self._make_token(TokenKind.KEYWORD, word)

        return self._make_token(TokenKind.IDENTIFIER, word)

    def _scan_number(self, first: str) -> Token:
        """
        Scan an integer literal.

        A letter or '_' right after the digits makes the whole run,
        e.g. ``3a`` or ``12_x9``, a single Other token.
        """
        src = self.source
        chars = [first]
        while src.current.isdecimal():
            chars.append(src.advance())

        if src.current.isalpha() or src.current == "_":
            while self._is_word_char(src.current):
                chars.append(src.advance())
            return self._make_token(TokenKind.OTHER, "".join(chars))

        return self._make_token(TokenKind.LITERAL, "".join(chars))

    def _scan_operator(self, char: str) -> Token:
        """
        Scan an operator, separator or unknown character.

        Handles single and two character operators.
        """
        src = self.source

        if char == ":":
            if src.match("="):
                return self._make_token(TokenKind.OPERATOR, ":=")
            return self._make_token(TokenKind.OTHER, ":")

        # && and || are operators only when doubled
        if char in "&|":
            if src.match(char):
                return self._make_token(TokenKind.OPERATOR, char * 2)
            return self._make_token(TokenKind.OTHER, char)

        # ! != < <= > >= = ==
        if char in "!<>=":
            if src.match("="):
                return self._make_token(TokenKind.OPERATOR, char + "=")
            return self._make_token(TokenKind.OPERATOR, char)

        if char in "+-*%":
            return self._make_token(TokenKind.OPERATOR, char)

        if char in SEPARATORS:
            return self._make_token(TokenKind.SEPARATOR, char)

        # Unknown character
        return self._make_token(TokenKind.OTHER, char)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(text: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize in-memory KAY source.

    Returns:
        All tokens, ending with EndOfStream
    """
    with Lexer.from_string(text, filename) as lexer:
        return list(lexer.tokenize())
