"""
KAY Scanner Error Hierarchy
===========================

This module defines the exception hierarchy for the KAY scanner.
All exceptions inherit from KayError, allowing callers to catch all
scanner-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
KayError (base)
└── SourceUnavailableError - the character source cannot be opened

Lexical anomalies are NOT exceptions. Malformed numerals such as ``3a``
and unknown characters are returned by the lexer as tokens of kind
``Other`` so that scanning always completes a full pass over the input.
The only failure the scanner raises is the one-time failure to acquire
its character source.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class KayError(Exception):
    """
    Base exception for all KAY scanner errors.

    Callers can catch every scanner failure with a single clause:

        try:
            lexer = Lexer.from_file("prog1.kay")
        except KayError as e:
            print(f"Error: {e}")

    Attributes:
        message: The error description
        location: Where the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            prog1.kay: error: cannot open source file
            hint: check that the file exists and is readable
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text.

    Tokens carry their start position so that a later parsing stage can
    report where a malformed lexeme appeared. A line or column of 0 means
    the position is unknown (e.g. a file that could not be opened).

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line:column', or just the filename if unknown."""
        if self.line <= 0:
            return self.filename
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Initialization Errors
# =============================================================================

class SourceUnavailableError(KayError):
    """
    The character source cannot be opened.

    Raised once, at construction, when the named source file is missing,
    is a directory, or cannot be read. No tokens are produced.

    Attributes:
        path: The path that could not be opened
        reason: The underlying OS error text, if any
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason

        message = "cannot open source file"
        if reason:
            message = f"{message} ({reason})"

        super().__init__(
            message,
            location=SourceLocation(path),
            hint="check that the file exists and is readable",
        )
