"""
KAY Character Source
====================

A thin adapter that turns any Python text stream into the sequential,
advance-only character stream the lexer consumes.

The source always holds exactly one character of lookahead: ``current``
is the next unconsumed character, or ``EOF`` (the empty string) once the
input is exhausted. ``advance()`` consumes it and reads the next one.

Failure Modes
-------------
- Opening a path that does not exist or cannot be read raises
  SourceUnavailableError. This is the only error the source raises.
- An I/O or decode error while reading is logged and then treated as
  end-of-input, so the lexer finishes with an EndOfStream token.

Example Usage
-------------
>>> from kay.source import CharacterSource
>>> with CharacterSource.from_string("ab") as src:
...     src.advance(), src.current
('a', 'b')
"""

import codecs
import io
import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from kay.config import ScannerOptions
from kay.errors import SourceLocation, SourceUnavailableError

logger = logging.getLogger(__name__)

# End-of-input marker
EOF = ""


class CharacterSource:
    """
    Sequential character reader with one character of lookahead.

    Tracks the line, column and character offset of ``current`` so
    tokens can record where their lexeme starts.

    Usage:
        with CharacterSource.open("prog1.kay") as src:
            while not src.at_end:
                src.advance()

    Attributes:
        name: Name of the source (file path or "<input>")
        current: The next unconsumed character, or EOF
        line: Line number of ``current`` (1-indexed)
        column: Column number of ``current`` (1-indexed)
        offset: Character offset of ``current`` (0-indexed)
    """

    def __init__(
        self,
        stream: TextIO,
        name: str = "<input>",
        owns_stream: bool = False,
    ):
        """
        Wrap a text stream and read the first character.

        Args:
            stream: Any object with a text ``read(size)`` method
            name: Name used in token locations and log messages
            owns_stream: If True, close() also closes the stream
        """
        self.name = name
        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False

        self.current = EOF
        self.line = 1
        self.column = 1
        self.offset = 0

        self._read_next()

    # =========================================================================
    # Construction Helpers
    # =========================================================================

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        options: Optional[ScannerOptions] = None,
    ) -> "CharacterSource":
        """
        Open a source file for scanning.

        The file is opened with ``newline=""`` so carriage returns reach the
        lexer unchanged and token offsets index the file text exactly.

        Args:
            path: Path of the file to open
            options: Encoding options (default: ScannerOptions())

        Returns:
            A CharacterSource that owns (and will close) the file

        Raises:
            SourceUnavailableError: If the file cannot be opened, or the
                encoding or decode error policy is unknown
        """
        options = options or ScannerOptions()
        name = str(path)

        try:
            codecs.lookup_error(options.errors)
            stream = open(
                path,
                "r",
                encoding=options.encoding,
                errors=options.errors,
                newline="",
            )
        except (OSError, LookupError) as e:
            reason = getattr(e, "strerror", None) or str(e)
            raise SourceUnavailableError(name, reason) from e

        try:
            source = cls(stream, name, owns_stream=True)
        except Exception:
            stream.close()
            raise

        logger.debug(f"Opened {name} (encoding={options.encoding})")
        return source

    @classmethod
    def from_string(cls, text: str, name: str = "<input>") -> "CharacterSource":
        """Create a source over in-memory text."""
        return cls(io.StringIO(text), name, owns_stream=True)

    # =========================================================================
    # Character Access
    # =========================================================================

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self.current == EOF

    @property
    def location(self) -> SourceLocation:
        """Location of ``current``."""
        return SourceLocation(self.name, self.line, self.column)

    def advance(self) -> str:
        """
        Consume ``current`` and read the next character.

        Returns:
            The consumed character, or EOF if already at the end
        """
        char = self.current
        if char == EOF:
            return EOF

        self.offset += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self._read_next()
        return char

    def match(self, expected: str) -> bool:
        """
        Consume ``current`` if it equals expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self.current != EOF and self.current == expected:
            self.advance()
            return True
        return False

    def _read_next(self) -> None:
        """Load the next character into ``current``; errors become EOF."""
        if self._closed:
            self.current = EOF
            return

        try:
            self.current = self._stream.read(1)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                f"{self.name}:{self.line}:{self.column}: read failed, "
                f"treating as end of input: {e}"
            )
            self.current = EOF

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.current = EOF
        if self._owns_stream:
            self._stream.close()
            logger.debug(f"Closed {self.name}")

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "CharacterSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"CharacterSource({self.name!r}, current={self.current!r}, "
            f"{self.line}:{self.column})"
        )
