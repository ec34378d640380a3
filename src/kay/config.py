"""
KAY Scanner - Configuration
===========================

Options that control how character sources are opened. Configuration
can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied by the kayscan CLI)
"""

from dataclasses import dataclass
import os


# Decode error policies accepted by open() that make sense for a scanner
VALID_DECODE_ERRORS = ("strict", "replace", "ignore")


@dataclass
class ScannerOptions:
    """
    Configuration for opening KAY source files.

    Attributes:
        encoding: Text encoding of source files (default: "utf-8")
        errors: Decode error policy passed to open() (default: "replace").
                "replace" turns each undecodable byte into U+FFFD, which
                scans as an Other token. "strict" is opt-in: a decode
                failure ends the token stream, and text decoded in the
                same chunk before the bad byte is lost.
    """

    encoding: str = "utf-8"
    errors: str = "replace"

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            KAY_ENCODING: Source file encoding (e.g., "latin-1")
            KAY_DECODE_ERRORS: One of "strict", "replace", "ignore"

        Returns:
            ScannerOptions with values from environment variables
        """
        options = cls()

        if encoding := os.environ.get("KAY_ENCODING"):
            options.encoding = encoding

        if errors := os.environ.get("KAY_DECODE_ERRORS"):
            if errors in VALID_DECODE_ERRORS:
                options.errors = errors

        return options
