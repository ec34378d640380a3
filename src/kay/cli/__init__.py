"""
KAY Scanner Command-Line Interface
==================================

- **kayscan**: print the token stream of a KAY source file

The tool is a Click-based CLI application with unified error reporting
(see kay.cli.errors).
"""

__all__ = ["kayscan"]
