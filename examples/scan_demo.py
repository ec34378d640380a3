#!/usr/bin/env python3
"""
KAY Scanner Demo
================

This script demonstrates how to use the KAY lexer to:
1. Scan a source file token by token
2. Count tokens by kind
3. Find malformed lexemes (Other tokens) with their locations

Usage:
    source .venv/bin/activate
    python examples/scan_demo.py [path/to/program.kay]
"""

import sys
from collections import Counter
from pathlib import Path

from kay import KayError, Lexer, TokenKind


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "prog1.kay"

    # ==========================================================================
    # 1. Pull tokens until EndOfStream
    # ==========================================================================

    try:
        lexer = Lexer.from_file(path)
    except KayError as e:
        print(e, file=sys.stderr)
        return 2

    with lexer:
        tokens = []
        token = lexer.next_token()
        while token.kind is not TokenKind.END_OF_STREAM:
            tokens.append(token)
            token = lexer.next_token()

    for index, token in enumerate(tokens, start=1):
        print(f"Token {index} - {token}")

    # ==========================================================================
    # 2. Summarize by kind
    # ==========================================================================

    print("\nTokens by kind:")
    counts = Counter(token.kind for token in tokens)
    for kind in TokenKind:
        if counts[kind]:
            print(f"  {kind.value:<11} {counts[kind]}")

    # ==========================================================================
    # 3. Report lexical errors
    # ==========================================================================

    errors = [token for token in tokens if token.is_error()]
    if errors:
        print("\nMalformed lexemes:")
        for token in errors:
            print(f"  {token.location}: {token.lexeme!r}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
