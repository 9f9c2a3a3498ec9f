"""Pattern-ordered tokenizer for lispish source text."""

import re

from .types import Symbol, Token


class LexError(SyntaxError):
    pass


# Tried in this order at every position; the first match wins.
PATTERNS: list[tuple[Symbol, re.Pattern]] = [
    (Symbol.PAREN_LITERAL, re.compile(r"\s*[()]")),
    (Symbol.REAL, re.compile(r"\s*[+-]?[0-9]*\.[0-9]+")),
    (Symbol.INT, re.compile(r"\s*[+-]?[0-9]+")),
    # Closes at the first unescaped quote, so "a" "b" is two tokens (see DESIGN.md).
    # A backslash directly before a quote is always read as an escape.
    (Symbol.STRING, re.compile(r'\s*"(?:\\"|\\(?!")|[^"\\])*"')),
    (Symbol.IDENTIFIER, re.compile(r'\s*[^\s"().]+')),
]

_TRAILING_SPACE = re.compile(r"\s*\Z")


def tokenize(src: str) -> list[Token]:
    src = src.replace("\n", "")
    tokens: list[Token] = []
    pos = 0
    size = len(src)
    while pos < size:
        for kind, pattern in PATTERNS:
            m = pattern.match(src, pos)
            if m:
                tokens.append(Token(kind, m.group().strip()))
                pos = m.end()
                break
        else:
            if _TRAILING_SPACE.match(src, pos):
                break
            raise LexError(f"no token matches at offset {pos}: {src[pos:pos + 10]!r}")
    return tokens
