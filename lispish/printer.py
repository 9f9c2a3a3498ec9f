"""Indented text dumps of token streams and parse trees, for debugging."""

from typing import Iterable

from .types import Node, Token

TREE_COLUMN = 40
TOKEN_COLUMN = 18


def format_tokens(tokens: Iterable[Token]) -> str:
    return "\n".join(f"{str(t.kind).ljust(TOKEN_COLUMN)}\t: {t.lexeme}" for t in tokens)


def format_tree(root: Node, column: int = TREE_COLUMN) -> str:
    """Render a tree one node per line, children indented two spaces.

    Symbols are padded so lexemes line up at ``column`` regardless of depth.
    """
    lines = []
    for depth, node in root.walk():
        prefix = "  " * depth
        line = f"{prefix}{str(node.symbol).ljust(column - len(prefix))} {node.lexeme}"
        lines.append(line.rstrip())
    return "\n".join(lines)
