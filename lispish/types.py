from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Symbol(Enum):
    PROGRAM = "Program"
    SEXPR = "SExpr"
    LIST = "List"
    SEQ = "Seq"
    ATOM = "Atom"
    # Token kinds
    PAREN_LITERAL = "ParenLiteral"
    REAL = "Real"
    INT = "Int"
    STRING = "String"
    IDENTIFIER = "Identifier"

    def __str__(self) -> str:
        return self.value


TOKEN_KINDS = frozenset({
    Symbol.PAREN_LITERAL, Symbol.REAL, Symbol.INT, Symbol.STRING, Symbol.IDENTIFIER,
})
ATOM_KINDS = frozenset({Symbol.IDENTIFIER, Symbol.INT, Symbol.REAL, Symbol.STRING})


@dataclass(frozen=True)
class Token:
    kind: Symbol
    lexeme: str


@dataclass(frozen=True, eq=False, repr=False)
class Node:
    """Parse tree node. Leaves carry the lexeme of the token they were built from.

    Equality, hashing and repr never recurse, so trees of any depth can be
    compared and printed.
    """

    symbol: Symbol
    lexeme: str = ""
    children: tuple["Node", ...] = ()

    @classmethod
    def leaf(cls, token: Token) -> "Node":
        return cls(token.kind, token.lexeme)

    @property
    def is_leaf(self) -> bool:
        return self.symbol in TOKEN_KINDS

    def walk(self) -> Iterator[tuple[int, "Node"]]:
        """Yield (depth, node) pairs in pre-order."""
        stack = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, c) for c in reversed(node.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if (a.symbol, a.lexeme, len(a.children)) != (b.symbol, b.lexeme, len(b.children)):
                return False
            stack.extend(zip(a.children, b.children))
        return True

    def __hash__(self) -> int:
        return hash(tuple((depth, n.symbol, n.lexeme) for depth, n in self.walk()))

    def __repr__(self) -> str:
        return f"Node({str(self.symbol)}, {self.lexeme!r}, children={len(self.children)})"
