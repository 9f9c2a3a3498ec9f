"""Predictive parser for lispish token streams.

Grammar::

    Program -> SExpr*
    SExpr   -> List | Atom
    List    -> "(" ")" | "(" Seq ")"
    Seq     -> SExpr | SExpr Seq
    Atom    -> ID | INT | REAL | STRING

Rules are derived with an explicit stack of open frames rather than Python
recursion, so nesting depth is limited only by memory (or ``max_depth``).
"""

from typing import Optional, Sequence

from .lexer import tokenize
from .types import ATOM_KINDS, Node, Symbol, Token

# None means List nesting is unbounded.
MAX_DEPTH: Optional[int] = None


class DepthExceeded(SyntaxError):
    pass


class _Frame:
    __slots__ = ("symbol", "children")

    def __init__(self, symbol: Symbol, children: Optional[list[Node]] = None):
        self.symbol = symbol
        self.children = children or []

    def close(self) -> Node:
        return Node(self.symbol, children=tuple(self.children))


class Parser:
    def __init__(self, tokens: Sequence[Token], max_depth: Optional[int] = MAX_DEPTH):
        self.tokens = list(tokens)
        self.pos = 0
        self.max_depth = max_depth

    @property
    def token(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _lexeme(self) -> str:
        tok = self.token
        if tok is None:
            raise SyntaxError("unexpected end of input")
        return tok.lexeme

    def _next(self) -> Node:
        node = Node.leaf(self.tokens[self.pos])
        self.pos += 1
        return node

    def program(self) -> Node:
        children = []
        while self.token is not None:
            children.append(self.sexpr())
        return Node(Symbol.PROGRAM, children=tuple(children))

    def atom(self) -> Node:
        tok = self.token
        if tok is None:
            raise SyntaxError("unexpected end of input: expected atom")
        if tok.kind not in ATOM_KINDS:
            raise SyntaxError(f"unexpected {tok.lexeme!r}: expected atom")
        return Node(Symbol.ATOM, children=(self._next(),))

    def sexpr(self) -> Node:
        stack: list[_Frame] = []
        depth = 0
        done: Optional[Node] = None
        while True:
            # Start an SExpr at the current token.
            if self._lexeme() == "(":
                depth += 1
                if self.max_depth is not None and depth > self.max_depth:
                    raise DepthExceeded(f"list nesting exceeds max depth {self.max_depth}")
                stack.append(_Frame(Symbol.SEXPR))
                stack.append(_Frame(Symbol.LIST, [self._next()]))
                if self._lexeme() == ")":
                    stack[-1].children.append(self._next())
                    depth -= 1
                    done = stack.pop().close()
                else:
                    stack.append(_Frame(Symbol.SEQ))
                    continue
            else:
                done = Node(Symbol.SEXPR, children=(self.atom(),))

            # Hand finished nodes up until some frame needs another SExpr.
            while done is not None:
                if not stack:
                    return done
                frame = stack[-1]
                frame.children.append(done)
                done = None
                if frame.symbol is Symbol.SEQ:
                    if len(frame.children) == 1 and self._lexeme() != ")":
                        stack.append(_Frame(Symbol.SEQ))
                    else:
                        done = stack.pop().close()
                elif frame.symbol is Symbol.LIST:
                    if self._lexeme() != ")":
                        raise SyntaxError(f"unexpected {self._lexeme()!r}: expected ')'")
                    frame.children.append(self._next())
                    depth -= 1
                    done = stack.pop().close()
                else:
                    done = stack.pop().close()


def parse(tokens: Sequence[Token], *, max_depth: Optional[int] = MAX_DEPTH) -> Node:
    """Parse a token sequence into a Program tree."""
    return Parser(tokens, max_depth).program()


def parse_source(src: str, *, max_depth: Optional[int] = MAX_DEPTH) -> Node:
    return parse(tokenize(src), max_depth=max_depth)
