from .types import Node, Symbol, Token
from .lexer import LexError, tokenize
from .parser import DepthExceeded, parse, parse_source
from .printer import format_tokens, format_tree

__all__ = [
    "Node", "Symbol", "Token", "LexError", "tokenize", "DepthExceeded",
    "parse", "parse_source", "format_tokens", "format_tree",
]
