"""CLI: python -m lispish [program.lisp]"""

import argparse
import logging
import sys
from pathlib import Path

from .lexer import tokenize
from .parser import parse
from .printer import format_tokens, format_tree

logger = logging.getLogger("lispish.cli")

RULE_WIDTH = 50


def check(src: str, max_depth=None) -> str:
    """Tokenize and parse ``src``, returning the full text report.

    Raises LexError or SyntaxError on invalid input.
    """
    tokens = tokenize(src)
    tree = parse(tokens, max_depth=max_depth)
    return "\n".join([
        "Tokens",
        "-" * RULE_WIDTH,
        format_tokens(tokens),
        "-" * RULE_WIDTH,
        "Parse Tree",
        "-" * RULE_WIDTH,
        format_tree(tree),
        "-" * RULE_WIDTH,
    ])


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="lispish", description="Tokenize and parse a lispish program")
    ap.add_argument("file", nargs="?", help="source file (default: standard input)")
    ap.add_argument("--max-depth", type=int, default=None, help="reject lists nested deeper than this")
    ap.add_argument("--verbose", action="store_true", help="log parser failures")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    src = Path(args.file).read_text() if args.file else sys.stdin.read()

    print("=" * RULE_WIDTH)
    print(f"Input: {src}")
    print("-" * RULE_WIDTH)
    try:
        report = check(src, max_depth=args.max_depth)
    except SyntaxError as exc:
        logger.debug("rejected input: %s: %s", type(exc).__name__, exc)
        print("Threw an exception on invalid input.")
        return 1
    print(report)
    logger.debug("parsed %d characters", len(src))
    return 0


if __name__ == "__main__":
    sys.exit(main())
