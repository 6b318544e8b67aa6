"""Scan and parse expressions, printing their tokens and syntax trees.

Usage:
    $ python analyze.py "(a + b) * c[d]" "a + * b"
    $ python analyze.py            # runs the built-in samples
    $ python analyze.py -D "a[b]"  # traces the scanner and parser
"""

import argparse
import sys
from typing import List, Optional, Tuple

from exprtree import LexicalError, Parser, Scanner, SyntacticError

SAMPLES: List[Tuple[str, str]] = [
    # Simple valid expressions
    ("id", "Smallest valid expression"),
    ("id + id", "Basic addition"),
    ("id[id]", "Simple array access"),
    # Complex valid expressions
    ("(id + id) * id[id]", "Precedence and nesting"),
    ("id[id + id * id]", "Expression nested in an array access"),
    ("id * id + id / id", "Multiple operators"),
    # Syntax errors
    ("id + ", "Incomplete expression"),
    ("id[id + ", "Unclosed array access"),
    ("id + * id", "Invalid operator"),
    # Lexical errors
    ("id # id", "Invalid character"),
    ("$id", "Symbol not allowed"),
    ("id@id", "Malformed token"),
    # Edge cases
    ("", "Empty input"),
    ("(", "Only an opening parenthesis"),
    ("id[]", "Empty array access"),
]


def analyze(
    program: str,
    description: str,
    show_tokens: bool = True,
    show_tree: bool = True,
    show_source: bool = False,
    debug: bool = False,
) -> bool:
    print(f"\n=== {description} ===")
    print(f"Expression: {program!r}")

    try:
        # Perform scanning on the input program
        tokens = Scanner(program, debug=debug).scan()
        if show_tokens:
            print("\nTokens:")
            for token in tokens:
                print(repr(token))

        # Perform parsing on the scanned tokens
        tree = Parser(program, debug=debug).parse(tokens)
        if show_tree:
            print("\nSyntax tree:")
            print(tree)
        if show_source:
            print("\nSource:")
            print(tree.source())
    except LexicalError as e:
        print(f"\n{e}")
        print("INVALID (lexical)")
        return False
    except SyntacticError as e:
        print(f"\n{e}")
        print("INVALID (syntax)")
        return False

    print("VALID")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="exprtree",
        description="Lexical and syntactic analysis of array expressions.",
    )
    ap.add_argument(
        "expressions",
        nargs="*",
        help="expressions to analyze (default: the built-in samples)",
    )
    ap.add_argument(
        "-D", "--debug", action="store_true", help="trace the scanner and parser"
    )
    ap.add_argument("--no-tokens", action="store_true", help="do not list the tokens")
    ap.add_argument("--no-tree", action="store_true", help="do not print the tree")
    ap.add_argument(
        "--source", action="store_true", help="print the source rebuilt from the tree"
    )
    args = ap.parse_args(argv)

    if args.expressions:
        cases = [
            (program, f"Expression {i}")
            for i, program in enumerate(args.expressions, start=1)
        ]
    else:
        print("LEXICAL AND SYNTACTIC ANALYZER - SAMPLES")
        cases = SAMPLES

    results = [
        analyze(
            program,
            description,
            show_tokens=not args.no_tokens,
            show_tree=not args.no_tree,
            show_source=args.source,
            debug=args.debug,
        )
        for program, description in cases
    ]

    # The samples contain invalid expressions on purpose
    if not args.expressions:
        return 0
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
