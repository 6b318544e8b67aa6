import sys
from typing import List

from exprtree.error.error import CompilerException
from exprtree.error.parser_error import SyntacticError
from exprtree.error.scanner_error import LexicalError
from exprtree.parser.parser import Parser
from exprtree.scanner.scanner import Scanner
from exprtree.token import Token
from exprtree.tree.tree import ExpressionNode
from exprtree.type import Type

# Default is 1000, every level of parentheses costs three rule frames
sys.setrecursionlimit(5000)


def tokenize(text: str) -> List[Token]:
    return Scanner(text).scan()


def parse(tokens: List[Token], program: str = "") -> ExpressionNode:
    return Parser(program).parse(tokens)


def analyze(text: str) -> ExpressionNode:
    """Scan and parse `text`, raising `LexicalError` or `SyntacticError`."""
    return parse(tokenize(text), program=text)
