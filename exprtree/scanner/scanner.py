from typing import List

import regex as re
from icecream import ic

from exprtree.error.scanner_error import LexicalError, UnexpectedCharacterError
from exprtree.token import Token
from exprtree.type import Type
from exprtree.util import Span

# Each alternative is decided by the first character of the unit,
# identifiers and numbers then munch greedily.
PATTERN = re.compile(
    r"""
        (?P<ID>\p{L}[\p{L}\p{Nd}]*)| # Letter followed by letters or decimal digits
        (?P<NUMBER>\p{Nd}+)|
        (?P<PLUS>\+)|
        (?P<STAR>\*)|
        (?P<SLASH>\/)|
        (?P<LRB>\()| # lrb = Left Round Bracket
        (?P<RRB>\))| # rrb = Right Round Bracket
        (?P<LSB>\[)| # lsb = Left Square Bracket
        (?P<RSB>\])| # rsb = Right Square Bracket
        (?P<SPACE>\s)|
        (?P<ERROR>.)
    """,
    flags=re.X,
)


class Scanner:
    def __init__(self, program: str, debug: bool = False) -> None:
        self.og_program = program
        self.debug = debug

    def scan(self) -> List[Token]:
        """Convert the program into tokens, terminated by a single END token.

        Raises:
            LexicalError: On the first character that cannot start a token.

        Returns:
            List[Token]: The scanned tokens, in program order.
        """
        lines = self.og_program.splitlines()

        tokens = [
            token
            for line_no, line in enumerate(lines, start=1)
            for token in self.scan_line(line, line_no)
        ]

        tokens.append(self.end_token(lines))
        if self.debug:
            ic(tokens[-1])
        return tokens

    def scan_line(self, line: str, line_no: int) -> List[Token]:
        tokens = []
        for match in PATTERN.finditer(line):
            span = Span(line_no, match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "ERROR":
                    raise LexicalError(
                        UnexpectedCharacterError(self.og_program, span, match[0])
                    )

            token = Token(match[0], match.lastgroup, span)
            if self.debug:
                ic(token)
            tokens.append(token)
        return tokens

    def end_token(self, lines: List[str]) -> Token:
        # The END token sits just past the last character of the program
        if not lines:
            return Token("", Type.END, Span(1, (0, 0)))
        end_col = len(lines[-1])
        return Token("", Type.END, Span(len(lines), (end_col, end_col)))
