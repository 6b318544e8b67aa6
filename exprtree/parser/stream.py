from typing import List, Optional

from exprtree.error.parser_error import ExpectedTokenError, SyntacticError
from exprtree.token import Token
from exprtree.type import Type


class TokenStream:
    """A forward-only cursor over the tokens of a single parse.

    The cursor never moves past the END token that terminates the sequence.
    """

    def __init__(self, tokens: List[Token], program: str = "") -> None:
        if not tokens or tokens[-1].type != Type.END:
            raise ValueError("The token sequence must end with an END token.")
        self.tokens = tokens
        self.program = program
        self.current = 0

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == Type.END

    def check(self, type: Type) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == type

    def advance(self) -> Token:
        token = self.peek()
        if not self.is_at_end():
            self.current += 1
        return token

    def match(self, *types: Type) -> bool:
        if any(self.check(type) for type in types):
            self.advance()
            return True
        return False

    def expect(
        self, type: Type, context: str, opening: Optional[Token] = None
    ) -> Token:
        if self.check(type):
            return self.advance()

        got = self.peek()
        # Report the whole unclosed group, from its opening token onwards
        span = opening.span & got.span if opening else got.span
        raise SyntacticError(
            ExpectedTokenError(
                self.program, span, got=got, expected=type, context=context
            )
        )
