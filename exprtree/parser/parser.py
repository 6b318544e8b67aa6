from typing import List

from icecream import ic

from exprtree.parser.stream import TokenStream
from exprtree.token import Token
from exprtree.type import Type

from exprtree.error.parser_error import (  # isort:skip
    NestingTooDeepError,
    SyntacticError,
    TrailingTokensError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from exprtree.tree.tree import (  # isort:skip
    ExpressionNode,
    FactorNode,
    IdentifierNode,
    LiteralNode,
    Node,
    TermNode,
)


class Parser:
    def __init__(self, program: str = "", debug: bool = False) -> None:
        # The program is only used to quote source lines in error messages
        self.og_program = program
        self.debug = debug

    def parse(self, tokens: List[Token]) -> ExpressionNode:
        """Given a list of Tokens from the scanner, apply the grammar

            Expression  := Term ( '+' Term )*
            Term        := Factor ( ('*' | '/') Factor )*
            Factor      := Identifier ( '[' Expression ']' )?
                         | '(' Expression ')'

        to produce a syntax tree. Parsing stops at the first syntax error.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Raises:
            SyntacticError: If the tokens do not form exactly one expression,
                or nest it deeper than the interpreter can recurse.

        Returns:
            ExpressionNode: The root of the syntax tree.
        """
        stream = TokenStream(tokens, self.og_program)
        try:
            tree = self.expression(stream)
        except RecursionError:
            got = stream.peek()
            raise SyntacticError(
                NestingTooDeepError(self.og_program, got.span, got)
            ) from None
        if not stream.is_at_end():
            got = stream.peek()
            raise SyntacticError(TrailingTokensError(self.og_program, got.span, got))
        return tree

    def expression(self, stream: TokenStream) -> ExpressionNode:
        self.trace("Expression", stream)
        children: List[Node] = [self.term(stream)]
        while stream.match(Type.PLUS):
            children.append(LiteralNode(stream.previous()))
            children.append(self.term(stream))
        return ExpressionNode(children)

    def term(self, stream: TokenStream) -> TermNode:
        self.trace("Term", stream)
        children: List[Node] = [self.factor(stream)]
        while stream.match(Type.STAR, Type.SLASH):
            # Keep the exact operator, as '*' and '/' share this rule
            children.append(LiteralNode(stream.previous()))
            children.append(self.factor(stream))
        return TermNode(children)

    def factor(self, stream: TokenStream) -> FactorNode:
        self.trace("Factor", stream)
        if stream.match(Type.ID):
            children: List[Node] = [IdentifierNode(stream.previous())]
            # Optional array access, which does not repeat: `a[b][c]` is invalid
            if stream.match(Type.LSB):
                opening = stream.previous()
                children.append(LiteralNode(opening))
                children.append(self.expression(stream))
                closing = stream.expect(
                    Type.RSB,
                    "to close the array access after the expression",
                    opening,
                )
                children.append(LiteralNode(closing))
            return FactorNode(children)

        if stream.match(Type.LRB):
            opening = stream.previous()
            children = [LiteralNode(opening), self.expression(stream)]
            closing = stream.expect(
                Type.RRB, "to close the parenthesized expression", opening
            )
            children.append(LiteralNode(closing))
            return FactorNode(children)

        got = stream.peek()
        if stream.is_at_end():
            raise SyntacticError(UnexpectedEndError(self.og_program, got.span, got))
        raise SyntacticError(UnexpectedTokenError(self.og_program, got.span, got))

    def trace(self, rule: str, stream: TokenStream) -> None:
        if self.debug:
            ic(rule, stream.peek())
