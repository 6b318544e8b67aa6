from dataclasses import dataclass

from exprtree.error.error import CompilerError, CompilerException
from exprtree.token import Token
from exprtree.type import Type


class SyntacticError(CompilerException):
    pass


def describe(token: Token) -> str:
    """Describe a token by kind and exact text, e.g. `NUMBER('12')`."""
    if token.type == Type.END:
        return str(Type.END)
    return repr(token)


@dataclass
class ParseError(CompilerError):
    got: Token

    def create_error(self, before, after=""):
        return super().create_error(before, after, class_name="SyntaxError")


class UnexpectedEndError(ParseError):
    @property
    def message(self) -> str:
        return (
            "Expected an identifier, '(' or an array access, "
            "but the expression ended abruptly."
        )


class UnexpectedTokenError(ParseError):
    @property
    def hint(self) -> str:
        match self.got.type:
            case Type.NUMBER:
                return "numbers are not valid identifiers"
            case Type.RRB | Type.RSB:
                return "closing token with no matching opening"
        return ""

    @property
    def message(self) -> str:
        message = f"Expected an identifier or '(', but found {describe(self.got)}"
        if self.hint:
            message += f" ({self.hint})"
        return message + f" on {self.span.lines_str}."


@dataclass
class ExpectedTokenError(ParseError):
    expected: Type
    context: str

    @property
    def message(self) -> str:
        return (
            f"Expected {self.expected.article_str()} {self.context}, "
            f"but found {describe(self.got)}."
        )

    def __str__(self) -> str:
        return self.create_error(
            self.message,
            f"Expected {self.expected} on {self.got.span.lines_str} "
            f"column {self.got.span.start_col + 1}.",
        )


class TrailingTokensError(ParseError):
    @property
    def message(self) -> str:
        return (
            "Extra tokens after the end of the expression, "
            f"starting with {describe(self.got)} on {self.span.lines_str}."
        )


class NestingTooDeepError(ParseError):
    @property
    def message(self) -> str:
        return (
            "The expression is nested too deeply to be parsed, "
            f"reached {describe(self.got)} on {self.span.lines_str}."
        )
