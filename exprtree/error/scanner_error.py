from dataclasses import dataclass

from exprtree.error.error import CompilerError, CompilerException


class LexicalError(CompilerException):
    pass


class ScannerError(CompilerError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


@dataclass
class UnexpectedCharacterError(ScannerError):
    char: str

    @property
    def message(self) -> str:
        return (
            f"Unexpected character {self.char!r} on {self.span.lines_str}, "
            f"column {self.span.start_col + 1}."
        )
