from dataclasses import dataclass, field

from exprtree.error.communicator import Communicator
from exprtree.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    def __init__(self, error: "CompilerError") -> None:
        super().__init__(str(error))
        self.error = error


@dataclass
class CompilerError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    @property
    def message(self) -> str:
        raise NotImplementedError()

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            n_before=self.n_before,
            n_after=self.n_after,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = self.program.splitlines()
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        error_line = lines[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]

    def __str__(self) -> str:
        return self.create_error(self.message)
