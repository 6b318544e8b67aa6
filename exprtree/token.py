from __future__ import annotations

from dataclasses import dataclass, field

from exprtree.type import Type
from exprtree.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, compare=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            object.__setattr__(self, "type", Type.to_type(self.type))

    def __repr__(self) -> str:
        return f"{self.type.name}({self.text!r})"

    def __str__(self) -> str:
        return self.text
