from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Tuple

from exprtree.token import Token
from exprtree.util import Span


@dataclass(frozen=True)
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from exprtree.tree.printer import TreePrinter

        printer = TreePrinter()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        return any(node == element for node in self.walk())

    def walk(self) -> Iterator[Node]:
        """Yield this node and all of its descendants, in pre-order."""
        # An explicit stack, as trees can be nested deeper than the recursion limit
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def source(self) -> str:
        from exprtree.tree.printer import Printer

        printer = Printer()
        return printer.print(self)


@dataclass(frozen=True)
class RuleNode(Node):
    """A non-terminal of the grammar, holding its children in derivation order."""

    label: ClassVar[str]
    children: Tuple[Node, ...]

    def __post_init__(self) -> None:
        # Accept any sequence of children, but store them immutably
        object.__setattr__(self, "children", tuple(self.children))
        if self.span is None and self.children:
            spans = [child.span for child in self.children if child.span is not None]
            if spans:
                object.__setattr__(self, "span", spans[0] & spans[-1])


@dataclass(frozen=True)
class ExpressionNode(RuleNode):
    label: ClassVar[str] = "Expression"


@dataclass(frozen=True)
class TermNode(RuleNode):
    label: ClassVar[str] = "Term"


@dataclass(frozen=True)
class FactorNode(RuleNode):
    label: ClassVar[str] = "Factor"


@dataclass(frozen=True)
class LeafNode(Node):
    token: Token

    def __post_init__(self) -> None:
        if self.span is None:
            object.__setattr__(self, "span", self.token.span)

    @property
    def children(self) -> Tuple[Node, ...]:
        return ()


@dataclass(frozen=True)
class IdentifierNode(LeafNode):
    @property
    def label(self) -> str:
        return repr(self.token)


@dataclass(frozen=True)
class LiteralNode(LeafNode):
    """An operator or bracket, labeled with its quoted lexeme, e.g. `'+'`."""

    @property
    def label(self) -> str:
        return repr(self.token.text)
