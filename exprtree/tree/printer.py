from exprtree.tree.tree import LeafNode, Node
from exprtree.type import Type

# No space is printed after these tokens
LEFT_ATTACHED_TOKENS = {
    Type.LRB,  # (
    Type.LSB,  # [
}

# No space is printed before these tokens
RIGHT_ATTACHED_TOKENS = {
    Type.RRB,  # )
    Type.RSB,  # ]
    Type.LSB,  # [, as in id[...]
}

LAST_BRANCH = "-- "
BRANCH = "|-- "
INDENT = " " * 4
PIPE_INDENT = "|   "


class Printer:
    """Reconstructs the source text of a tree from its leaf tokens.

    Binary operators are surrounded by single spaces, brackets hug their
    contents, e.g. `(a + b) * c[d / e]`.
    """

    def print(self, tree: Node) -> str:
        program = ""
        last_token = None
        for node in tree.walk():
            if not isinstance(node, LeafNode):
                continue
            token = node.token
            if (
                last_token is not None
                and last_token.type not in LEFT_ATTACHED_TOKENS
                and token.type not in RIGHT_ATTACHED_TOKENS
            ):
                program += " "
            program += token.text
            last_token = token
        return program


class TreePrinter:
    """Renders a tree one node per line, with its nesting drawn as branches:

    -- Expression
        |-- Term
        |   -- Factor
        |       -- ID('a')
        |-- '+'
        -- Term
            -- Factor
                -- ID('b')
    """

    def print(self, tree: Node) -> str:
        lines = []
        # Walk with an explicit stack of (node, indent, is last child)
        stack = [(tree, "", True)]
        while stack:
            node, indent, last = stack.pop()
            lines.append(indent + (LAST_BRANCH if last else BRANCH) + node.label)

            indent += INDENT if last else PIPE_INDENT
            children = node.children
            for i in reversed(range(len(children))):
                stack.append((children[i], indent, i == len(children) - 1))
        return "\n".join(lines)
