from enum import Enum


class Type(Enum):
    LRB = "("
    RRB = ")"
    LSB = "["
    RSB = "]"
    PLUS = "+"
    STAR = "*"
    SLASH = "/"
    # Tokens without a fixed lexeme carry their display name as value
    ID = "identifier"
    NUMBER = "number"
    END = "end of input"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.ID | Type.NUMBER | Type.END:
                return self.value
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.ID:
                return f"an {self}"
            case Type.END:
                return f"the {self}"
            case _:
                return f"a {self}"
