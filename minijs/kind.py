from enum import Enum


class TokenKind(Enum):
    NUMBER = "Number"
    STRING = "String"
    IDENTIFIER = "Identifier"
    KEYWORD = "Keyword"
    OPERATOR = "Operator"
    PUNCTUATOR = "Punctuator"
    EOF = "EndOfInput"

    def to_kind(kind_str: str):
        return TokenKind[kind_str]

    def __str__(self) -> str:
        return self.value

    def article_str(self) -> str:
        match self:
            case TokenKind.IDENTIFIER | TokenKind.OPERATOR | TokenKind.EOF:
                return f"an {self}"
            case _:
                return f"a {self}"
