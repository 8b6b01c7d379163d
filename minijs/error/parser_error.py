from dataclasses import dataclass
from typing import Optional

from minijs.error.error import FrontendError, FrontendException
from minijs.kind import TokenKind
from minijs.token import Token


class ParserException(FrontendException):
    pass


def describe(token: Token) -> str:
    if token.kind == TokenKind.EOF:
        return "the end of the input"
    return f"{token.kind.article_str()} {token.text!r}"


@dataclass
class ParseError(FrontendError):
    """A token did not match what the grammar required at this point."""

    expected_kind: Optional[TokenKind]
    expected_text: Optional[str]
    got: Token

    @property
    def expected_str(self) -> str:
        if self.expected_text is not None:
            return repr(self.expected_text)
        return self.expected_kind.article_str()

    def __str__(self) -> str:
        return self.create_error(
            f"Expected {self.expected_str}, but got {describe(self.got)} instead on {self.position_str}.",
            class_name="SyntaxError",
        )


@dataclass
class UnexpectedTokenError(FrontendError):
    """No expression can start with this token."""

    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Expected an expression, but got {describe(self.got)} instead on {self.position_str}.",
            class_name="SyntaxError",
        )
