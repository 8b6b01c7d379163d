from __future__ import annotations

from dataclasses import dataclass, field

from minijs.kind import TokenKind
from minijs.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    kind: TokenKind = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, TokenKind):
            object.__setattr__(self, "kind", TokenKind.to_kind(self.kind))

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.text == __o.text and self.kind == __o.kind

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def matches(self, kind: TokenKind, *texts: str) -> bool:
        """Whether this token is of kind `kind` and, if given, has one of `texts` as text."""
        return self.kind == kind and (not texts or self.text in texts)
