import re
from bisect import bisect_right
from typing import Iterator, List

from icecream.icecream import IceCreamDebugger

from minijs.error.scanner_error import ScannerException, UnexpectedCharacterError
from minijs.kind import TokenKind
from minijs.token import Token
from minijs.util import KEYWORDS, Span, stderr_print


class Scanner:
    def __init__(self, program: str, strict: bool = False, debug: bool = False) -> None:
        self.og_program = program
        # Unknown characters are dropped, unless strict
        self.strict = strict

        self.ic = IceCreamDebugger(prefix="scanner| ", outputFunction=stderr_print)
        self.ic.enabled = debug

        # Offsets at which each line starts, used to turn offsets into spans
        self.line_starts = [0] + [
            match.end() for match in re.finditer(r"\n", self.og_program)
        ]

        # Alternatives are tried left to right at every position, so e.g. a `//`
        # inside of a string is consumed by STRING before COMMENT can see it.
        self.pattern = re.compile(
            r"""
                (?P<COMMENT>//[^\n]*|/\*(?s:.*?)(?:\*/|\Z))|
                (?P<NUMBER>[0-9]+(?:\.[0-9]*)?)| # At most one decimal point
                (?P<STRING>"[^"]*"?|'[^']*'?)| # No escapes, may run to the end
                (?P<IDENTIFIER>[A-Za-z_$][A-Za-z0-9_$]*)|
                (?P<OPERATOR>[=!]==|[=+\-*/%<>!&|][=<>&|]?)|
                (?P<PUNCTUATOR>[(){}\[\];,.])|
                (?P<SPACE>\s+)|
                (?P<ERROR>.)
            """,
            flags=re.X,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        The list always ends with exactly one EndOfInput token. Characters that
        cannot start a token are skipped, or raise a ScannerException if the
        scanner is strict.

        Returns:
            List[Token]: A list of Token instances
        """
        tokens = list(self.scan_tokens())
        eof_span = self.span(len(self.og_program), len(self.og_program))
        tokens.append(Token("", TokenKind.EOF, eof_span))
        return tokens

    def scan_tokens(self) -> Iterator[Token]:
        for match in self.pattern.finditer(self.og_program):
            span = self.span(*match.span())
            text = match[0]
            match match.lastgroup:
                case "SPACE" | "COMMENT":
                    continue
                case "ERROR":
                    if self.strict:
                        raise ScannerException(
                            UnexpectedCharacterError(self.og_program, span, text)
                        )
                    continue
                case "STRING":
                    # Strip the quotes, an unterminated string only has the opening one
                    closed = len(text) > 1 and text[-1] == text[0]
                    text = text[1:-1] if closed else text[1:]
                    token = Token(text, TokenKind.STRING, span)
                case "IDENTIFIER" if text in KEYWORDS:
                    token = Token(text, TokenKind.KEYWORD, span)
                case _:
                    token = Token(text, match.lastgroup, span)

            self.ic(token)
            yield token

    def span(self, start: int, end: int) -> Span:
        """Convert a pair of offsets into the program into a Span of lines and columns."""
        start_ln = bisect_right(self.line_starts, start)
        end_ln = bisect_right(self.line_starts, max(start, end - 1))
        start_col = start - self.line_starts[start_ln - 1]
        end_col = end - self.line_starts[end_ln - 1]
        return Span((start_ln, end_ln), (start_col, end_col))


def tokenize(source: str) -> List[Token]:
    """Tokenize `source`, silently skipping characters that cannot start a token."""
    return Scanner(source).scan()
