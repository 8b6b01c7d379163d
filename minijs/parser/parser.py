from typing import Callable, List, Optional, Tuple

from icecream.icecream import IceCreamDebugger

from minijs.error.parser_error import ParseError, ParserException, UnexpectedTokenError
from minijs.kind import TokenKind
from minijs.scanner.scanner import Scanner
from minijs.token import Token
from minijs.util import Span, stderr_print

from minijs.util import (  # isort:skip
    ADDITIVE_OPERATORS,
    COMPARISON_OPERATORS,
    MULTIPLICATIVE_OPERATORS,
    UNARY_OPERATORS,
)
from minijs.tree.tree import (  # isort:skip
    ArrayExpression,
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    IfStatement,
    Literal,
    MemberExpression,
    Node,
    Program,
    ReturnStatement,
    Statement,
    UnaryExpression,
    VariableDeclaration,
    VariableDeclarator,
)


class Parser:
    def __init__(self, program: str = "", debug: bool = False) -> None:
        # Only used to quote the source in error messages
        self.og_program = program

        self.ic = IceCreamDebugger(prefix="parser| ", outputFunction=stderr_print)
        self.ic.enabled = debug

        self.tokens: List[Token] = []
        # Pointer used with `self.tokens`
        self.i = 0

    def parse(self, tokens: List[Token]) -> Program:
        """Given a list of Tokens from the scanner, build the Abstract Syntax Tree
        using recursive descent.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Raises:
            ParserException: On the first token that does not fit the grammar.

        Returns:
            Program: The root of the AST.
        """
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].kind != TokenKind.EOF:
            self.tokens.append(Token("", TokenKind.EOF))
        self.i = 0
        return self.parse_program()

    def peek(self, offset: int = 0) -> Token:
        # Reading past the end keeps producing the EndOfInput token
        return self.tokens[min(self.i + offset, len(self.tokens) - 1)]

    def at(self, kind: TokenKind, *texts: str) -> bool:
        return self.peek().matches(kind, *texts)

    def consume(
        self, kind: Optional[TokenKind] = None, text: Optional[str] = None
    ) -> Token:
        token = self.peek()
        if (kind is not None and token.kind != kind) or (
            text is not None and token.text != text
        ):
            raise ParserException(
                ParseError(self.og_program, token.span, kind, text, token)
            )
        self.ic(token)
        self.i += 1
        return token

    def accept(self, kind: TokenKind, text: str) -> Optional[Token]:
        """Consume the current token only if it has this kind and text."""
        if self.at(kind, text):
            return self.consume(kind, text)
        return None

    def span_from(self, start: Token) -> Span:
        """The span from `start` up to and including the last consumed token."""
        if self.i == 0:
            return start.span
        return start.span & self.tokens[self.i - 1].span

    def parse_list(self, close: str, parse_item: Callable[[], Node]) -> Tuple:
        """Parse comma separated items up to and including the `close` punctuator.

        A trailing comma is allowed, a missing comma between two items is not.
        """
        items = []
        while not self.at(TokenKind.PUNCTUATOR, close):
            items.append(parse_item())
            if not self.accept(TokenKind.PUNCTUATOR, ","):
                break
        self.consume(TokenKind.PUNCTUATOR, close)
        return tuple(items)

    def parse_identifier(self) -> Identifier:
        token = self.consume(TokenKind.IDENTIFIER)
        return Identifier(token.text, span=token.span)

    def parse_program(self) -> Program:
        start = self.peek()
        body = []
        while not self.at(TokenKind.EOF):
            body.append(self.parse_statement())
        return Program(tuple(body), span=self.span_from(start))

    def parse_statement(self) -> Statement:
        match self.peek():
            case Token(kind=TokenKind.KEYWORD, text="var" | "let" | "const"):
                return self.parse_variable_declaration()
            case Token(kind=TokenKind.KEYWORD, text="function"):
                return self.parse_function_declaration()
            case Token(kind=TokenKind.KEYWORD, text="return"):
                return self.parse_return_statement()
            case Token(kind=TokenKind.KEYWORD, text="if"):
                return self.parse_if_statement()
            case _:
                return self.parse_expression_statement()

    def parse_variable_declaration(self) -> VariableDeclaration:
        start = self.peek()
        kind = self.consume(TokenKind.KEYWORD).text

        declarations = []
        while True:
            declarator_start = self.peek()
            _id = self.parse_identifier()
            init = None
            if self.accept(TokenKind.OPERATOR, "="):
                init = self.parse_expression()
            declarations.append(
                VariableDeclarator(_id, init, span=self.span_from(declarator_start))
            )
            if not self.accept(TokenKind.PUNCTUATOR, ","):
                break

        self.accept(TokenKind.PUNCTUATOR, ";")
        return VariableDeclaration(
            kind, tuple(declarations), span=self.span_from(start)
        )

    def parse_function_declaration(self) -> FunctionDeclaration:
        start = self.consume(TokenKind.KEYWORD, "function")
        _id = self.parse_identifier()
        self.consume(TokenKind.PUNCTUATOR, "(")
        params = self.parse_list(")", self.parse_identifier)
        body = self.parse_block_statement()
        return FunctionDeclaration(_id, params, body, span=self.span_from(start))

    def parse_block_statement(self) -> BlockStatement:
        start = self.consume(TokenKind.PUNCTUATOR, "{")
        body = []
        while not self.at(TokenKind.PUNCTUATOR, "}"):
            body.append(self.parse_statement())
        self.consume(TokenKind.PUNCTUATOR, "}")
        return BlockStatement(tuple(body), span=self.span_from(start))

    def parse_return_statement(self) -> ReturnStatement:
        start = self.consume(TokenKind.KEYWORD, "return")
        argument = None
        if not (
            self.at(TokenKind.PUNCTUATOR, ";", "}") or self.at(TokenKind.EOF)
        ):
            argument = self.parse_expression()
        self.accept(TokenKind.PUNCTUATOR, ";")
        return ReturnStatement(argument, span=self.span_from(start))

    def parse_branch(self) -> Statement:
        if self.at(TokenKind.PUNCTUATOR, "{"):
            return self.parse_block_statement()
        return self.parse_statement()

    def parse_if_statement(self) -> IfStatement:
        start = self.consume(TokenKind.KEYWORD, "if")
        self.consume(TokenKind.PUNCTUATOR, "(")
        test = self.parse_expression()
        self.consume(TokenKind.PUNCTUATOR, ")")

        consequent = self.parse_branch()
        alternate = None
        if self.accept(TokenKind.KEYWORD, "else"):
            alternate = self.parse_branch()

        return IfStatement(test, consequent, alternate, span=self.span_from(start))

    def parse_expression_statement(self) -> ExpressionStatement:
        start = self.peek()
        expression = self.parse_expression()
        self.accept(TokenKind.PUNCTUATOR, ";")
        return ExpressionStatement(expression, span=self.span_from(start))

    def parse_expression(self) -> Expression:
        return self.parse_assignment()

    def parse_assignment(self) -> Expression:
        start = self.peek()
        left = self.parse_comparison()
        if self.accept(TokenKind.OPERATOR, "="):
            # Right associative: a = b = c is a = (b = c)
            right = self.parse_assignment()
            return AssignmentExpression(left, right, span=self.span_from(start))
        return left

    def parse_binary(
        self, operators: Tuple[str, ...], parse_operand: Callable[[], Expression]
    ) -> Expression:
        """Parse a left associative chain of binary operators of the same precedence."""
        start = self.peek()
        left = parse_operand()
        while self.at(TokenKind.OPERATOR, *operators):
            operator = self.consume(TokenKind.OPERATOR).text
            right = parse_operand()
            left = BinaryExpression(operator, left, right, span=self.span_from(start))
        return left

    def parse_comparison(self) -> Expression:
        return self.parse_binary(COMPARISON_OPERATORS, self.parse_additive)

    def parse_additive(self) -> Expression:
        return self.parse_binary(ADDITIVE_OPERATORS, self.parse_multiplicative)

    def parse_multiplicative(self) -> Expression:
        return self.parse_binary(MULTIPLICATIVE_OPERATORS, self.parse_unary)

    def parse_unary(self) -> Expression:
        if self.at(TokenKind.OPERATOR, *UNARY_OPERATORS):
            start = self.consume(TokenKind.OPERATOR)
            argument = self.parse_unary()
            return UnaryExpression(start.text, argument, span=self.span_from(start))
        return self.parse_call_member()

    def parse_call_member(self) -> Expression:
        start = self.peek()
        _object = self.parse_primary()

        while True:
            if self.accept(TokenKind.PUNCTUATOR, "("):
                arguments = self.parse_list(")", self.parse_expression)
                _object = CallExpression(
                    _object, arguments, span=self.span_from(start)
                )
            elif self.accept(TokenKind.PUNCTUATOR, "."):
                _property = self.parse_identifier()
                _object = MemberExpression(
                    _object, _property, False, span=self.span_from(start)
                )
            elif self.accept(TokenKind.PUNCTUATOR, "["):
                _property = self.parse_expression()
                self.consume(TokenKind.PUNCTUATOR, "]")
                _object = MemberExpression(
                    _object, _property, True, span=self.span_from(start)
                )
            else:
                return _object

    def parse_primary(self) -> Expression:
        token = self.peek()
        match token:
            case Token(kind=TokenKind.NUMBER):
                self.consume()
                return Literal(number_value(token.text), token.text, span=token.span)

            case Token(kind=TokenKind.STRING):
                self.consume()
                return Literal(token.text, f'"{token.text}"', span=token.span)

            case Token(kind=TokenKind.KEYWORD, text="true" | "false"):
                self.consume()
                return Literal(token.text == "true", token.text, span=token.span)

            case Token(kind=TokenKind.KEYWORD, text="null"):
                self.consume()
                return Literal(None, "null", span=token.span)

            case Token(kind=TokenKind.IDENTIFIER):
                return self.parse_identifier()

            case Token(kind=TokenKind.PUNCTUATOR, text="("):
                self.consume()
                expression = self.parse_expression()
                self.consume(TokenKind.PUNCTUATOR, ")")
                return expression

            case Token(kind=TokenKind.PUNCTUATOR, text="["):
                self.consume()
                elements = self.parse_list("]", self.parse_expression)
                return ArrayExpression(elements, span=self.span_from(token))

        raise ParserException(UnexpectedTokenError(self.og_program, token.span, token))


def number_value(text: str) -> int | float:
    if "." in text:
        return float(text)
    try:
        return int(text)
    except ValueError:
        # Too many digits for `int`, overflows to inf like JavaScript's parseFloat
        return float(text)


def parse(tokens: List[Token]) -> Program:
    """Parse a token list, as produced by `tokenize`, into a Program node."""
    return Parser().parse(tokens)


def parse_source(source: str, strict: bool = False) -> Program:
    """Tokenize and parse `source`, quoting it in any error message."""
    tokens = Scanner(source, strict=strict).scan()
    return Parser(source).parse(tokens)
