import sys

from minijs.kind import TokenKind
from minijs.parser.parser import Parser, parse, parse_source
from minijs.scanner.scanner import Scanner, tokenize
from minijs.token import Token
from minijs.tree.printer import Printer, print_ast

# Default is 1000
sys.setrecursionlimit(5000)
