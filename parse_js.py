import argparse
import json
import sys

from minijs import Parser, Scanner
from minijs.error.error import FrontendException


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(
        description="Tokenize and parse a small JavaScript-like program, and print its AST."
    )
    arg_parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf8"),
        default=sys.stdin,
        help="The program to parse, read from stdin if omitted.",
    )
    arg_parser.add_argument(
        "--tokens", action="store_true", help="Print the tokens before the AST."
    )
    arg_parser.add_argument(
        "--json", action="store_true", help="Print the AST as ESTree-style JSON."
    )
    arg_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on characters that cannot start a token, instead of skipping them.",
    )
    arg_parser.add_argument(
        "--debug", action="store_true", help="Trace scanned and consumed tokens."
    )
    args = arg_parser.parse_args(argv)

    with args.file as f:
        program = f.read()

    try:
        tokens = Scanner(program, strict=args.strict, debug=args.debug).scan()
        tree = Parser(program, debug=args.debug).parse(tokens)
    except FrontendException as e:
        print(e, file=sys.stderr)
        return 1

    if args.tokens:
        for token in tokens:
            print(f"{token.kind.value:<12} {token.text!r}")
        print()

    if args.json:
        print(json.dumps(tree.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(tree, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
