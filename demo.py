from minijs import Parser, Scanner

programs = {
    "Simple Variable Declaration": "var x = 10;",
    "Binary Expression with Precedence": "var result = 2 + 3 * 4;",
    "Function Declaration": "function add(a, b) { return a + b; }",
    "Function Call": 'console.log("Hello");',
    "If Statement": "if (x > 10) { return true; } else { return false; }",
}

for title, program in programs.items():
    # Perform scanning on the input program
    scanner = Scanner(program)
    tokens = scanner.scan()

    # Perform parsing on the scanned tokens
    parser = Parser(program)
    tree = parser.parse(tokens)

    # Print out the tree
    print("=" * 70)
    print(title)
    print("=" * 70)
    print(f"Input: {program!r}")
    print("-" * 70)
    print(tree)
