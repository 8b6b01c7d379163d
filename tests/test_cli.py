import json

from parse_js import main
from tests.test_util import ROOT


def test_cli_tree(capsys):
    assert main([str(ROOT / "data/valid/variables.js")]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Program\n")
    assert 'name: "PI"' in captured.out


def test_cli_json(capsys):
    assert main([str(ROOT / "data/valid/functions.js"), "--json"]) == 0
    tree = json.loads(capsys.readouterr().out)
    assert tree["type"] == "Program"
    assert tree["body"][0]["type"] == "FunctionDeclaration"
    assert tree["body"][0]["id"] == {"type": "Identifier", "name": "add"}


def test_cli_tokens(capsys):
    assert main([str(ROOT / "data/valid/variables.js"), "--tokens"]) == 0
    out = capsys.readouterr().out
    assert "Keyword      'var'" in out
    assert "EndOfInput   ''" in out


def test_cli_error(capsys):
    path = ROOT / "data/parserError/ParseError_missing_identifier.js"
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "SyntaxError" in captured.err


def test_cli_strict(tmp_path, capsys):
    program = tmp_path / "unknown.js"
    program.write_text("var x = 1 @ 2;", encoding="utf8")
    assert main([str(program)]) == 0
    capsys.readouterr()

    assert main([str(program), "--strict"]) == 1
    assert "ScannerError" in capsys.readouterr().err
