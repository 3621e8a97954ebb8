from main import cli, describe_error, evaluate_line, lex, process_line
from ast_nodes import DivisionByZero, UndefinedVariable
from parser import ExpressionSyntaxError
from tokens import TokenType


def test_lex_ends_with_end_token():
    assert lex("a + 1")[-1].type == TokenType.END


def test_evaluate_line_infix_and_rpn(symbols):
    assert evaluate_line("a = 4", symbols) == 4
    assert evaluate_line("a 2 *", symbols, rpn=True) == 8


def test_process_line_prints_value(symbols, capsys):
    assert process_line("2 * 21", symbols) == 42
    assert capsys.readouterr().out == "42\n"


def test_process_line_reports_errors_and_continues(symbols, capsys):
    assert process_line("a = 1", symbols) == 1
    assert process_line("1 +", symbols) is None
    assert process_line("b", symbols) is None
    assert process_line("3 = a", symbols) is None
    assert process_line("a / 0", symbols) is None
    assert process_line("a + 1", symbols) == 2

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "1",
        "Syntax error at position 3: Unexpected end of input",
        "Undefined variable: b",
        "Variable expected, found: 3",
        "Arithmetic error: Division by zero",
        "2",
    ]


def test_process_line_diagnostics(symbols, capsys):
    process_line("x = 2", symbols, print_tokens=True, print_ast=True, print_rpn=True, print_json=True)
    out = capsys.readouterr().out
    assert "Tokens (4):" in out
    assert "AST:" in out
    assert "RPN: x 2 =" in out
    assert '"node_type": "ASSIGN"' in out
    assert out.endswith("2\n")


def test_describe_error():
    assert describe_error(ExpressionSyntaxError("Expected ')'", 6)) == "Syntax error at position 6: Expected ')'"
    assert describe_error(UndefinedVariable("q")) == "Undefined variable: q"
    assert describe_error(DivisionByZero("Modulo by zero")) == "Arithmetic error: Modulo by zero"


def test_cli_expressions_share_symbols(capsys):
    assert cli(["-e", "a = 2", "-e", "a * 3"]) == 0
    assert capsys.readouterr().out == "2\n6\n"


def test_cli_returns_failure_status(capsys):
    assert cli(["-e", "1 +"]) == 1
    assert "Syntax error at position 3" in capsys.readouterr().out


def test_cli_rpn_mode(capsys):
    assert cli(["--rpn", "-e", "1 2 +", "-e", "4 ~"]) == 0
    assert capsys.readouterr().out == "3\n-4\n"


def test_cli_file_and_symbol_dump(tmp_path, capsys):
    src = tmp_path / "lines.txt"
    src.write_text("x = 5\n\nx += 1\n")
    assert cli(["--file", str(src), "--dump-symbols"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:2] == ["5", "6"]
    assert "x = 6" in [line.split(": ", 1)[-1] for line in out[2:]]


def test_cli_missing_file(tmp_path, capsys):
    assert cli(["--file", str(tmp_path / "nope.txt")]) == 1
    assert "Failed to read file" in capsys.readouterr().out


def test_interactive_mode(monkeypatch, capsys):
    lines = iter(["a = 3", "a++", ":symbols", "a", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert cli(["-i"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "3" in out
    assert out[-2] == "4"
    assert out[-1] == "Goodbye!"
