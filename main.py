from __future__ import annotations
from typing import List, Optional, Sequence
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode, ExpressionError, NotAVariable, UndefinedVariable
from parser import ExpressionSyntaxError, parse
from rpn import RPNError, parse_rpn
from symbols import SymbolTable
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json_str
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse_line(text: str, *, rpn: bool = False) -> ASTNode:
    """Parse one line, infix by default or postfix when `rpn` is set."""
    return parse_rpn(text) if rpn else parse(text)


def evaluate_line(text: str, symbols: SymbolTable, *, rpn: bool = False) -> int:
    """Parse and evaluate one line against `symbols`."""
    return parse_line(text, rpn=rpn).evaluate(symbols)


def describe_error(error: Exception) -> str:
    """Return the message printed for a failed line."""
    match error:
        case ExpressionSyntaxError(position=pos, message=msg):
            return f"Syntax error at position {pos}: {msg}"
        case NotAVariable() | UndefinedVariable() | RPNError():
            return str(error)
        case ZeroDivisionError():
            return f"Arithmetic error: {error}"
        case _:
            return f"Error: {error}"


def process_line(
    text: str,
    symbols: SymbolTable,
    *,
    rpn: bool = False,
    print_tokens: bool = False,
    print_ast: bool = False,
    print_rpn: bool = False,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> Optional[int]:
    """Process a single line: parse, optionally print stages, evaluate and print the value.

    Returns the value, or None when the line failed. A failed line keeps every
    assignment that was made before the failure.
    """
    try:
        if print_tokens and not rpn:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens):
                print(f"  {i:3}: {token!r}")

        ast = parse_line(text, rpn=rpn)
        if print_ast:
            print("AST:")
            print(PrettyPrinter.print_ast(ast))
        if print_rpn:
            print(f"RPN: {ast.format()}")
        if print_json:
            print(ast_to_json_str(ast))

        if viz_path:
            try:
                write_and_render(ast, viz_path, fmt=viz_format, title=text)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

        value = ast.evaluate(symbols)
    except ExpressionError as e:
        print(describe_error(e))
        return None

    print(value)
    return value


def interactive_mode(symbols: SymbolTable, rpn: bool = False, **options) -> None:
    """Run the read-evaluate-print loop until an empty line or `quit`."""
    prompt = "RPN: " if rpn else "Expression: "
    print("Interactive mode (empty line or 'quit' to exit, ':symbols' to dump the table)")

    while True:
        try:
            text = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            break

        if not text or text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break
        if text == ":symbols":
            print(symbols.dump())
            continue

        process_line(text, symbols, rpn=rpn, **options)


def cli(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Evaluate Java-like integer expressions from the command line, a file or interactively"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to a file with one expression per line"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    group.add_argument(
        "-e",
        "--expression",
        dest="expressions",
        action="append",
        help="Expression to evaluate (may be repeated; variables carry over)",
    )
    parser.add_argument(
        "--rpn",
        dest="rpn",
        action="store_true",
        help="Read postfix (RPN) input instead of infix expressions",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST as a tree"
    )
    parser.add_argument(
        "--print-rpn",
        dest="print_rpn",
        action="store_true",
        help="Print the postfix rendering of each expression",
    )
    parser.add_argument(
        "--print-json", dest="print_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "--dump-symbols",
        dest="dump_symbols",
        action="store_true",
        help="Print every slot of the symbol table when done",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write a Graphviz rendering of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)
    symbols = SymbolTable()
    options = dict(
        rpn=args.rpn,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_rpn=args.print_rpn,
        print_json=args.print_json,
        viz_format=args.viz_format,
    )

    failures = 0
    if args.interactive:
        interactive_mode(symbols, **options)
    elif args.expressions or args.file:
        if args.file:
            try:
                with open(args.file, "r", encoding="utf-8") as fh:
                    lines = fh.read().splitlines()
            except OSError as e:
                print(f"Failed to read file {args.file}: {e}")
                return 1
        else:
            lines = args.expressions

        for line in lines:
            if not line.strip():
                continue
            if process_line(line, symbols, viz_path=args.viz_ast, **options) is None:
                failures += 1
    else:
        parser.print_help()
        return 0

    if args.dump_symbols:
        print(symbols.dump())
    return 1 if failures else 0


if __name__ == "__main__":
    import sys

    sys.exit(cli())
