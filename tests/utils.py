from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def token_types(text: str):
    return [t.type for t in lex(text)]


def parse_text(text: str):
    """Convenience: parse a source line into an AST."""
    return Parser(text).parse()


def run_lines(lines, symbols):
    """Evaluate several lines in order against one table, returning every value."""
    return [parse_text(line).evaluate(symbols) for line in lines]
