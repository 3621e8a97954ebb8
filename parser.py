"""
Parser for the Java-like expression language.

Overview and approach:
- This is a hand-written recursive-descent parser. It pulls tokens from a
    `Lexer` one at a time and builds one AST per input line. Each level of
    the grammar has its own method:

        Expression       -> SimpleExpression (AssignOp SimpleExpression)*
        SimpleExpression -> Term (AddOp Term)*
        Term             -> Factor (MulOp Factor)*
        Factor           -> PreOp* Atom PostOp*
        Atom             -> number | identifier | '(' Expression ')'

        AssignOp -> '=' | '+=' | '-=' | '*=' | '/=' | '%='
        AddOp    -> '+' | '-'
        MulOp    -> '*' | '/' | '%'
        PreOp    -> '+' | '-' | '++' | '--'
        PostOp   -> '++' | '--'

Key points:
- Every binary level is left-associative, assignment included. `a = b = 3`
    therefore groups as `(a = b) = 3` and is rejected with `NotAVariable`,
    because `(a = b)` is not a variable.
- In a run of prefix operators only the last one counts: `--+x` is `+x`,
    and a unary `+` leaves its operand as it is.
- The prefix operator wraps the atom first and postfix operators wrap the
    result, so `-x++` increments a negation and is rejected.
- Postfix `++`/`--` are recognized on the token that follows the atom, so
    `x++` yields the old value of `x` and increments it. Earlier versions of
    this grammar tested the token seen before the atom, which made postfix
    operators unreachable and rejected `x++` as trailing input.
- `NotAVariable` is raised while the tree is built, before anything is
    evaluated.

Errors:
- A mismatch raises `ExpressionSyntaxError` carrying the 0-based offset of
    the token being examined. Running out of input is reported at the length
    of the line, e.g. `1 +` fails at 3 and `(1 + 2` fails at 6.
- After a complete expression the next token must be the end of the line;
    `1 2` fails at 2.
"""

from __future__ import annotations
from typing import Dict, Optional
from tokens import END, Token, TokenType
from lexer import Lexer
from ast_nodes import *


class ExpressionSyntaxError(ExpressionError, SyntaxError):
    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at {position}")
        self.message = message
        self.position = position


ASSIGN_OPS: Dict[TokenType, NodeType] = {
    TokenType.ASSIGN: NodeType.ASSIGN,
    TokenType.PLUS_ASSIGN: NodeType.ADD_TO,
    TokenType.MINUS_ASSIGN: NodeType.SUBTRACT_FROM,
    TokenType.STAR_ASSIGN: NodeType.MULTIPLY_BY,
    TokenType.SLASH_ASSIGN: NodeType.DIVIDE_BY,
    TokenType.PERCENT_ASSIGN: NodeType.MOD_BY,
}

ADD_OPS: Dict[TokenType, NodeType] = {
    TokenType.PLUS: NodeType.ADD,
    TokenType.MINUS: NodeType.SUBTRACT,
}

MUL_OPS: Dict[TokenType, NodeType] = {
    TokenType.STAR: NodeType.MULTIPLY,
    TokenType.SLASH: NodeType.DIVIDE,
    TokenType.PERCENT: NodeType.MOD,
}

# Unary plus has no node of its own.
PRE_OPS: Dict[TokenType, Optional[NodeType]] = {
    TokenType.PLUS: None,
    TokenType.MINUS: NodeType.NEGATE,
    TokenType.PLUS_PLUS: NodeType.PRE_INCREMENT,
    TokenType.MINUS_MINUS: NodeType.PRE_DECREMENT,
}

POST_OPS: Dict[TokenType, NodeType] = {
    TokenType.PLUS_PLUS: NodeType.POST_INCREMENT,
    TokenType.MINUS_MINUS: NodeType.POST_DECREMENT,
}


class Parser:
    def __init__(self, text: str):
        self.text = text
        self.lexer = Lexer(text)
        self.current: Token = END
        self.position = 0

    def advance(self) -> Token:
        """Move to next token."""
        self.current = self.lexer.next_token()
        self.position = self.lexer.position
        return self.current

    def error(self, message: str = "Syntax error") -> ExpressionSyntaxError:
        return ExpressionSyntaxError(message, self.position)

    def expect(self, expected_type: TokenType, message: Optional[str] = None) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token

        raise self.error(message or f"Expected {expected_type}, got {self.current.type}")

    def _unexpected(self) -> ExpressionSyntaxError:
        match self.current.type:
            case TokenType.END:
                return self.error("Unexpected end of input")
            case TokenType.ERROR:
                return self.error(f"Unrecognized input '{self.current.value}'")
            case _:
                return self.error(f"Unexpected token '{self.current}'")

    def parse_atom(self) -> ASTNode:
        """Parse a number, a variable or a parenthesized expression."""
        token = self.current
        position = self.position

        match token.type:
            case TokenType.NUMBER:
                self.advance()
                return NumberNode(value=token.value, position=position)

            case TokenType.IDENTIFIER:
                self.advance()
                return VariableNode(name=token.value, position=position)

            case TokenType.LPAREN:
                self.advance()  # Consume '('
                expr = self.parse_expression()
                self.expect(TokenType.RPAREN, "Expected ')'")
                return expr

            case _:
                raise self._unexpected()

    def parse_factor(self) -> ASTNode:
        """Parse an atom with its prefix and postfix operators."""
        prefix: Optional[TokenType] = None
        prefix_position = self.position
        while self.current.type in PRE_OPS:
            prefix = self.current.type
            prefix_position = self.position
            self.advance()

        node = self.parse_atom()
        if prefix is not None and PRE_OPS[prefix] is not None:
            node = make_unary(PRE_OPS[prefix], node, prefix_position)

        while self.current.type in POST_OPS:
            node = make_unary(POST_OPS[self.current.type], node, self.position)
            self.advance()

        return node

    def parse_term(self) -> ASTNode:
        left = self.parse_factor()
        while self.current.type in MUL_OPS:
            op, position = MUL_OPS[self.current.type], self.position
            self.advance()
            right = self.parse_factor()
            left = make_binary(op, left, right, position)
        return left

    def parse_simple_expression(self) -> ASTNode:
        left = self.parse_term()
        while self.current.type in ADD_OPS:
            op, position = ADD_OPS[self.current.type], self.position
            self.advance()
            right = self.parse_term()
            left = make_binary(op, left, right, position)
        return left

    def parse_expression(self) -> ASTNode:
        left = self.parse_simple_expression()
        while self.current.type in ASSIGN_OPS:
            op, position = ASSIGN_OPS[self.current.type], self.position
            self.advance()
            right = self.parse_simple_expression()
            left = make_binary(op, left, right, position)
        return left

    def parse(self) -> ASTNode:
        """Parse the whole line as one expression."""
        self.advance()
        expr = self.parse_expression()
        if self.current.type != TokenType.END:
            raise self._unexpected()
        return expr


def parse(text: str) -> ASTNode:
    """Parse one line of text into an AST."""
    return Parser(text).parse()
