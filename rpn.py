"""Reader for postfix (RPN) expressions.

This is the inverse of `ASTNode.format()`: it takes space-separated tokens
in postfix order and rebuilds the AST with a small stack machine. Operands
(integers, optionally signed, and variable names) are pushed; an operator
pops as many operands as it takes, builds its node through `make_unary` /
`make_binary` (so assignments still have to target a variable) and pushes
the result. Exactly one node must be left at the end.

Operator symbols are the disambiguated ones used by the formatter:
`~` negate, `++`/`--` pre-increment/decrement, `+++`/`---` post-increment/
decrement, `+ - * / %` and `= += -= *= /= %=`.

Examples:
    evaluate_rpn("x 5 = x 2 * +", symbols)   # assigns x = 5, returns 15
"""

from __future__ import annotations
from typing import Dict, List, Optional
from ast_nodes import *
from ast_interpreter import evaluate
from symbols import SymbolTable


class RPNError(ExpressionError, ValueError):
    pass


OPERATORS: Dict[str, NodeType] = {symbol: node_type for node_type, symbol in SYMBOLS.items()}


def _operand(text: str) -> ASTNode:
    try:
        return NumberNode(value=int(text))
    except ValueError:
        return VariableNode(name=text)


def parse_rpn(text: str) -> ASTNode:
    """Build the AST described by a postfix expression."""
    stack: List[ASTNode] = []

    for token in text.split():
        node_type = OPERATORS.get(token)
        if node_type is None:
            stack.append(_operand(token))
            continue

        if node_type in UNARY_OPERATORS:
            if not stack:
                raise RPNError(f"Missing operand for '{token}'")
            stack.append(make_unary(node_type, stack.pop()))
        else:
            if len(stack) < 2:
                raise RPNError(f"Missing operand for '{token}'")
            right = stack.pop()
            left = stack.pop()
            stack.append(make_binary(node_type, left, right))

    if not stack:
        raise RPNError("Empty expression")
    if len(stack) > 1:
        raise RPNError(f"{len(stack) - 1} operand(s) left without an operator")
    return stack[0]


def evaluate_rpn(text: str, symbols: Optional[SymbolTable] = None) -> int:
    """Parse a postfix expression and evaluate it."""
    return evaluate(parse_rpn(text), symbols)
