"""Evaluator for expression ASTs.

`evaluate(node, symbols)` walks a tree built by the parser (or the postfix
reader) and returns its integer value. Variable reads consult the symbol
table; increments, decrements and assignments write through to it, and
those writes stay in the table even if a later part of the expression fails.

Integer semantics follow Java: `/` truncates toward zero and `%` takes the
sign of the dividend. Values are Python integers, so nothing overflows.
Dividing by zero raises `DivisionByZero`; reading a variable that was never
assigned raises `UndefinedVariable`.
"""

from typing import Optional
from ast_nodes import *
from symbols import SESSION, SymbolTable


def _divide(lv: int, rv: int) -> int:
    if rv == 0:
        raise DivisionByZero("Division by zero")
    quotient = abs(lv) // abs(rv)
    return quotient if (lv < 0) == (rv < 0) else -quotient


def _mod(lv: int, rv: int) -> int:
    if rv == 0:
        raise DivisionByZero("Modulo by zero")
    return lv - rv * _divide(lv, rv)


def apply_arithmetic(op: NodeType, lv: int, rv: int) -> int:
    match op:
        case NodeType.ADD:
            return lv + rv
        case NodeType.SUBTRACT:
            return lv - rv
        case NodeType.MULTIPLY:
            return lv * rv
        case NodeType.DIVIDE:
            return _divide(lv, rv)
        case NodeType.MOD:
            return _mod(lv, rv)
        case _:
            raise RuntimeError(f"Unsupported binary operator: {op}")


def _eval_expr(node: ASTNode, symbols: SymbolTable) -> int:
    match node:
        case NumberNode(value=v):
            return v
        case VariableNode(name=n):
            value = symbols.find(n)
            if value is None:
                raise UndefinedVariable(n)
            return value
        case UnaryOpNode(type=NodeType.NEGATE, operand=operand):
            return -_eval_expr(operand, symbols)
        case UnaryAssignmentNode(type=op, operand=variable):
            old = _eval_expr(variable, symbols)
            match op:
                case NodeType.PRE_INCREMENT:
                    variable.update(old + 1, symbols)
                    return old + 1
                case NodeType.PRE_DECREMENT:
                    variable.update(old - 1, symbols)
                    return old - 1
                case NodeType.POST_INCREMENT:
                    variable.update(old + 1, symbols)
                    return old
                case NodeType.POST_DECREMENT:
                    variable.update(old - 1, symbols)
                    return old
                case _:
                    raise RuntimeError(f"Unsupported unary operator: {op}")
        case BinaryOpNode(type=op, left=l, right=r):
            lv = _eval_expr(l, symbols)
            rv = _eval_expr(r, symbols)
            return apply_arithmetic(op, lv, rv)
        case AssignmentNode(type=NodeType.ASSIGN, left=variable, right=r):
            value = _eval_expr(r, symbols)
            variable.update(value, symbols)
            return value
        case AssignmentNode(type=op, left=variable, right=r):
            # The variable is read before the right-hand side is evaluated.
            current = _eval_expr(variable, symbols)
            value = apply_arithmetic(COMPOUND_ASSIGNMENTS[op], current, _eval_expr(r, symbols))
            variable.update(value, symbols)
            return value
        case _:
            raise RuntimeError(f"Unhandled expression node type: {node}")


def evaluate(node: ASTNode, symbols: Optional[SymbolTable] = None) -> int:
    """Evaluate `node` against `symbols`, or the session table when none is given."""
    if symbols is None:
        symbols = SESSION
    return _eval_expr(node, symbols)
