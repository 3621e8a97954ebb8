"""Printers for the expression AST.

Provides three renderings of a tree:

- `PrettyPrinter.print_rpn(node)` is the postfix rendering behind
  `ASTNode.format()`. Operands come first and each operator follows them,
  separated by single spaces, using the disambiguated symbols of
  `ast_nodes.SYMBOLS` so the text reads back through `rpn.parse_rpn`.
- `PrettyPrinter.print_ast(node, indent, prefix)` renders an indented,
  multi-line tree for debugging.
- `PrettyPrinter.print_surface(node)` gives a fully parenthesized infix form.

Examples:
    PrettyPrinter.print_rpn(parse("-a + b++"))   # 'a ~ b +++ +'
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_rpn(node: ASTNode) -> str:
        """Return the postfix (RPN) rendering of `node`."""
        match node:
            case NumberNode(value=v):
                return str(v)
            case VariableNode(name=n):
                return n
            case UnaryOpNode(operand=operand) | UnaryAssignmentNode(operand=operand):
                return f"{PrettyPrinter.print_rpn(operand)} {node.symbol}"
            case BinaryOpNode(left=left, right=right) | AssignmentNode(
                left=left, right=right
            ):
                return f"{PrettyPrinter.print_rpn(left)} {PrettyPrinter.print_rpn(right)} {node.symbol}"
            case _:
                raise TypeError(f"Cannot format {type(node).__name__}")

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Return an indented tree rendering of `node`."""
        indent_str = " " * indent
        lines = []

        match node:
            case NumberNode(value=v):
                lines.append(f"{indent_str}{prefix}Number({v})")

            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case UnaryOpNode(operand=operand) | UnaryAssignmentNode(operand=operand):
                lines.append(f"{indent_str}{prefix}{_title(node.type)}")
                lines.append(PrettyPrinter.print_ast(operand, indent + 2, "operand: "))

            case BinaryOpNode(left=left, right=right) | AssignmentNode(
                left=left, right=right
            ):
                lines.append(f"{indent_str}{prefix}{_title(node.type)}")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a one-line infix rendering with every operator parenthesized."""
        _p = PrettyPrinter.print_surface

        match node:
            case NumberNode(value=v):
                return str(v)
            case VariableNode(name=n):
                return n
            case UnaryOpNode(operand=operand):
                return f"(-{_p(operand)})"
            case UnaryAssignmentNode(type=NodeType.PRE_INCREMENT, operand=operand):
                return f"(++{_p(operand)})"
            case UnaryAssignmentNode(type=NodeType.PRE_DECREMENT, operand=operand):
                return f"(--{_p(operand)})"
            case UnaryAssignmentNode(type=NodeType.POST_INCREMENT, operand=operand):
                return f"({_p(operand)}++)"
            case UnaryAssignmentNode(type=NodeType.POST_DECREMENT, operand=operand):
                return f"({_p(operand)}--)"
            case BinaryOpNode(left=left, right=right) | AssignmentNode(
                left=left, right=right
            ):
                return f"({_p(left)} {node.symbol} {_p(right)})"
            case _:
                raise TypeError(f"Cannot format {type(node).__name__}")


def _title(node_type: NodeType) -> str:
    # PRE_INCREMENT -> PreIncrement
    return "".join(part.capitalize() for part in node_type.name.split("_"))
