"""AST node definitions for the expression language.

This module defines the closed set of AST node dataclasses built by the
parser and by the postfix reader. The `NodeType` enum tags each node with
the exact operator it stands for, so the evaluator and the printers can
pattern-match on the node class and its `type`.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the offset in the source line where the node began.
- Nodes that write to a variable (`UnaryAssignmentNode`, `AssignmentNode`)
    must target a `VariableNode`. Build them through `make_unary` and
    `make_binary`, which raise `NotAVariable` otherwise; the check is done
    once here and never repeated during evaluation.
- Every node answers `evaluate(symbols)` (see `ast_interpreter.py`) and
    `format()`, the postfix rendering (see `pretty_printer.py`).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from symbols import SymbolTable


class NodeType(Enum):
    NUMBER = auto()
    VARIABLE = auto()

    # Unary
    NEGATE = auto()
    PRE_INCREMENT = auto()
    PRE_DECREMENT = auto()
    POST_INCREMENT = auto()
    POST_DECREMENT = auto()

    # Binary
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MOD = auto()

    # Assignment
    ASSIGN = auto()
    ADD_TO = auto()
    SUBTRACT_FROM = auto()
    MULTIPLY_BY = auto()
    DIVIDE_BY = auto()
    MOD_BY = auto()

    def __str__(self) -> str:
        return self.name


# Postfix symbols. Negation and the postfix increments get symbols of their
# own so that a postfix rendering reads back without ambiguity.
SYMBOLS: Dict[NodeType, str] = {
    NodeType.NEGATE: "~",
    NodeType.PRE_INCREMENT: "++",
    NodeType.PRE_DECREMENT: "--",
    NodeType.POST_INCREMENT: "+++",
    NodeType.POST_DECREMENT: "---",
    NodeType.ADD: "+",
    NodeType.SUBTRACT: "-",
    NodeType.MULTIPLY: "*",
    NodeType.DIVIDE: "/",
    NodeType.MOD: "%",
    NodeType.ASSIGN: "=",
    NodeType.ADD_TO: "+=",
    NodeType.SUBTRACT_FROM: "-=",
    NodeType.MULTIPLY_BY: "*=",
    NodeType.DIVIDE_BY: "/=",
    NodeType.MOD_BY: "%=",
}

UNARY_ASSIGNMENTS = frozenset(
    {
        NodeType.PRE_INCREMENT,
        NodeType.PRE_DECREMENT,
        NodeType.POST_INCREMENT,
        NodeType.POST_DECREMENT,
    }
)
UNARY_OPERATORS = UNARY_ASSIGNMENTS | {NodeType.NEGATE}

ARITHMETIC_OPERATORS = frozenset(
    {
        NodeType.ADD,
        NodeType.SUBTRACT,
        NodeType.MULTIPLY,
        NodeType.DIVIDE,
        NodeType.MOD,
    }
)

# Each compound assignment and the arithmetic it performs.
COMPOUND_ASSIGNMENTS: Dict[NodeType, NodeType] = {
    NodeType.ADD_TO: NodeType.ADD,
    NodeType.SUBTRACT_FROM: NodeType.SUBTRACT,
    NodeType.MULTIPLY_BY: NodeType.MULTIPLY,
    NodeType.DIVIDE_BY: NodeType.DIVIDE,
    NodeType.MOD_BY: NodeType.MOD,
}
ASSIGNMENTS = frozenset(COMPOUND_ASSIGNMENTS) | {NodeType.ASSIGN}
BINARY_OPERATORS = ARITHMETIC_OPERATORS | ASSIGNMENTS


class ExpressionError(Exception):
    """Base class of every failure raised while parsing or evaluating."""


class NotAVariable(ExpressionError):
    def __init__(self, node: ASTNode):
        super().__init__(f"Variable expected, found: {node.format()}")
        self.node = node


class UndefinedVariable(ExpressionError, NameError):
    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class DivisionByZero(ExpressionError, ZeroDivisionError):
    pass


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    position: int = 0

    @property
    def symbol(self) -> str:
        return SYMBOLS.get(self.type, "")

    def evaluate(self, symbols: Optional[SymbolTable] = None) -> int:
        """Evaluate the tree rooted here against `symbols` (the session table by default)."""
        from ast_interpreter import evaluate

        return evaluate(self, symbols)

    def format(self) -> str:
        """Render the tree rooted here in postfix notation."""
        from pretty_printer import PrettyPrinter

        return PrettyPrinter.print_rpn(self)


# Leaves
@dataclass
class NumberNode(ASTNode):
    type: NodeType = NodeType.NUMBER
    value: int = 0


@dataclass
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: str = ""

    def update(self, value: int, symbols: Optional[SymbolTable] = None) -> None:
        """Store `value` under this variable's name."""
        if symbols is None:
            from symbols import SESSION

            symbols = SESSION
        symbols.add(self.name, value)


# Operators
@dataclass
class UnaryOpNode(ASTNode):
    type: NodeType = NodeType.NEGATE
    operand: ASTNode = field(default_factory=lambda: NumberNode())


@dataclass
class UnaryAssignmentNode(ASTNode):
    type: NodeType = NodeType.PRE_INCREMENT
    operand: VariableNode = field(default_factory=lambda: VariableNode())


@dataclass
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.ADD
    left: ASTNode = field(default_factory=lambda: NumberNode())
    right: ASTNode = field(default_factory=lambda: NumberNode())


@dataclass
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGN
    left: VariableNode = field(default_factory=lambda: VariableNode())
    right: ASTNode = field(default_factory=lambda: NumberNode())


def make_unary(node_type: NodeType, operand: ASTNode, position: int = 0) -> ASTNode:
    """Build a unary node, checking that increments/decrements target a variable."""
    if node_type == NodeType.NEGATE:
        return UnaryOpNode(type=node_type, operand=operand, position=position)
    if node_type in UNARY_ASSIGNMENTS:
        if not isinstance(operand, VariableNode):
            raise NotAVariable(operand)
        return UnaryAssignmentNode(type=node_type, operand=operand, position=position)
    raise ValueError(f"Not a unary operator: {node_type}")


def make_binary(
    node_type: NodeType, left: ASTNode, right: ASTNode, position: int = 0
) -> ASTNode:
    """Build a binary node, checking that assignments target a variable."""
    if node_type in ARITHMETIC_OPERATORS:
        return BinaryOpNode(type=node_type, left=left, right=right, position=position)
    if node_type in ASSIGNMENTS:
        if not isinstance(left, VariableNode):
            raise NotAVariable(left)
        return AssignmentNode(type=node_type, left=left, right=right, position=position)
    raise ValueError(f"Not a binary operator: {node_type}")
