"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/primitives describing the AST node: its kind, the operator symbol,
its source position and its children. `ast_to_json_str` dumps it as text.
"""

import json
from typing import Any, Dict, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any] = {"node_type": node.type.name, "position": node.position}
    match node:
        case NumberNode(value=v):
            data["value"] = v
        case VariableNode(name=n):
            data["name"] = n
        case UnaryOpNode(operand=operand) | UnaryAssignmentNode(operand=operand):
            data["operator"] = node.symbol
            data["operand"] = ast_to_json(operand)
        case BinaryOpNode(left=left, right=right) | AssignmentNode(
            left=left, right=right
        ):
            data["operator"] = node.symbol
            data["left"] = ast_to_json(left)
            data["right"] = ast_to_json(right)
        case _:
            raise TypeError(f"Cannot serialize {type(node).__name__}")
    return data


def ast_to_json_str(node: Optional[ASTNode], indent: Optional[int] = 2) -> str:
    return json.dumps(ast_to_json(node), indent=indent)
