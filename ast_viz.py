"""Graphviz visualization helpers for expression ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes one graph node labelled with its kind and
its operator symbol, name or value; edges run from a parent to its children
and are labelled `operand`, `left` or `right`. Nodes that write to the
symbol table are drawn with a highlighted background.
"""

from typing import Optional
import html
from ast_nodes import *
from graphviz import Digraph

WRITE_FILL = "#ffefef"


def _label(node: ASTNode) -> str:
    match node:
        case NumberNode(value=v):
            detail = str(v)
        case VariableNode(name=n):
            detail = n
        case _:
            detail = node.symbol
    kind = html.escape(node.type.name)
    return f'<<FONT POINT-SIZE="8">{kind}</FONT><BR/>{html.escape(detail)}>'


def render_ast_dot(node: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the tree rooted at `node`.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr("graph", label=title, labelloc="t")
    dot.attr("node", shape="box", style="rounded,filled", fillcolor="white")

    counter = 0

    def visit(n: ASTNode) -> str:
        nonlocal counter
        node_id = f"n{counter}"
        counter += 1

        fill = WRITE_FILL if isinstance(n, (UnaryAssignmentNode, AssignmentNode)) else "white"
        dot.node(node_id, label=_label(n), fillcolor=fill)

        match n:
            case UnaryOpNode(operand=operand) | UnaryAssignmentNode(operand=operand):
                dot.edge(node_id, visit(operand), label="operand")
            case BinaryOpNode(left=left, right=right) | AssignmentNode(
                left=left, right=right
            ):
                dot.edge(node_id, visit(left), label="left")
                dot.edge(node_id, visit(right), label="right")
        return node_id

    visit(node)
    return dot


def write_and_render(
    node: ASTNode,
    out_path: str,
    fmt: str = "svg",
    title: Optional[str] = None,
) -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node, title=title)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
