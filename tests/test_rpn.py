import random

import pytest

from ast_nodes import *
from rpn import RPNError, evaluate_rpn, parse_rpn
from tests.utils import parse_text


def test_rpn_arithmetic(symbols):
    assert evaluate_rpn("1 2 +", symbols) == 3
    assert evaluate_rpn("2 3 4 * +", symbols) == 14
    assert evaluate_rpn("5 ~", symbols) == -5
    assert evaluate_rpn("-3 2 *", symbols) == -6
    assert evaluate_rpn("-7 2 /", symbols) == -3


def test_rpn_assignment_and_variables(symbols):
    assert evaluate_rpn("x 5 = x 2 * +", symbols) == 15
    assert symbols.find("x") == 5
    assert evaluate_rpn("x 3 +=", symbols) == 8


def test_rpn_increments_are_disambiguated(symbols):
    symbols.add("x", 1)
    assert evaluate_rpn("x +++", symbols) == 1
    assert symbols.find("x") == 2
    assert evaluate_rpn("x ++", symbols) == 3
    assert evaluate_rpn("x ---", symbols) == 3
    assert evaluate_rpn("x --", symbols) == 1


def test_rpn_builds_the_same_nodes():
    assert parse_rpn("a ~ b +++ +") == BinaryOpNode(
        type=NodeType.ADD,
        left=UnaryOpNode(type=NodeType.NEGATE, operand=VariableNode(name="a")),
        right=UnaryAssignmentNode(
            type=NodeType.POST_INCREMENT, operand=VariableNode(name="b")
        ),
    )


def test_rpn_assignment_needs_a_variable():
    with pytest.raises(NotAVariable):
        parse_rpn("3 4 =")
    with pytest.raises(NotAVariable):
        parse_rpn("1 2 + +++")


@pytest.mark.parametrize("src", ["", "   ", "1 +", "~", "1 2", "a b c ="])
def test_malformed_rpn(src):
    with pytest.raises(RPNError):
        parse_rpn(src)


@pytest.mark.parametrize(
    "src",
    [
        "1 + 2 * 3",
        "(a - b) * (a + b)",
        "a / b % 7 - 100",
        "-a * -(b - 3)",
        "x = a * 2 + b",
        "b += a++ - --c",
    ],
)
def test_format_reads_back_through_rpn(src, symbols):
    for name, value in (("a", 9), ("b", 4), ("c", 2)):
        symbols.add(name, value)

    tree = parse_text(src)
    text = tree.format()
    assert parse_rpn(text) == _without_positions(tree)
    assert parse_rpn(text).format() == text


def _without_positions(node):
    # Nodes read back from RPN carry no source position.
    node.position = 0
    for child in ("operand", "left", "right"):
        if hasattr(node, child):
            _without_positions(getattr(node, child))
    return node


def _random_tree(rng, depth):
    if depth == 0 or rng.random() < 0.25:
        if rng.random() < 0.5:
            return NumberNode(value=rng.randint(-20, 20))
        return VariableNode(name=rng.choice("abc"))

    op = rng.choice(sorted(ARITHMETIC_OPERATORS, key=lambda t: t.value))
    left = _random_tree(rng, depth - 1)
    if op in (NodeType.DIVIDE, NodeType.MOD):
        right = NumberNode(value=rng.randint(1, 9))
    else:
        right = _random_tree(rng, depth - 1)
    return make_binary(op, left, right)


def test_random_trees_round_trip(symbols):
    for name, value in (("a", -13), ("b", 5), ("c", 21)):
        symbols.add(name, value)

    rng = random.Random(1234)
    for _ in range(200):
        tree = _random_tree(rng, 5)
        assert evaluate_rpn(tree.format(), symbols) == tree.evaluate(symbols)
