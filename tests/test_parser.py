import pytest

from exprtree.errors import StructuralError
from exprtree.frontend.ast_expressions import (
    BinaryOp,
    Literal,
    UnaryOp,
    add,
    div,
    lit,
    mul,
    neg,
    sub,
)
from exprtree.frontend.parser import build_tree, parse_expression
from exprtree.frontend.tokens import Token


# ===== Tree Shape =====
def test_single_literal() -> None:
    assert parse_expression("42") == Literal(42)


def test_build_tree_from_tokens() -> None:
    tokens = [Token("lit", 6), Token("/"), Token("lit", 2)]
    assert build_tree(tokens) == div(lit(6), lit(2))


def test_nodes_are_immutable() -> None:
    tree = parse_expression("1+2")
    assert isinstance(tree, BinaryOp)
    with pytest.raises(AttributeError):
        tree.op = "-"  # type: ignore[misc]


# ===== Precedence =====
def test_precedence_mul_before_add() -> None:
    assert parse_expression("1+2*3") == add(lit(1), mul(lit(2), lit(3)))


def test_parentheses_override_precedence() -> None:
    assert parse_expression("(1+2)*3") == mul(add(lit(1), lit(2)), lit(3))


def test_nested_parentheses() -> None:
    assert parse_expression("((4))") == lit(4)


# ===== Associativity =====
def test_subtraction_is_left_associative() -> None:
    assert parse_expression("8-3-2") == sub(sub(lit(8), lit(3)), lit(2))


def test_division_is_left_associative() -> None:
    assert parse_expression("8/4/2") == div(div(lit(8), lit(4)), lit(2))


def test_mixed_same_precedence_is_left_associative() -> None:
    assert parse_expression("2*6/3") == div(mul(lit(2), lit(6)), lit(3))


# ===== Unary Negation =====
def test_negation_binds_tighter_than_addition() -> None:
    assert parse_expression("-3+5") == add(neg(lit(3)), lit(5))


def test_negation_binds_tighter_than_multiplication() -> None:
    assert parse_expression("-3*2") == mul(neg(lit(3)), lit(2))


def test_negation_of_parenthesized_group() -> None:
    assert parse_expression("-(3+5)") == neg(add(lit(3), lit(5)))


def test_negation_as_right_operand() -> None:
    assert parse_expression("2*-3") == mul(lit(2), neg(lit(3)))
    assert parse_expression("3- -4") == sub(lit(3), neg(lit(4)))


def test_double_negation() -> None:
    tree = parse_expression("--3")
    assert tree == UnaryOp("-", UnaryOp("-", Literal(3)))


def test_double_negation_as_right_operand() -> None:
    assert parse_expression("3---4") == sub(lit(3), neg(neg(lit(4))))


def test_sample_expression_shape() -> None:
    assert parse_expression("1+2*(2--3)+8") == add(
        add(lit(1), mul(lit(2), sub(lit(2), neg(lit(3))))),
        lit(8),
    )


# ===== Parentheses Matching =====
def test_unmatched_close_paren_is_tolerated_by_default() -> None:
    assert parse_expression("1+2)*3") == mul(add(lit(1), lit(2)), lit(3))


def test_unmatched_close_paren_is_rejected_when_strict() -> None:
    with pytest.raises(StructuralError, match=r"unmatched '\)'"):
        parse_expression("1+2)", strict=True)


def test_unmatched_open_paren_is_rejected() -> None:
    with pytest.raises(StructuralError, match=r"unmatched '\('"):
        parse_expression("(1+2")


# ===== Structural Errors =====
@pytest.mark.parametrize(
    "source",
    ["+1", "1+", "*", "1 2", "()", "", "-", "(1)(2)"],
)
def test_malformed_input_raises_structural_error(source: str) -> None:
    with pytest.raises(StructuralError):
        parse_expression(source)


def test_missing_operand_message() -> None:
    with pytest.raises(StructuralError, match="missing an operand"):
        parse_expression("+1")


# ===== Long Input =====
def test_long_addition_chain_builds_left_deep_tree() -> None:
    source = "+".join(["1"] * 500)
    assert len(source) == 999

    tree = parse_expression(source)
    depth = 0
    while isinstance(tree, BinaryOp):
        assert tree.right == Literal(1)
        tree = tree.left
        depth += 1

    assert depth == 499
    assert tree == Literal(1)


def test_deep_negation_chain_builds() -> None:
    tree = parse_expression("-" * 1000 + "1")
    depth = 0
    while isinstance(tree, UnaryOp):
        tree = tree.operand
        depth += 1

    assert depth == 1000
    assert tree == Literal(1)
