import operator
from typing import Callable

from ..errors import DivisionByZeroError, EvalError, IntegerOverflowError
from ..frontend.ast_expressions import (
    INT64_MAX,
    INT64_MIN,
    BinaryOp,
    BinaryOperator,
    Expression,
    Literal,
    UnaryOp,
)
from ..stack import Stack
from ..writer import indented_output
from .core import RuntimeContext


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero, as C does."""
    if right == 0:
        raise DivisionByZeroError(f"division by zero in {left} / {right}")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_binary_ops: dict[BinaryOperator, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncating_div,
}


def eval_expr(expr: Expression | None, context: RuntimeContext | None = None) -> int:
    if expr is None:
        raise EvalError("cannot evaluate a missing expression")

    context = context or RuntimeContext()
    with indented_output(context.writer):
        return _eval(expr, context)


def _eval(expr: Expression, context: RuntimeContext) -> int:
    # Post-order walk on explicit stacks; the tree can be deeper than the
    # interpreter's recursion limit. A node is pushed again, marked ready,
    # once its children are scheduled.
    pending: Stack[tuple[Expression, bool]] = Stack([(expr, False)], name="pending")
    values: Stack[int] = Stack(name="values")

    while not pending.is_empty():
        node, ready = pending.pop()

        if isinstance(node, Literal):
            values.push(node.value)

        elif isinstance(node, UnaryOp):
            if not ready:
                pending.push((node, True))
                pending.push((node.operand, False))
                continue
            value = values.pop()
            result = _check_range(-value, f"-({value})")
            context.writer.debugln(f"[-({value}) => {result}]")
            values.push(result)

        elif isinstance(node, BinaryOp):
            if not ready:
                pending.push((node, True))
                pending.push((node.right, False))
                pending.push((node.left, False))
                continue
            right_value = values.pop()
            left_value = values.pop()
            description = f"({left_value}) {node.op} ({right_value})"
            result = _check_range(_binary_ops[node.op](left_value, right_value), description)
            context.writer.debugln(f"[{description} => {result}]")
            values.push(result)

        else:
            raise TypeError(f"Unsupported expression type: {type(node).__name__}")

    return values.pop()


def _check_range(value: int, description: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise IntegerOverflowError(f"{description} overflows a 64-bit integer")
    return value
