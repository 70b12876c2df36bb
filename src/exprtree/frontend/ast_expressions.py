from dataclasses import dataclass
from typing import Literal as TypingLiteral

BinaryOperator = TypingLiteral["+", "-", "*", "/"]
UnaryOperator = TypingLiteral["-"]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Literal(Expression):
    value: int


@dataclass(frozen=True, slots=True)
class UnaryOp(Expression):
    op: UnaryOperator
    operand: Expression


@dataclass(frozen=True, slots=True)
class BinaryOp(Expression):
    op: BinaryOperator
    left: Expression
    right: Expression


def lit(value: int) -> Literal:
    return Literal(value)


def neg(operand: Expression) -> UnaryOp:
    return UnaryOp("-", operand)


def add(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp("+", left, right)


def sub(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp("-", left, right)


def mul(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp("*", left, right)


def div(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp("/", left, right)
