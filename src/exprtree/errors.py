class ExpressionError(Exception):
    """Base class for every failure while handling one expression."""


class EmptyInputError(ExpressionError, ValueError):
    """Raised when the input line is empty after trimming."""


class LexError(ExpressionError, ValueError):
    """Raised when the input contains a character no token matches."""

    def __init__(self, message: str, column: int | None = None) -> None:
        super().__init__(message)
        self.column = column


class ParseError(ExpressionError, ValueError):
    """Raised when a token sequence does not form an expression."""


class StructuralError(ParseError):
    """The operand and operator stacks did not reduce to exactly one tree."""


class EvalError(ExpressionError, ArithmeticError):
    """Raised when a tree cannot be evaluated."""


class DivisionByZeroError(EvalError, ZeroDivisionError):
    """The right operand of a division evaluated to zero."""


class IntegerOverflowError(EvalError, OverflowError):
    """A result does not fit in a signed 64-bit integer."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""
