from .errors import (
    DivisionByZeroError,
    EmptyInputError,
    EvalError,
    ExpressionError,
    IntegerOverflowError,
    LexError,
    ParseError,
    StructuralError,
)
from .frontend.ast_expressions import BinaryOp, Expression, Literal, UnaryOp
from .frontend.lexer import tokenize
from .frontend.parser import build_tree, parse_expression
from .runtime.evaluator import eval_expr
from .runtime.interpreter import Evaluation, run, run_for_cli
from .runtime.printers import print_infix, print_postfix, postfix_tokens

__all__ = [
    "BinaryOp",
    "DivisionByZeroError",
    "EmptyInputError",
    "EvalError",
    "Evaluation",
    "Expression",
    "ExpressionError",
    "IntegerOverflowError",
    "LexError",
    "Literal",
    "ParseError",
    "StructuralError",
    "UnaryOp",
    "build_tree",
    "eval_expr",
    "parse_expression",
    "postfix_tokens",
    "print_infix",
    "print_postfix",
    "run",
    "run_for_cli",
    "tokenize",
]
