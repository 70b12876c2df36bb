import sys
from dataclasses import dataclass
from typing import TextIO

from ..errors import EmptyInputError, EvalError, LexError, ParseError
from ..frontend.ast_expressions import Expression
from ..frontend.lexer import tokenize
from ..frontend.parser import build_tree
from .core import RuntimeContext
from .evaluator import eval_expr
from .printers import print_infix, print_postfix


@dataclass(frozen=True)
class Evaluation:
    source: str
    tree: Expression
    value: int

    @property
    def infix(self) -> str:
        return print_infix(self.tree)

    @property
    def postfix(self) -> str:
        return print_postfix(self.tree)

    def report(self) -> str:
        return (
            f"{self.infix}\n"
            "\n"
            f"{self.source} = {self.value}\n"
            f"{self.postfix} = {self.value}\n"
        )


def read_expression(line: str) -> str:
    """Strip one trailing line terminator; reject what is left if blank."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    if not line.strip():
        raise EmptyInputError("input is empty")
    return line


def run(source: str, context: RuntimeContext | None = None) -> Evaluation:
    context = context or RuntimeContext()
    expression = read_expression(source)
    tokens = tokenize(expression, writer=context.writer)
    tree = build_tree(tokens, strict=context.strict, writer=context.writer)
    return Evaluation(source=expression, tree=tree, value=eval_expr(tree, context))


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> Evaluation | None:
    stream = stderr if stderr is not None else sys.stderr
    context = context or RuntimeContext()

    try:
        evaluation = run(source, context)
    except EmptyInputError as error:
        print(f"Input error: {error}", file=stream)
        return None
    except LexError as error:
        print(f"Lex error: {error}", file=stream)
        return None
    except ParseError as error:
        print(f"Syntax error: {error}", file=stream)
        return None
    except EvalError as error:
        print(f"Runtime error: {error}", file=stream)
        return None

    context.writer.print(evaluation.report())
    return evaluation
