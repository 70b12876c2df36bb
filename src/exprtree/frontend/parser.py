from typing import Callable, Iterable

from ..errors import StackUnderflowError, StructuralError
from ..stack import Stack
from ..writer import IndentingWriter, indented_output
from .ast_expressions import Expression, Literal, add, div, mul, neg, sub
from .lexer import tokenize
from .tokens import Token, TokenKind, is_binary

# Higher binds tighter. "(" has no entry: it is a barrier, never compared.
PRECEDENCES: dict[TokenKind, int] = {
    "*": 1,
    "/": 1,
    "+": 0,
    "-": 0,
    "neg": 2,
}

_binary_builders: dict[TokenKind, Callable[[Expression, Expression], Expression]] = {
    "*": mul,
    "/": div,
    "-": sub,
    "+": add,
}

_unary_builders: dict[TokenKind, Callable[[Expression], Expression]] = {
    "neg": neg,
}


class TreeBuilder:
    """Shunting-yard reduction of a token sequence into one expression tree.

    Completed subtrees wait on the operand stack, pending operators and open
    parentheses on the operator stack. An operator is reduced by popping it
    together with its operands and pushing the resulting node back as an
    operand, so children always exist before their parent.

    A builder handles a single parse; use `build_tree` rather than reusing
    an instance.
    """

    def __init__(self, strict: bool = False, writer: IndentingWriter | None = None) -> None:
        self.strict = strict
        self.writer = writer or IndentingWriter()
        self._operands: Stack[Expression] = Stack(name="operands")
        self._operators: Stack[Token] = Stack(name="operators")

    def feed(self, token: Token) -> None:
        if token.kind == "lit":
            assert token.value is not None
            self._operands.push(Literal(token.value))
        elif token.kind == "neg":
            # Prefix operator: nothing pending can have its right operand yet.
            self._operators.push(token)
        elif is_binary(token):
            self._reduce_while(lambda top: PRECEDENCES[top.kind] >= PRECEDENCES[token.kind])
            self._operators.push(token)
        elif token.kind == "(":
            self._operators.push(token)
        elif token.kind == ")":
            self._reduce_while(lambda top: True)
            if not self._operators.is_empty():
                self._operators.pop()
            elif self.strict:
                raise StructuralError("unmatched ')'")
            else:
                self.writer.debugln("ignoring unmatched ')'")
        else:
            raise TypeError(f"Unsupported token kind: {token.kind!r}")

    def finish(self) -> Expression:
        while not self._operators.is_empty():
            self._reduce(self._operators.pop())

        if self._operands.is_empty():
            raise StructuralError("empty expression")
        result = self._operands.pop()
        if not self._operands.is_empty():
            raise StructuralError(
                f"{len(self._operands) + 1} operands left without an operator between them"
            )
        return result

    def _reduce_while(self, should_reduce: Callable[[Token], bool]) -> None:
        while not self._operators.is_empty():
            top = self._operators.peek()
            if top.kind == "(" or not should_reduce(top):
                return
            self._reduce(self._operators.pop())

    def _reduce(self, operator: Token) -> None:
        if is_binary(operator):
            right = self._operands.pop()
            left = self._operands.pop()
            node = _binary_builders[operator.kind](left, right)
        elif operator.kind in _unary_builders:
            node = _unary_builders[operator.kind](self._operands.pop())
        else:
            raise StructuralError(f"unmatched {operator.kind!r}")

        self._operands.push(node)
        self.writer.debugln(f"reduce {operator}, {len(self._operands)} on the operand stack")


def build_tree(
    tokens: Iterable[Token],
    *,
    strict: bool = False,
    writer: IndentingWriter | None = None,
) -> Expression:
    builder = TreeBuilder(strict=strict, writer=writer)
    try:
        with indented_output(builder.writer):
            for token in tokens:
                builder.feed(token)
            return builder.finish()
    except StackUnderflowError as error:
        raise StructuralError(f"operator is missing an operand ({error})") from error


def parse_expression(
    source: str,
    *,
    strict: bool = False,
    writer: IndentingWriter | None = None,
) -> Expression:
    tokens = tokenize(source, writer=writer)
    return build_tree(tokens, strict=strict, writer=writer)
