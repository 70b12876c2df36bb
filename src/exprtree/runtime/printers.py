"""Text renderings of an expression tree.

Both printers accept `None` and render it as a placeholder, since printing is
used for display and diagnostics rather than computation. The walks keep
their own stacks so that trees deeper than the recursion limit still print.
"""

from typing import Iterator

from ..frontend.ast_expressions import BinaryOp, Expression, Literal, UnaryOp
from ..frontend.tokens import Token, TokenKind
from ..stack import Stack

MISSING = "<NULL>"

_unary_kinds: dict[str, TokenKind] = {"-": "neg"}


def print_infix(expr: Expression | None) -> str:
    if expr is None:
        return MISSING
    return "".join(_infix_parts(expr))


def _infix_parts(expr: Expression) -> Iterator[str]:
    # Items are pushed in reverse of the order they must be emitted.
    pending: Stack[Expression | str] = Stack([expr], name="pending")
    while not pending.is_empty():
        item = pending.pop()
        if isinstance(item, str):
            yield item
        elif isinstance(item, Literal):
            yield str(item.value)
        elif isinstance(item, UnaryOp):
            pending.push(")")
            pending.push(item.operand)
            yield f"{item.op}("
        elif isinstance(item, BinaryOp):
            pending.push(")")
            pending.push(item.right)
            pending.push(f"){item.op}(")
            pending.push(item.left)
            yield "("
        else:
            raise TypeError(f"Unsupported expression type: {type(item).__name__}")


def postfix_tokens(expr: Expression) -> Iterator[Token]:
    """Yield the tree's tokens in reverse-Polish order.

    Negation comes out as a "neg" token, so a consumer can tell it apart from
    binary minus even though both print as "-".
    """
    pending: Stack[tuple[Expression, bool]] = Stack([(expr, False)], name="pending")
    while not pending.is_empty():
        node, ready = pending.pop()
        if isinstance(node, Literal):
            yield Token("lit", node.value)
        elif isinstance(node, UnaryOp):
            if ready:
                yield Token(_unary_kinds[node.op])
            else:
                pending.push((node, True))
                pending.push((node.operand, False))
        elif isinstance(node, BinaryOp):
            if ready:
                yield Token(node.op)
            else:
                pending.push((node, True))
                pending.push((node.right, False))
                pending.push((node.left, False))
        else:
            raise TypeError(f"Unsupported expression type: {type(node).__name__}")


def print_postfix(expr: Expression | None, separator: str = "") -> str:
    if expr is None:
        return MISSING
    return separator.join(_symbol(token) for token in postfix_tokens(expr))


def _symbol(token: Token) -> str:
    if token.kind == "lit":
        return str(token.value)
    if token.kind == "neg":
        return "-"
    return token.kind
