from typing import Iterable, TextIO

from exprtree.frontend.tokens import Token
from exprtree.runtime.evaluator import truncating_div


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output


def evaluate_rpn(tokens: Iterable[Token]) -> int:
    """A reverse-Polish evaluator that knows nothing about trees."""
    values: list[int] = []
    for token in tokens:
        if token.kind == "lit":
            assert token.value is not None
            values.append(token.value)
        elif token.kind == "neg":
            values.append(-values.pop())
        else:
            right = values.pop()
            left = values.pop()
            if token.kind == "+":
                values.append(left + right)
            elif token.kind == "-":
                values.append(left - right)
            elif token.kind == "*":
                values.append(left * right)
            else:
                values.append(truncating_div(left, right))
    [result] = values
    return result
