from dataclasses import dataclass
from typing import Literal as TypingLiteral

TokenKind = TypingLiteral["lit", "+", "-", "*", "/", "neg", "(", ")"]

BINARY_KINDS: frozenset[TokenKind] = frozenset({"+", "-", "*", "/"})


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: int | None = None

    def __str__(self) -> str:
        if self.kind == "lit":
            return f"lit({self.value})"
        return self.kind


def is_binary(token: Token) -> bool:
    return token.kind in BINARY_KINDS


def is_operator(token: Token) -> bool:
    return token.kind in BINARY_KINDS or token.kind == "neg"
