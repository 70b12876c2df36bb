from functools import lru_cache
from importlib.resources import files

from lark import Lark
from lark import Token as LarkToken
from lark.exceptions import UnexpectedCharacters

from ..errors import LexError
from ..writer import IndentingWriter
from .ast_expressions import INT64_MAX, INT64_MIN
from .tokens import Token, TokenKind, is_operator

_terminal_kinds: dict[str, TokenKind] = {
    "PLUS": "+",
    "MINUS": "-",
    "STAR": "*",
    "SLASH": "/",
    "LPAR": "(",
    "RPAR": ")",
}


def _load_grammar_text() -> str:
    grammar_file = files("exprtree.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_lexer() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr", lexer="basic")


def tokenize(source: str, writer: IndentingWriter | None = None) -> list[Token]:
    try:
        raw_tokens = list(get_lexer().lex(source))
    except UnexpectedCharacters as error:
        raise LexError(
            f"unexpected character {error.char!r} at column {error.column}",
            column=error.column,
        ) from error

    tokens: list[Token] = []
    for raw in raw_tokens:
        previous = tokens[-1] if tokens else None
        if previous is not None and previous.kind == "neg" and _is_int64_min_magnitude(raw):
            # 2**63 only fits once negated, so the sign folds into the literal.
            tokens[-1] = Token("lit", INT64_MIN)
            continue
        tokens.append(_classify(raw, previous))

    if writer is not None:
        writer.debugln("tokens: " + " ".join(str(token) for token in tokens))
    return tokens


def _is_int64_min_magnitude(raw: LarkToken) -> bool:
    return raw.type == "INT" and int(str(raw)) == -INT64_MIN


def _classify(raw: LarkToken, previous: Token | None) -> Token:
    if raw.type == "INT":
        value = int(str(raw))
        if value > INT64_MAX:
            raise LexError(
                f"integer literal {raw} at column {raw.column} does not fit in 64 bits",
                column=raw.column,
            )
        return Token("lit", value)

    kind = _terminal_kinds[raw.type]
    # A minus with nothing to its left is a negation.
    if kind == "-" and (previous is None or previous.kind == "(" or is_operator(previous)):
        return Token("neg")
    return Token(kind)
