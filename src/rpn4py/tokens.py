"""Tokens of infix and postfix regular expressions."""

from enum import Enum
from typing import Iterable, NamedTuple, NewType, Optional, Union


class StrEnum(str, Enum):
    pass


class TokenType(StrEnum):
    LITERAL = "Literal"
    CHAR_CLASS = "CharClass"
    ALTERNATION = "Alternation"
    CONCATENATION = "Concatenation"
    ZERO_OR_MORE = "ZeroOrMore"
    ONE_OR_MORE = "OneOrMore"
    ZERO_OR_ONE = "ZeroOrOne"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"


class Token(NamedTuple):
    """A token. `value` is a character for literals, a tuple of characters for
    character classes and None for operators and delimiters."""

    type: TokenType
    value: Union[str, tuple[str, ...], None] = None

    def __repr__(self) -> str:
        if self.type is TokenType.LITERAL:
            return f"{self.type.value}({self.value!r})"
        if self.type is TokenType.CHAR_CLASS:
            return f"{self.type.value}({list(self.value)!r})"
        return self.type.value


InfixTokens = NewType("InfixTokens", list[Token])
PostfixTokens = NewType("PostfixTokens", list[Token])

ALTERNATION = Token(TokenType.ALTERNATION)
CONCATENATION = Token(TokenType.CONCATENATION)
ZERO_OR_MORE = Token(TokenType.ZERO_OR_MORE)
ONE_OR_MORE = Token(TokenType.ONE_OR_MORE)
ZERO_OR_ONE = Token(TokenType.ZERO_OR_ONE)
LEFT_PAREN = Token(TokenType.LEFT_PAREN)
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN)

QUANTIFIERS = {
    TokenType.ZERO_OR_MORE,
    TokenType.ONE_OR_MORE,
    TokenType.ZERO_OR_ONE,
}
BINARY_OPERATORS = {TokenType.ALTERNATION, TokenType.CONCATENATION}
OPERANDS = {TokenType.LITERAL, TokenType.CHAR_CLASS}

OPERATOR_SYMBOLS: dict[str, Token] = {
    "|": ALTERNATION,
    "*": ZERO_OR_MORE,
    "+": ONE_OR_MORE,
    "?": ZERO_OR_ONE,
    "(": LEFT_PAREN,
    ")": RIGHT_PAREN,
}


def literal(c: str) -> Token:
    assert len(c) == 1, c
    return Token(TokenType.LITERAL, c)


def char_class(chars: Iterable[str]) -> Token:
    return Token(TokenType.CHAR_CLASS, tuple(chars))


def operator(symbol: str) -> Optional[Token]:
    return OPERATOR_SYMBOLS.get(symbol)


def is_quantifier(token: Token) -> bool:
    return token.type in QUANTIFIERS


def is_binary_operator(token: Token) -> bool:
    return token.type in BINARY_OPERATORS


def is_operand_end(token: Token) -> bool:
    """True if `token` can be the last token of an operand."""
    return (
        token.type in OPERANDS
        or token.type in QUANTIFIERS
        or token.type is TokenType.RIGHT_PAREN
    )


def is_operand_start(token: Token) -> bool:
    """True if `token` can be the first token of an operand."""
    return token.type in OPERANDS or token.type is TokenType.LEFT_PAREN


__all__ = [
    "ALTERNATION",
    "BINARY_OPERATORS",
    "CONCATENATION",
    "InfixTokens",
    "LEFT_PAREN",
    "ONE_OR_MORE",
    "OPERANDS",
    "OPERATOR_SYMBOLS",
    "PostfixTokens",
    "QUANTIFIERS",
    "RIGHT_PAREN",
    "StrEnum",
    "Token",
    "TokenType",
    "ZERO_OR_MORE",
    "ZERO_OR_ONE",
    "char_class",
    "is_binary_operator",
    "is_operand_end",
    "is_operand_start",
    "is_quantifier",
    "literal",
    "operator",
]
