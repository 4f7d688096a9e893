"""Conversion of infix token sequences to postfix order."""

import logging
from typing import Iterable

from .logging import ParseStep
from .logging import VERBOSE
from .tokens import InfixTokens
from .tokens import is_binary_operator
from .tokens import is_quantifier
from .tokens import OPERANDS
from .tokens import PostfixTokens
from .tokens import Token
from .tokens import TokenType

logger = logging.getLogger(__name__)


class Parser:
    """Shunting-yard conversion from infix to postfix.

    Quantifiers are already postfix and go straight to the output.
    `Alternation` and `Concatenation` share one rule: before pushing, pop
    every stacked operator down to the nearest `LeftParen`. There is no
    precedence table, so `a|bc` becomes `a b | c .`.

    Unbalanced parentheses are not reported. A `RightParen` with no
    matching `LeftParen` empties the stack and is dropped, and unmatched
    `LeftParen` tokens are drained into the output at the end.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self.output: list[Token] = []
        self.stack: list[Token] = []

    def _pop(self) -> Token:
        logger.log(VERBOSE, ParseStep.POP_OPERATOR.value)
        return self.stack.pop()

    def _push(self, token: Token) -> None:
        logger.log(VERBOSE, ParseStep.PUSH_OPERATOR.value)
        self.stack.append(token)

    def _close_group(self) -> None:
        while self.stack:
            top = self._pop()
            if top.type is TokenType.LEFT_PAREN:
                logger.log(VERBOSE, ParseStep.DISCARD_PAREN.value)
                return
            self.output.append(top)
        logger.debug("Unmatched right parenthesis")

    def _push_binary_operator(self, token: Token) -> None:
        while self.stack and self.stack[-1].type is not TokenType.LEFT_PAREN:
            self.output.append(self._pop())
        self._push(token)

    def parse(self) -> PostfixTokens:
        self.output = []
        self.stack = []
        for token in self.tokens:
            if token.type in OPERANDS or is_quantifier(token):
                self.output.append(token)
            elif token.type is TokenType.LEFT_PAREN:
                self._push(token)
            elif token.type is TokenType.RIGHT_PAREN:
                self._close_group()
            elif is_binary_operator(token):
                self._push_binary_operator(token)
            else:
                assert False, f"Unknown token: {token}"

        while self.stack:
            self.output.append(self._pop())
        logger.debug("Postfix: %s", self.output)
        return PostfixTokens(list(self.output))


def to_postfix(tokens: InfixTokens) -> PostfixTokens:
    return Parser(tokens).parse()
