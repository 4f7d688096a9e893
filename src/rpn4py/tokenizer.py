"""Tokenizer of infix regular expressions."""

import logging

from .logging import ParseStep
from .logging import VERBOSE
from .tokens import char_class
from .tokens import CONCATENATION
from .tokens import InfixTokens
from .tokens import is_operand_end
from .tokens import is_operand_start
from .tokens import literal
from .tokens import operator
from .tokens import Token

logger = logging.getLogger(__name__)


class Tokenizer:
    """Scan a pattern into infix tokens.

    Juxtaposition has no written operator, so `Concatenation` tokens are
    inserted between adjacent operands after scanning. Malformed input is
    tolerated: a trailing backslash is dropped and a character class that
    is never closed takes the rest of the pattern.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.pos = 0

    def _emit(self, tokens: list[Token], token: Token) -> None:
        logger.log(VERBOSE, ParseStep.EMIT_TOKEN.value)
        tokens.append(token)

    def _scan_char_class(self) -> Token:
        # self.pos is on the opening bracket
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(self.pattern) and self.pattern[self.pos] != "]":
            chars.append(self.pattern[self.pos])
            self.pos += 1
        if self.pos == len(self.pattern):
            logger.debug("Unterminated character class in %r", self.pattern)
        return char_class(chars)

    def scan(self) -> list[Token]:
        """Raw tokens, without concatenation."""
        tokens: list[Token] = []
        while self.pos < len(self.pattern):
            c = self.pattern[self.pos]
            if c == "\\":
                self.pos += 1
                if self.pos < len(self.pattern):
                    self._emit(tokens, literal(self.pattern[self.pos]))
                else:
                    logger.debug("Dangling escape in %r", self.pattern)
            elif c == "[":
                self._emit(tokens, self._scan_char_class())
            else:
                token = operator(c)
                self._emit(tokens, token if token is not None else literal(c))
            self.pos += 1
        return tokens

    def tokenize(self) -> InfixTokens:
        tokens = self.scan()
        result: list[Token] = []
        for i, token in enumerate(tokens):
            if i > 0 and needs_concatenation(tokens[i - 1], token):
                logger.log(VERBOSE, ParseStep.INSERT_CONCATENATION.value)
                result.append(CONCATENATION)
            result.append(token)
        logger.debug("Tokens of %r: %s", self.pattern, result)
        return InfixTokens(result)


def needs_concatenation(prev: Token, curr: Token) -> bool:
    return is_operand_end(prev) and is_operand_start(curr)


def tokenize(pattern: str) -> InfixTokens:
    return Tokenizer(pattern).tokenize()
