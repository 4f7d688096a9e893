"""Infix regular expressions to postfix (Reverse Polish) token sequences."""

from .errors import Error
from .errors import FileError
from .errors import ParseError
from .parser import Parser
from .parser import to_postfix
from .tokenizer import tokenize
from .tokenizer import Tokenizer
from .tokens import InfixTokens
from .tokens import PostfixTokens
from .tokens import Token
from .tokens import TokenType


def convert(pattern: str) -> PostfixTokens:
    return to_postfix(tokenize(pattern))


__all__ = [
    "Error",
    "FileError",
    "InfixTokens",
    "ParseError",
    "Parser",
    "PostfixTokens",
    "Token",
    "TokenType",
    "Tokenizer",
    "convert",
    "to_postfix",
    "tokenize",
]
