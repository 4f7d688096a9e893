"""Utility functions for the project."""

import json
import os
from typing import Iterable, Union

from rpn4py.errors import FileError
from rpn4py.tokens import Token
from rpn4py.tokens import TokenType

METACHARACTERS = frozenset("\\[]|*+?().")

SYMBOLS = {
    TokenType.ALTERNATION: "|",
    TokenType.CONCATENATION: ".",
    TokenType.ZERO_OR_MORE: "*",
    TokenType.ONE_OR_MORE: "+",
    TokenType.ZERO_OR_ONE: "?",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
}


def escape(text: str) -> str:
    return json.dumps(text)


def unescape(text: str) -> str:
    output = json.loads(text)
    if not isinstance(output, str):
        raise ValueError("Invalid text")
    return output


def read_patterns(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        # one "\n" or "\r\n" line ending; a lone "\r" stays in the pattern
        pattern = line[:-1] if line.endswith("\n") else line
        if pattern.endswith("\r"):
            pattern = pattern[:-1]
        if not pattern.strip():
            continue
        yield pattern


def load_patterns(path: Union[os.PathLike[str], str]) -> list[str]:
    try:
        with open(path, "r", encoding="utf-8", newline="") as dataset:
            text = dataset.read()
    except OSError as e:
        raise FileError(f"Cannot read {os.fspath(path)}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise FileError(f"Cannot read {os.fspath(path)}: {e.reason}") from e
    return list(read_patterns(text.split("\n")))


def _literal_to_string(c: str) -> str:
    return f"\\{c}" if c in METACHARACTERS else c


def token_to_string(token: Token) -> str:
    if token.type is TokenType.LITERAL:
        return _literal_to_string(token.value)
    if token.type is TokenType.CHAR_CLASS:
        return f"[{''.join(token.value)}]"
    return SYMBOLS[token.type]


def to_string(tokens: Iterable[Token]) -> str:
    """Compact rendering, e.g. `ab|c.` for the postfix form of `(a|b)c`.
    Not meant to be parsed back."""
    return "".join(token_to_string(token) for token in tokens)
