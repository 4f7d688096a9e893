"""Exceptions raised by rpn4py."""


class Error(Exception):
    """Base class of rpn4py exceptions"""


class ParseError(Error):
    """Pattern or token sequence cannot be converted.

    Part of the tokenizer and parser interface. Neither raises it today:
    unterminated classes, dangling escapes and unbalanced parentheses are
    tolerated.
    """

    def __init__(self, message: str):
        super().__init__(message)


class FileError(Error):
    """FileError"""

    def __init__(self, message: str):
        super().__init__(message)
