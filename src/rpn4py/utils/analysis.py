"""Step counts and output records of the conversion pipeline."""

from collections import defaultdict as dd
import io
import logging
from typing import TypedDict

from rpn4py.logging import VERBOSE
from rpn4py.parser import to_postfix
from rpn4py.tokenizer import tokenize
from rpn4py.tokens import InfixTokens
from rpn4py.tokens import PostfixTokens
from rpn4py.utils import to_string


class PostfixRecord(TypedDict):
    pattern: str
    infix: list[str]
    postfix: list[str]
    rendered: str


class VerboseFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == VERBOSE


def to_record(
    pattern: str, infix: InfixTokens, postfix: PostfixTokens
) -> PostfixRecord:
    return {
        "pattern": pattern,
        "infix": [repr(token) for token in infix],
        "postfix": [repr(token) for token in postfix],
        "rendered": to_string(postfix),
    }


def collect_step_counts(pattern: str) -> dict[str, int]:
    """Convert `pattern` and count the logged steps by name."""
    loggers = [
        logging.getLogger(name) for name in ("rpn4py.tokenizer", "rpn4py.parser")
    ]
    configs = [
        (logger.level, logger.handlers.copy(), logger.propagate)
        for logger in loggers
    ]
    stream = io.StringIO()
    handler: logging.Handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.addFilter(VerboseFilter())

    for logger in loggers:
        logger.setLevel(VERBOSE)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False

    try:
        to_postfix(tokenize(pattern))
    finally:
        for logger, (level, handlers, propagate) in zip(loggers, configs):
            logger.setLevel(level)
            logger.handlers.clear()
            logger.handlers.extend(handlers)
            logger.propagate = propagate

    step_counts: dd[str, int] = dd(int)
    for line in stream.getvalue().splitlines():
        step_counts[line] += 1
    return dict(step_counts)
