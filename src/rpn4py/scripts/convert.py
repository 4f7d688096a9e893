"""Print the postfix form of each pattern in a text file"""

import logging
import os
import sys
from typing import Optional

from rpn4py.errors import FileError
from rpn4py.parser import to_postfix
from rpn4py.tokenizer import tokenize
from rpn4py.utils import load_patterns

logger = logging.getLogger(__name__)


def format_tokens(tokens: list) -> str:
    return f"[{', '.join(repr(token) for token in tokens)}]"


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    if len(argv) != 2:
        prog = os.path.basename(argv[0]) if argv else "rpn4py"
        print(f"Usage: {prog} <file.txt>")
        return 0

    try:
        patterns = load_patterns(argv[1])
    except FileError as e:
        logger.error(str(e))
        return 1

    for pattern in patterns:
        print(f"Input: {pattern}")
        postfix = to_postfix(tokenize(pattern))
        print(f"Postfix: {format_tokens(postfix)}")
        print()
    return 0


def run() -> None:
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    sys.exit(main())


if __name__ == "__main__":
    run()
