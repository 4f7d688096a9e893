"""Convert JSON-escaped patterns (jsonl) to postfix records (jsonl)"""

import argparse
import json
import logging
import os
import sys
from typing import Optional, TextIO

from tqdm import tqdm

from rpn4py.errors import FileError
from rpn4py.parser import to_postfix
from rpn4py.tokenizer import tokenize
from rpn4py.utils import unescape
from rpn4py.utils.analysis import to_record

logger = logging.getLogger(__name__)


def convert_lines(
    lines: list[str],
    output: TextIO,
    progress: bool = False,
    empty_line_on_error: bool = False,
) -> int:
    """Write one record per line and return the number of failed lines."""
    failed = 0
    for i, entry in enumerate(
        tqdm(lines, disable=not progress, file=sys.stderr), start=1
    ):
        if not entry.strip():
            continue
        try:
            pattern = unescape(entry)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("Line %d, %s", i, e)
            failed += 1
            if empty_line_on_error:
                print(file=output, flush=True)
            continue

        infix = tokenize(pattern)
        postfix = to_postfix(infix)
        print(json.dumps(to_record(pattern, infix, postfix)), file=output, flush=True)
    return failed


def read_lines(path: Optional[str]) -> list[str]:
    if path is None:
        return list(sys.stdin)
    try:
        with open(path, "r", encoding="utf-8") as input_file:
            return list(input_file)
    except OSError as e:
        raise FileError(f"Cannot read {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise FileError(f"Cannot read {path}: {e.reason}") from e


def main(parsed_args: argparse.Namespace) -> int:
    try:
        lines = read_lines(parsed_args.input)
    except FileError as e:
        logger.error(str(e))
        return 1
    convert_lines(
        lines,
        sys.stdout,
        progress=parsed_args.progress,
        empty_line_on_error=parsed_args.empty_line_on_error,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="jsonl file with one JSON string per line (default: stdin)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show a progress bar on stderr",
    )
    parser.add_argument(
        "--empty-line-on-error",
        action="store_true",
        help="print an empty line for invalid lines",
    )
    return parser


def run() -> None:
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    run()
