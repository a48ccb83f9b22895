"""Runs one of the bundled parsers over candidate strings, one per line.

    python -m pycombinator [--debug] [--all] <format> [FILE ...]

Each line of output is either `ok<TAB><value as JSON><TAB><rest as JSON>` or
`err<TAB><message>`. Reads stdin when no FILE (or `-`) is given.
"""
import argparse
import dataclasses
import gzip
import json
import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import IO, Any, Iterator, Optional

from tqdm import tqdm

from pycombinator import parser_combinators
from pycombinator.formats import PARSERS
from pycombinator.parser_combinators import Parser, Result, ResultKind, all_consuming

log = logging.getLogger("pycombinator")


@dataclass
class Context:
    format_name: str
    filenames: list[str] = field(default_factory=lambda: ["-"])
    debug: bool = False
    all_consuming: bool = False

    @property
    def parser(self) -> Parser[str, Any]:
        parser = PARSERS[self.format_name]
        if self.all_consuming:
            return all_consuming(parser)
        return parser


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="python -m pycombinator",
        description="Run one of the bundled parsers over candidate strings, one per line.",
    )
    ap.add_argument("--debug", action="store_true", help="log every named parser invocation")
    ap.add_argument("--all", dest="all_consuming", action="store_true", help="require the whole line to match")
    ap.add_argument("format", choices=list(PARSERS))
    ap.add_argument("files", nargs="*", default=["-"], help="input files, - or none for stdin, .gz is decompressed")
    return ap


def parse_args(argv: list[str]) -> Context:
    args = build_arg_parser().parse_args(argv)
    return Context(
        format_name=args.format,
        filenames=args.files,
        debug=args.debug or os.environ.get("PYCOMBINATOR_DEBUG", "") not in ("", "0"),
        all_consuming=args.all_consuming,
    )


@contextmanager
def open_input(filename: str) -> Iterator[IO[str]]:
    if filename == "-":
        yield sys.stdin
    elif filename.endswith(".gz"):
        with gzip.open(filename, "rt", encoding="utf-8") as fp:
            yield fp
    else:
        with open(filename, "r", encoding="utf-8") as fp:
            yield fp


def encode_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render(res: Result[Any]) -> str:
    if res.kind is ResultKind.ERR:
        return f"err\t{res.msg}"
    return f"ok\t{json.dumps(res.val, default=encode_value)}\t{json.dumps(res.rest)}"


def main(argv: Optional[list[str]] = None) -> int:
    ctx = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if ctx.debug else logging.WARNING)
    parser = ctx.parser
    n_lines = 0
    n_failed = 0
    prev_debug = parser_combinators.debug
    parser_combinators.debug = ctx.debug
    try:
        for filename in ctx.filenames:
            with open_input(filename) as fp:
                for line in tqdm(fp, desc=filename, unit="line", disable=None):
                    res = parser(line.rstrip("\r\n"))
                    print(render(res))
                    n_lines += 1
                    if res.kind is ResultKind.ERR:
                        n_failed += 1
    finally:
        parser_combinators.debug = prev_debug
    if n_failed > 0:
        log.warning("%d of %d lines failed to parse as %s", n_failed, n_lines, ctx.format_name)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
