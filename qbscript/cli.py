"""
Command-line driver for qbscript.

    qbscript [--prelude] [-e CODE] [FILE ...]

Evaluates each source in order in one session and prints the value of every
top-level form. With no FILE and no -e, reads standard input ("-" also means
standard input). A syntax or arity error stops the run with status 1.

The session runs on a worker thread with a large stack and a raised recursion
limit (see qbscript.config), so recursive programs can nest deeply.
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import Callable, Sequence

from qbscript.config import get_log_level, get_recursion_limit, get_stack_size
from qbscript.errors import QbArityError, QbSyntaxError
from qbscript.interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qbscript", description="Run qbscript programs.")
    parser.add_argument("files", nargs="*", help="source files to run; '-' reads standard input")
    parser.add_argument("-e", "--eval", dest="code", action="append", default=[],
                        help="evaluate CODE (may be repeated)")
    parser.add_argument("--prelude", action="store_true",
                        help="load the prelude scripts before running")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $QBSCRIPT_LOG_LEVEL or WARNING)")
    return parser


def _read_source(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    with open(name, encoding="utf-8") as fh:
        return fh.read()


def run_deep(fn: Callable[[], int], recursion_limit: int, stack_size: int) -> int:
    """Run `fn` on a worker thread with a large stack and recursion limit.

    The previous recursion limit is restored afterwards. An exception raised
    by `fn` is re-raised in the calling thread.
    """
    outcome: dict[str, object] = {}

    def target() -> None:
        try:
            outcome["status"] = fn()
        except BaseException as ex:
            outcome["error"] = ex

    previous_limit = sys.getrecursionlimit()
    previous_stack = threading.stack_size(stack_size)
    try:
        sys.setrecursionlimit(max(recursion_limit, previous_limit))
        worker = threading.Thread(target=target, name="qbscript-run")
        worker.start()
        worker.join()
    finally:
        threading.stack_size(previous_stack)
        sys.setrecursionlimit(previous_limit)

    if "error" in outcome:
        raise outcome["error"]
    return outcome["status"]


def _run(args: argparse.Namespace) -> int:
    interp = Interpreter()
    if args.prelude:
        interp.load_prelude()

    sources: list[tuple[str, str]] = [("<eval>", code) for code in args.code]
    files = args.files if (args.files or args.code) else ["-"]
    try:
        sources.extend((name, _read_source(name)) for name in files)
    except OSError as ex:
        print(f"qbscript: {ex}", file=sys.stderr)
        return 1

    for name, code in sources:
        logger.debug("running %s", name)
        try:
            interp.eval_and_print(code)
        except QbSyntaxError as ex:
            print(f"{name}: syntax error: {ex}", file=sys.stderr)
            return 1
        except QbArityError as ex:
            print(f"{name}: arity error: {ex}", file=sys.stderr)
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = (args.log_level or get_log_level()).upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"qbscript: unknown log level {level!r}", file=sys.stderr)
        return 1
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return run_deep(lambda: _run(args), get_recursion_limit(), get_stack_size())


if __name__ == "__main__":
    sys.exit(main())
