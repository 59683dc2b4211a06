import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from qbscript.config import get_prelude_files
from qbscript.evaluation.evaluator import evaluate
from qbscript.reader.parser import parse_all
from qbscript.types.elem import Elem
from qbscript.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A session over one Environment.
    Each top-level form is read and evaluated to completion before the next
    one is read, so a `let` is visible to every later form.
    """
    def __init__(self, prelude: str | None = None):
        self.env = Environment()

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of qbscript code without keeping the results."""
        for expr in parse_all(code):
            evaluate(expr, self.env)

    def load_prelude(self, paths: Iterable[Path] | None = None) -> list[Path]:
        """Evaluate prelude scripts, by default the configured ones. Returns the files loaded."""
        files = list(get_prelude_files() if paths is None else paths)
        for path in files:
            logger.info("loading prelude %s", path)
            self.eval_prelude(Path(path).read_text(encoding="utf-8"))
        return files

    def iter_eval(self, code: str):
        """Yield the value of each top-level form in `code` as it is evaluated."""
        for expr in parse_all(code):
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> list[Elem]:
        """Evaluate every top-level form in `code` and return all the values."""
        return list(self.iter_eval(code))

    def eval_and_print(self, code: str, out: TextIO | None = None) -> int:
        """Print the value of each form on its own line. Returns the number printed."""
        out = out if out is not None else sys.stdout
        count = 0
        for value in self.iter_eval(code):
            print(value, file=out)
            count += 1
        return count


#  Example use-age:
if __name__ == "__main__":
    program = """
        (let x 7)
        (let double (fun [n] (add n n)))
        (double x)
        (let reverse (fun [l] (if (not l)
            ()
            (append (reverse (tail l)) (head l)))))
        (reverse [A B C D E F G])
        (let dec (fun [n] (add n -1)))
        (let iota (fun [n] (if (gt n 0) (append (iota (dec n)) n) n)))
        (iota 10)
    """
    Interpreter().eval_and_print(program)
