from timeit import timeit

from qbscript.interpreter import Interpreter
from qbscript.types.atom import Number, Symbol
from qbscript.types.elem import Atom
from qbscript.types.environment import Environment

# Helpers to parse once and time evaluation only
from qbscript.reader.parser import parse
from qbscript.evaluation.evaluator import evaluate


def _parse_one(code: str):
    _, expr = parse(code)
    return expr


def time_interpreter(code: str, rounds: int, setup: str = "") -> float:
    """Time the evaluator (no parsing). Parses once and repeatedly evaluates
    the same node in one session.
    """
    itp = Interpreter(prelude=setup or None)
    expr = _parse_one(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Environment benchmark: every procedure call snapshots the caller's bindings

def bench_snapshot(n_bindings: int = 1000, n_snapshots: int = 10000) -> float:
    env = Environment()
    for i in range(n_bindings):
        env.define(Symbol(f"v{i}"), Atom(Number(i)))
    # Warmup
    for _ in range(100):
        env.snapshot()
    return timeit(env.snapshot, number=n_snapshots)


FUN_APPLY_CODE = "((fun [x y] (add x y)) 1 2)"

TRI_SETUP = "(let tri (fun [n] (if (gt n 0) (add n (tri (add n -1))) (0))))"
TRI_CODE = "(tri 50)"

IOTA_SETUP = """
(let dec (fun [n] (add n -1)))
(let iota (fun [n] (if (gt n 0) (append (iota (dec n)) n) n)))
"""
IOTA_CODE = "(iota 50)"

REVERSE_SETUP = """
(let reverse (fun [l] (if (not l)
    ()
    (append (reverse (tail l)) (head l)))))
"""
REVERSE_CODE = "(reverse [a b c d e f g h i j k l m n o p q r s t])"


def _print_timing(name: str, code: str, rounds: int, setup: str = "") -> None:
    t = time_interpreter(code, rounds, setup)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment snapshot (1000 bindings)")
    print(f"  time: {bench_snapshot():.6f}s")

    _print_timing("fun application", FUN_APPLY_CODE, rounds=20000)
    _print_timing("recursive sum (tri 50)", TRI_CODE, rounds=200, setup=TRI_SETUP)
    _print_timing("iota 50", IOTA_CODE, rounds=200, setup=IOTA_SETUP)
    _print_timing("reverse 20 items", REVERSE_CODE, rounds=500, setup=REVERSE_SETUP)
