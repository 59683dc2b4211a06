# Core type aliases for the qbscript interpreter.
# Syntax nodes and runtime values share one representation (Elem), so the
# aliases below are interchangeable; they only document intent at call sites.
#
# Naming guidance:
# - Node:  use in reader/parser code for freshly parsed syntax.
# - Value: use in evaluator/runtime code for evaluated results.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Parsed syntax alias (same representation as values)
Node = Value

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., Value]
