# Core type aliases for the malt data model.
# Source text is read into `Node` trees (malt.types.node) and every stage of the
# pipeline hands back a `Result` (malt.types.result) instead of raising.
#
# Naming guidance:
# - EvaluatorFn: the evaluator signature passed into special forms so they can
#   recurse without importing the evaluator module (avoids import cycles).

from typing import Any, Callable

__version__ = "0.1.0"

# Evaluator function type: (Node, Environment) -> Result[Node]
EvaluatorFn = Callable[..., Any]
