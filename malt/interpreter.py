from __future__ import annotations

import logging
from typing import Optional

from malt.builtin.env_builtin import register
from malt.evaluation.evaluator import evaluate
from malt.printer import pr_str
from malt.reader.parser import read_str
from malt.types.environment import Environment
from malt.types.errors import MaltEmptyInput, MaltRecursionError
from malt.types.node import Node
from malt.types.result import Result

logger = logging.getLogger(__name__)

NESTING_TOO_DEEP = "maximum nesting depth exceeded"


class Interpreter:
    """
    Reads and evaluates malt code one line at a time.
    Keeps a root Environment (with the builtins installed) across calls, so
    definitions made by one line are visible to the next.
    """

    def __init__(self):
        self.env: Environment = Environment()
        register(self.env)

    def eval(self, code: str) -> Result[Node]:
        parsed = read_str(code)
        if parsed.is_error:
            logger.debug("read failed: %s", parsed.message)
            return parsed
        try:
            return evaluate(parsed.value, self.env)
        except RecursionError:
            # Reading is iterative, evaluation is not: deep forms hit the
            # Python frame limit here. Any let* frames were released on the way out.
            logger.debug("evaluation exceeded the recursion limit")
            return Result.fail(MaltRecursionError(NESTING_TOO_DEEP))

    def render(self, node: Node) -> Result[str]:
        """Print `node`, failing instead of raising when it is too deep to print."""
        try:
            return Result.ok(pr_str(node))
        except RecursionError:
            return Result.fail(MaltRecursionError(NESTING_TOO_DEEP))

    def rep(self, code: str) -> Optional[str]:
        """Read, evaluate and print one line.

        Returns the printed value, `ERROR: <message>` on failure, or None for
        input with nothing to evaluate (blank lines, comments).
        """
        result = self.eval(code)
        if isinstance(result.error, MaltEmptyInput):
            return None
        if result.is_error:
            return f"ERROR: {result.message}"
        printed = self.render(result.value)
        if printed.is_error:
            return f"ERROR: {printed.message}"
        return printed.value
