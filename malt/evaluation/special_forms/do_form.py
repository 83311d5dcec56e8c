import logging

from malt import EvaluatorFn
from malt.types.errors import MaltArityError
from malt.types.environment import Environment
from malt.types.node import Node
from malt.types.result import Result

logger = logging.getLogger(__name__)


def do_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result[Node]:
    """
    (do expr1 expr2 ... exprN)
    Evaluates every form in order and returns the value of the last one.
    Failures in the leading forms do not stop the sequence; they are logged
    and dropped, only the last form's Result reaches the caller.
    """
    if not tail:
        return Result.fail(MaltArityError("do requires at least 1 argument"))

    for e in tail[:-1]:
        discarded = evaluate_fn(e, env)
        if discarded.is_error:
            logger.warning("do: ignoring error in non-final form: %s", discarded.message)
    return evaluate_fn(tail[-1], env)
