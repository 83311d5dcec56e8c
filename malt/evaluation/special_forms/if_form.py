from malt import EvaluatorFn
from malt.types.errors import MaltArityError
from malt.types.environment import Environment
from malt.types.node import Node, NodeKind
from malt.types.result import Result


def is_truthy(node: Node) -> bool:
    # Only nil and false are false; 0, "" and empty aggregates are true
    if node.kind is NodeKind.NIL:
        return False
    if node.kind is NodeKind.BOOL:
        return node.boolean
    return True


def if_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result[Node]:
    if len(tail) < 2:
        return Result.fail(MaltArityError("if requires a condition and a then-expression"))

    cond = evaluate_fn(tail[0], env)
    if cond.is_error:
        return cond

    if is_truthy(cond.value):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Result.ok(Node.make_nil())
