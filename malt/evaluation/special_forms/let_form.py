from malt import EvaluatorFn
from malt.evaluation.special_forms.define_form import bind_symbol
from malt.types.errors import MaltArityError, MaltBindingError
from malt.types.environment import Environment
from malt.types.node import Node, NodeKind
from malt.types.result import Result


def let_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result[Node]:
    """
    (let* (name1 value1 name2 value2 ...) body)
    Bindings are made one after another in a fresh frame, so each value sees
    the names bound before it. The frame is gone once the form returns.
    """
    if len(tail) != 2:
        return Result.fail(MaltArityError("let* requires exactly 2 arguments"))

    bindings, body = tail
    if not bindings.is_aggregate or bindings.kind is NodeKind.ROOT:
        return Result.fail(MaltBindingError("let* bindings must be a list or vector", bindings.token))
    pairs = bindings.children
    if len(pairs) % 2 != 0:
        return Result.fail(MaltBindingError("let* bindings of uneven length", bindings.token))

    with env.scope() as frame:
        for name, val_expr in zip(pairs[::2], pairs[1::2]):
            bound = bind_symbol(name, val_expr, frame, evaluate_fn, "let*")
            if bound.is_error:
                return bound
        return evaluate_fn(body, frame)
