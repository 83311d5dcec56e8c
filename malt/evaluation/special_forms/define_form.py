from malt import EvaluatorFn
from malt.printer import pr_str
from malt.types.errors import MaltArityError, MaltBindingError
from malt.types.environment import Environment
from malt.types.node import Node, NodeKind
from malt.types.result import Result


def bind_symbol(
    name: Node, val_expr: Node, env: Environment, evaluate_fn: EvaluatorFn, form: str
) -> Result[Node]:
    """Evaluate `val_expr` in `env` and bind it to `name` in that same frame."""
    if name.kind is not NodeKind.SYMBOL:
        return Result.fail(
            MaltBindingError(f"{form} requires a symbol to bind, got '{pr_str(name)}'", name.token)
        )
    value = evaluate_fn(val_expr, env)
    if value.is_error:
        return value
    env.set(name.symbol, value.value)
    return value


def define_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result[Node]:
    """
    (def! name value)
    Binds in the current frame and returns the bound value.
    """
    if len(tail) != 2:
        return Result.fail(MaltArityError("def! requires exactly 2 arguments"))

    name, val_expr = tail
    return bind_symbol(name, val_expr, env, evaluate_fn, "def!")
