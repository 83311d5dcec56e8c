"""Application engine for malt.

The head of a non-special list is resolved only after its operands have been
evaluated. The head must be a symbol bound to a FUNC node; the procedure's
Result is returned untouched.
"""

from malt.printer import pr_str
from malt.types.environment import Environment
from malt.types.errors import MaltNotCallable, MaltUnboundSymbol
from malt.types.node import Node, NodeKind
from malt.types.result import Result


def apply(head: Node, args: list[Node], env: Environment) -> Result[Node]:
    """Resolve `head` in `env` and invoke it with the evaluated `args`."""
    if head.kind is not NodeKind.SYMBOL:
        return Result.fail(MaltNotCallable(f"cannot call '{pr_str(head)}'", head.token))

    fn = env.get(head.symbol)
    if fn is None:
        return Result.fail(MaltUnboundSymbol(f"'{head.symbol}' not found", head.token))
    if fn.kind is not NodeKind.FUNC:
        return Result.fail(MaltNotCallable(f"cannot call '{head.symbol}'", head.token))
    return fn.procedure.invoke(args)
