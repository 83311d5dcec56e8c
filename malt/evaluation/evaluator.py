"""Core evaluator for the malt interpreter.

Recursive (Node, Environment) -> Result[Node] dispatch on node kind. Special
forms are looked up before any operand is evaluated; everything else in head
position is applied through malt.evaluation.apply. Errors never raise out of
here: the first failed Result in any sequence is handed straight back and the
siblings computed so far are dropped.
"""

from __future__ import annotations

from malt.evaluation.apply import apply
from malt.evaluation.special_forms import SPECIAL_FORMS
from malt.types.environment import Environment
from malt.types.errors import MaltEmptyInput, MaltUnboundSymbol
from malt.types.node import Node, NodeKind
from malt.types.result import Result


def evaluate_all(nodes: list[Node], env: Environment) -> Result[list[Node]]:
    """Evaluate `nodes` left to right, stopping at the first error."""
    values: list[Node] = []
    for node in nodes:
        result = evaluate(node, env)
        if result.is_error:
            return Result.fail(result.error)
        values.append(result.value)
    return Result.ok(values)


def evaluate(node: Node, env: Environment) -> Result[Node]:
    match node.kind:
        case NodeKind.ROOT:
            if node.is_empty():
                return Result.fail(MaltEmptyInput("no tokens parsed"))
            return evaluate(node.children[0], env)

        case NodeKind.SYMBOL:
            value = env.get(node.symbol)
            if value is None:
                return Result.fail(MaltUnboundSymbol(f"'{node.symbol}' could not be resolved", node.token))
            return Result.ok(value.copy())

        case NodeKind.LIST:
            if node.is_empty():
                return Result.ok(node.copy())
            head, *tail = node.children
            if head.kind is NodeKind.SYMBOL and head.symbol in SPECIAL_FORMS:
                return SPECIAL_FORMS[head.symbol](tail, env, evaluate)
            args = evaluate_all(tail, env)
            if args.is_error:
                return Result.fail(args.error)
            return apply(head, args.value, env)

        case NodeKind.VECTOR | NodeKind.HASHMAP:
            if node.is_empty():
                return Result.ok(node.copy())
            # Hashmaps are evaluated flat, exactly like vectors
            items = evaluate_all(node.children, env)
            if items.is_error:
                return Result.fail(items.error)
            return Result.ok(Node.make_aggregate(node.kind, node.token, items.value))

    # --- Atoms evaluate to themselves ---
    return Result.ok(node.copy())
