"""Built-in functions for the malt runtime environment.

Integer arithmetic over NUMBER nodes. Each builtin takes the evaluated
argument list and returns a Result; a non-number argument or a zero divisor
fails the call instead of raising. Results wrap to signed 64-bit.
"""
from __future__ import annotations

from typing import Callable

from malt.printer import pr_str
from malt.types.environment import Environment
from malt.types.errors import MaltTypeError, MaltZeroDivisionError
from malt.types.node import Node, NodeKind, to_fixed_width
from malt.types.procedure import Builtin
from malt.types.result import Result


def _as_number(node: Node) -> Result[int]:
    if node.kind is not NodeKind.NUMBER:
        return Result.fail(MaltTypeError(f"'{pr_str(node)}' not a number", node.token))
    return Result.ok(node.number)


def _fold(args: list[Node], acc: int, op: Callable[[int, int], int]) -> Result[Node]:
    for node in args:
        n = _as_number(node)
        if n.is_error:
            return Result.fail(n.error)
        acc = to_fixed_width(op(acc, n.value))
    return Result.ok(Node.make_number(acc))


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Node]) -> Result[Node]:
    """Sum of all arguments; (+) is 0."""
    return _fold(args, 0, lambda a, b: a + b)


def sub(args: list[Node]) -> Result[Node]:
    """Subtract the rest from the first; a single argument comes back as is (no negation)."""
    if not args:
        return Result.ok(Node.make_number(0))
    first = _as_number(args[0])
    if first.is_error:
        return Result.fail(first.error)
    return _fold(args[1:], first.value, lambda a, b: a - b)


def mul(args: list[Node]) -> Result[Node]:
    """Product of all arguments; (*) is 1."""
    return _fold(args, 1, lambda a, b: a * b)


def div(args: list[Node]) -> Result[Node]:
    """Divide left-to-right; fewer than 2 args gives 0. Stops at the first zero divisor."""
    if len(args) < 2:
        return Result.ok(Node.make_number(0))
    first = _as_number(args[0])
    if first.is_error:
        return Result.fail(first.error)
    acc = first.value
    for node in args[1:]:
        n = _as_number(node)
        if n.is_error:
            return Result.fail(n.error)
        if n.value == 0:
            return Result.fail(MaltZeroDivisionError("division by zero", node.token))
        acc = to_fixed_width(_trunc_div(acc, n.value))
    return Result.ok(Node.make_number(acc))


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[list[Node]], Result[Node]]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}


def register(env: Environment) -> None:
    env.update({name: Node.make_func(Builtin(name, fn)) for name, fn in BUILTINS.items()})
