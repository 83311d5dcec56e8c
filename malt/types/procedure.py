"""Callable values stored in FUNC nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from malt.types.node import Node
    from malt.types.result import Result


class Procedure(ABC):
    """Something that can be invoked with already-evaluated arguments."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def invoke(self, args: list[Node]) -> Result[Node]:
        ...

    def __str__(self) -> str:
        return f"#<function {self.name}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Builtin(Procedure):
    """A procedure implemented in Python, e.g. the arithmetic builtins."""

    __slots__ = ("fn",)

    def __init__(self, name: str, fn: Callable[[list[Node]], Result[Node]]):
        super().__init__(name)
        self.fn = fn

    def invoke(self, args: list[Node]) -> Result[Node]:
        return self.fn(args)
