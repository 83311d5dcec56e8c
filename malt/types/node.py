"""Tree representation shared by the reader and the evaluator.

A Node is a tagged union: `kind` says which payload it carries, and every
payload accessor checks the kind before handing the payload out. Reading the
wrong variant is a bug in the caller and raises NodeKindError.

    kind      payload
    ROOT      list[Node]   (0 or 1 child once parsing succeeds)
    LIST      list[Node]
    VECTOR    list[Node]
    HASHMAP   list[Node]   (flat; no key/value pairing is enforced)
    SYMBOL    str
    STRING    str          (unescaped contents)
    NIL       -
    NUMBER    int          (signed 64-bit)
    BOOL      bool
    FUNC      Procedure
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional, TYPE_CHECKING

from malt.types.errors import NodeKindError
from malt.types.procedure import Procedure

if TYPE_CHECKING:
    from malt.reader.lexer import Token


class NodeKind(Enum):
    ROOT = auto()
    LIST = auto()
    VECTOR = auto()
    HASHMAP = auto()
    SYMBOL = auto()
    STRING = auto()
    NIL = auto()
    NUMBER = auto()
    BOOL = auto()
    FUNC = auto()


AGGREGATE_KINDS = frozenset({NodeKind.ROOT, NodeKind.LIST, NodeKind.VECTOR, NodeKind.HASHMAP})

# Display strings for aggregates that were not read from a token
_AGGREGATE_LABELS = {
    NodeKind.ROOT: "ROOT",
    NodeKind.LIST: "#LIST",
    NodeKind.VECTOR: "#VECTOR",
    NodeKind.HASHMAP: "#HASHMAP",
}

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def to_fixed_width(n: int) -> int:
    """Wrap an arbitrary Python int into the signed 64-bit range."""
    return (n - INT_MIN) % 2**64 + INT_MIN


class Node:
    __slots__ = ("kind", "as_string", "token", "_data")

    def __init__(self, kind: NodeKind, data: Any, as_string: str, token: Optional[Token] = None):
        self.kind: NodeKind = kind
        self.as_string: str = as_string
        self.token: Optional[Token] = token
        self._data = data

    # --- Construction ---
    @classmethod
    def make_root(cls) -> Node:
        return cls(NodeKind.ROOT, [], _AGGREGATE_LABELS[NodeKind.ROOT])

    @classmethod
    def make_aggregate(
        cls, kind: NodeKind, token: Optional[Token] = None, children: Optional[list[Node]] = None
    ) -> Node:
        if kind not in AGGREGATE_KINDS:
            raise NodeKindError(f"{kind.name} is not an aggregate kind")
        as_string = token.text if token is not None else _AGGREGATE_LABELS[kind]
        return cls(kind, list(children) if children else [], as_string, token)

    @classmethod
    def make_symbol(cls, name: str, token: Optional[Token] = None) -> Node:
        return cls(NodeKind.SYMBOL, name, name, token)

    @classmethod
    def make_string(cls, value: str, token: Optional[Token] = None) -> Node:
        return cls(NodeKind.STRING, value, token.text if token is not None else value, token)

    @classmethod
    def make_number(cls, value: int, token: Optional[Token] = None) -> Node:
        return cls(NodeKind.NUMBER, value, token.text if token is not None else str(value), token)

    @classmethod
    def make_bool(cls, value: bool, token: Optional[Token] = None) -> Node:
        return cls(NodeKind.BOOL, value, "true" if value else "false", token)

    @classmethod
    def make_nil(cls, token: Optional[Token] = None) -> Node:
        return cls(NodeKind.NIL, None, "nil", token)

    @classmethod
    def make_func(cls, procedure: Procedure) -> Node:
        return cls(NodeKind.FUNC, procedure, f"#FUNC{procedure.name}")

    # --- Kind-checked payload access ---
    def _payload(self, *kinds: NodeKind) -> Any:
        if self.kind not in kinds:
            expected = "/".join(k.name for k in kinds)
            raise NodeKindError(f"cannot read {self.kind.name} node as {expected}")
        return self._data

    @property
    def children(self) -> list[Node]:
        return self._payload(*AGGREGATE_KINDS)

    @property
    def symbol(self) -> str:
        return self._payload(NodeKind.SYMBOL)

    @property
    def string(self) -> str:
        return self._payload(NodeKind.STRING)

    @property
    def number(self) -> int:
        return self._payload(NodeKind.NUMBER)

    @property
    def boolean(self) -> bool:
        return self._payload(NodeKind.BOOL)

    @property
    def procedure(self) -> Procedure:
        return self._payload(NodeKind.FUNC)

    # --- Helpers ---
    @property
    def is_aggregate(self) -> bool:
        return self.kind in AGGREGATE_KINDS

    def is_empty(self) -> bool:
        return not self.children

    def append_child(self, node: Node) -> None:
        self.children.append(node)

    def is_symbol(self, name: str) -> bool:
        """True if this is a SYMBOL node spelled `name`."""
        return self.kind is NodeKind.SYMBOL and self._data == name

    def copy(self) -> Node:
        """Structural copy: aggregates get fresh child lists all the way down."""
        if self.kind in AGGREGATE_KINDS:
            data: Any = [child.copy() for child in self._data]
        else:
            data = self._data
        return Node(self.kind, data, self.as_string, self.token)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is NodeKind.FUNC:
            return self._data is other._data
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.kind is NodeKind.NIL:
            return "Node(NIL)"
        return f"Node({self.kind.name}, {self._data!r})"
