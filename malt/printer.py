"""Render Nodes back to surface syntax.

Aggregates are wrapped in their own delimiters with children separated by a
single space. With `readably` set (the default), strings are quoted and
re-escaped so the output reads back to an equal node.
"""

from __future__ import annotations

from malt.types.node import Node, NodeKind

_DELIMITERS = {
    NodeKind.LIST: ("(", ")"),
    NodeKind.VECTOR: ("[", "]"),
    NodeKind.HASHMAP: ("{", "}"),
}


def escape(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'


def pr_str(node: Node, readably: bool = True) -> str:
    match node.kind:
        case NodeKind.ROOT:
            return pr_str(node.children[0], readably) if node.children else ""
        case NodeKind.LIST | NodeKind.VECTOR | NodeKind.HASHMAP:
            start, end = _DELIMITERS[node.kind]
            return start + " ".join(pr_str(child, readably) for child in node.children) + end
        case NodeKind.STRING:
            return escape(node.string) if readably else node.string
        case NodeKind.SYMBOL:
            return node.symbol
        case NodeKind.NUMBER:
            return str(node.number)
        case NodeKind.BOOL:
            return "true" if node.boolean else "false"
        case NodeKind.NIL:
            return "nil"
        case NodeKind.FUNC:
            return str(node.procedure)
    return node.as_string
