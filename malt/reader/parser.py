"""
  Reader: token list -> Node tree

- Single pass over the token list with an explicit stack of enclosing nodes,
  no recursion, so reading depth is not limited by the Python call stack.
- Closing delimiters are checked against the kind of the node currently being
  filled, not against a separate delimiter stack.
- Only one top-level form per read: ROOT ends up with exactly one child.
- Leaves:
    - symbols -> SYMBOL (the symbol `nil` -> NIL)
    - numbers -> NUMBER (signed 64-bit, out of range is an error)
    - strings -> STRING (unescaped contents)
    - true / false -> BOOL
- Errors come back as a failed Result naming the offending token.
"""

from __future__ import annotations

import re
from typing import Iterable

from malt.reader.lexer import Token, TokenKind, tokenize
from malt.types.errors import (
    MaltEmptyInput,
    MaltLexicalError,
    MaltSyntaxError,
)
from malt.types.node import INT_MAX, INT_MIN, Node, NodeKind
from malt.types.result import Result

_OPENERS: dict[TokenKind, NodeKind] = {
    TokenKind.LPAREN: NodeKind.LIST,
    TokenKind.LBRACKET: NodeKind.VECTOR,
    TokenKind.LBRACE: NodeKind.HASHMAP,
}

_CLOSERS: dict[TokenKind, NodeKind] = {
    TokenKind.RPAREN: NodeKind.LIST,
    TokenKind.RBRACKET: NodeKind.VECTOR,
    TokenKind.RBRACE: NodeKind.HASHMAP,
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES: dict[str, str] = {"n": "\n"}


def unescape(lexeme: str) -> str:
    """Strip the quotes from a string lexeme and resolve backslash escapes."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), lexeme[1:-1])


def _make_leaf(tok: Token) -> Result[Node]:
    match tok.kind:
        case TokenKind.SYM:
            if tok.text == "nil":
                return Result.ok(Node.make_nil(tok))
            return Result.ok(Node.make_symbol(tok.text, tok))
        case TokenKind.NUMBER:
            value = int(tok.text)
            if not INT_MIN <= value <= INT_MAX:
                return Result.fail(MaltSyntaxError("number literal out of range", tok))
            return Result.ok(Node.make_number(value, tok))
        case TokenKind.STRING:
            return Result.ok(Node.make_string(unescape(tok.text), tok))
        case TokenKind.BOOL:
            return Result.ok(Node.make_bool(tok.text == "true", tok))
    return Result.fail(MaltSyntaxError(f"unexpected token '{tok.text}'", tok))


def parse(tokens: Iterable[Token]) -> Result[Node]:
    """Build a ROOT node holding the single form found in `tokens`."""
    root = Node.make_root()
    node = root
    stack: list[Node] = []

    for tok in tokens:
        if tok.kind is TokenKind.INVALID:
            return Result.fail(MaltLexicalError(tok.text, tok))

        if tok.kind in _OPENERS:
            if node is root and not root.is_empty():
                return Result.fail(MaltSyntaxError("unbalanced (non-nested list start)", tok))
            new_node = Node.make_aggregate(_OPENERS[tok.kind], tok)
            node.append_child(new_node)
            stack.append(node)
            node = new_node
        elif tok.kind in _CLOSERS:
            # ROOT never matches a closer, so the stack is never popped empty
            if node.kind is not _CLOSERS[tok.kind]:
                return Result.fail(MaltSyntaxError("unbalanced aggregate-kind", tok))
            node = stack.pop()
        else:
            if node is root and not root.is_empty():
                return Result.fail(MaltSyntaxError("unbalanced (multiple atoms outside list)", tok))
            leaf = _make_leaf(tok)
            if leaf.is_error:
                return leaf
            node.append_child(leaf.value)

    if node is not root:
        return Result.fail(MaltSyntaxError("unbalanced tree", node.token))
    if root.is_empty():
        return Result.fail(MaltEmptyInput("no tokens parsed"))
    return Result.ok(root)


def read_str(text: str) -> Result[Node]:
    """Tokenize and parse one line of source text."""
    return parse(tokenize(text))
