"""
  Lexer for the malt reader

- Eager, single pass: a whole line is turned into a token list up front.
- Whitespace and commas separate tokens and are dropped; ';' starts a line comment.
- A '-' immediately followed by a digit starts a negative number, otherwise a symbol.
- A number is a digit run and ends at the first non-digit (12abc -> 12, abc).
- An unterminated string does not raise: it becomes an INVALID token carrying the
  diagnostic text, and the parser surfaces it as an error.
- Every character lands in some token; the lexer never rejects input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LBRACE = auto()
    RBRACE = auto()
    SYM = auto()
    NUMBER = auto()
    STRING = auto()
    BOOL = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pos: int  # offset in the source line, only used in diagnostics

    def __str__(self) -> str:
        return self.text


EOF_IN_STRING = "EOF in string"

TOKEN_RE = re.compile(
    r"(?P<ws>[\s,]+)"  # whitespace, commas count as whitespace
    r"|(?P<comment>;[^\n]*)"  # line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # integer, optional leading minus
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted string, backslash escapes
    r'|(?P<eof_string>".*)'  # no closing quote before end of input
    r'|(?P<symbol>[^\s,()\[\]{};"]+)',  # fallback: symbols
    re.DOTALL,
)

_GROUP_KINDS: dict[str, TokenKind] = {
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "lbracket": TokenKind.LBRACKET,
    "rbracket": TokenKind.RBRACKET,
    "lbrace": TokenKind.LBRACE,
    "rbrace": TokenKind.RBRACE,
    "number": TokenKind.NUMBER,
    "string": TokenKind.STRING,
    "symbol": TokenKind.SYM,
}

BOOL_LITERALS = frozenset({"true", "false"})


def tokenize(text: str) -> list[Token]:
    """Split `text` into tokens, dropping whitespace and comments."""
    tokens: list[Token] = []
    pos = 0
    n = len(text)
    while pos < n:
        # The alternatives above cover every character, so match() never fails.
        m = TOKEN_RE.match(text, pos)
        group = m.lastgroup
        if group in ("ws", "comment"):
            pos = m.end()
            continue
        if group == "eof_string":
            tokens.append(Token(TokenKind.INVALID, EOF_IN_STRING, pos))
            break
        lexeme = m.group(group)
        kind = _GROUP_KINDS[group]
        if kind is TokenKind.SYM and lexeme in BOOL_LITERALS:
            kind = TokenKind.BOOL
        tokens.append(Token(kind, lexeme, pos))
        pos = m.end()
    return tokens
