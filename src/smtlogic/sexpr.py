"""
S-expression reader for SMT-LIB logic definition files.

Turns source text into a small tree of nodes:
    - Atom: symbol, keyword, string literal or numeral
    - SList: parenthesized sequence of nodes

Lexical rules (SMT-LIB 2.6, section 3.1):
    - ``;`` starts a comment running to the end of the line
    - string literals are double-quoted, may span lines, and
      ``""`` inside a literal stands for one ``"``
    - ``|...|`` is a quoted symbol; the bars are not part of its name
    - ``:name`` is a keyword

Every node keeps the exact source text it was read from, so callers can
carry values they do not understand through unchanged.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from smtlogic.errors import MalformedRecord


class TokenKind(Enum):
    """Lexical token kinds."""
    LPAREN = "("
    RPAREN = ")"
    STRING = "string"
    QUOTED_SYMBOL = "quoted_symbol"
    KEYWORD = "keyword"
    SYMBOL = "symbol"
    NUMERAL = "numeral"


class AtomKind(Enum):
    """Kinds of leaf nodes in a parsed S-expression."""
    SYMBOL = "symbol"
    KEYWORD = "keyword"
    STRING = "string"
    NUMERAL = "numeral"


_SYMBOL_CHARS = r"A-Za-z0-9~!@$%^&*_\-+=<>.?/"

_TOKEN_RE = re.compile(
    r"""
      (?P<ws>\s+)
    | (?P<comment>;[^\n]*)
    | (?P<lparen>\()
    | (?P<rparen>\))
    | (?P<string>"(?:[^"]|"")*")
    | (?P<quoted_symbol>\|[^|\\]*\|)
    | (?P<keyword>:[""" + _SYMBOL_CHARS + r"""]+)
    | (?P<numeral>\#x[0-9A-Fa-f]+|\#b[01]+|[0-9]+(?:\.[0-9]+)?(?![""" + _SYMBOL_CHARS + r"""]))
    | (?P<symbol>[""" + _SYMBOL_CHARS + r"""]+)
    """,
    re.VERBOSE,
)

_SIMPLE_SYMBOL_RE = re.compile(r"^[A-Za-z~!@$%^&*_\-+=<>.?/][" + _SYMBOL_CHARS + r"]*$")
_KEYWORD_NAME_RE = re.compile(r"^[" + _SYMBOL_CHARS + r"]+$")

_GROUP_KINDS = {
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "string": TokenKind.STRING,
    "quoted_symbol": TokenKind.QUOTED_SYMBOL,
    "keyword": TokenKind.KEYWORD,
    "numeral": TokenKind.NUMERAL,
    "symbol": TokenKind.SYMBOL,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Atom:
    """
    A leaf node.

    Properties:
        kind: AtomKind
        value: Decoded value (string contents unescaped, quoted symbol without bars)
        text: Raw source text
        line, column: 1-based position of the first character
    """

    kind: AtomKind
    value: str
    text: str
    line: int
    column: int


@dataclass(frozen=True)
class SList:
    """A parenthesized list of nodes, with its raw source text."""

    items: Tuple["Node", ...]
    text: str
    line: int
    column: int


Node = Union[Atom, SList]


def _line_starts(source: str) -> List[int]:
    """Offsets at which each line of the source begins."""
    starts = [0]
    starts.extend(m.end() for m in re.finditer("\n", source))
    return starts


def _position(line_starts: List[int], offset: int) -> Tuple[int, int]:
    """Translate a character offset into a 1-based (line, column) pair."""
    index = bisect.bisect_right(line_starts, offset) - 1
    return index + 1, offset - line_starts[index] + 1


def tokenize(source: str) -> List[Token]:
    """
    Split source text into tokens, dropping whitespace and comments.

    Raises:
        MalformedRecord: On an unterminated string or a character that
            cannot start any token
    """
    tokens: List[Token] = []
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            line, column = _position(_line_starts(source), pos)
            if source[pos] == '"':
                raise MalformedRecord("unterminated string literal", line, column)
            if source[pos] == "|":
                raise MalformedRecord("unterminated quoted symbol", line, column)
            raise MalformedRecord(f"unexpected character {source[pos]!r}", line, column)
        group = match.lastgroup
        if group not in ("ws", "comment"):
            tokens.append(Token(_GROUP_KINDS[group], match.group(), match.start(), match.end()))
        pos = match.end()
    return tokens


def unquote_string(raw: str) -> str:
    """Decode a string literal including its surrounding quotes."""
    return raw[1:-1].replace('""', '"')


def quote_string(value: str) -> str:
    """Encode a Python string as an SMT-LIB string literal."""
    return '"' + value.replace('"', '""') + '"'


def format_symbol(name: str) -> str:
    """Render a symbol, wrapping it in bars when it is not a simple symbol."""
    if _SIMPLE_SYMBOL_RE.match(name):
        return name
    if "|" in name or "\\" in name:
        raise ValueError(f"Symbol cannot be represented in SMT-LIB: {name!r}")
    return f"|{name}|"


def is_keyword_name(name: str) -> bool:
    """True if ``:name`` is a valid keyword."""
    return bool(_KEYWORD_NAME_RE.match(name))


def _read_atom(token: Token, line: int, column: int) -> Atom:
    if token.kind == TokenKind.STRING:
        return Atom(AtomKind.STRING, unquote_string(token.text), token.text, line, column)
    if token.kind == TokenKind.QUOTED_SYMBOL:
        return Atom(AtomKind.SYMBOL, token.text[1:-1], token.text, line, column)
    if token.kind == TokenKind.KEYWORD:
        return Atom(AtomKind.KEYWORD, token.text[1:], token.text, line, column)
    if token.kind == TokenKind.NUMERAL:
        return Atom(AtomKind.NUMERAL, token.text, token.text, line, column)
    return Atom(AtomKind.SYMBOL, token.text, token.text, line, column)


def read_all(source: str) -> List[Node]:
    """
    Read every top-level S-expression in the source text.

    Lists are built with an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.

    Args:
        source: Text to read

    Returns:
        List of top-level nodes, in source order

    Raises:
        MalformedRecord: If the text is not lexically or structurally valid
    """
    tokens = tokenize(source)
    line_starts = _line_starts(source)
    nodes: List[Node] = []
    # Open lists: (opening token, line, column, items read so far)
    stack: List[Tuple[Token, int, int, List[Node]]] = []

    for token in tokens:
        line, column = _position(line_starts, token.start)
        if token.kind == TokenKind.LPAREN:
            stack.append((token, line, column, []))
            continue
        if token.kind == TokenKind.RPAREN:
            if not stack:
                raise MalformedRecord("unbalanced parentheses: unexpected ')'", line, column)
            opening, open_line, open_column, items = stack.pop()
            node = SList(tuple(items), source[opening.start:token.end], open_line, open_column)
        else:
            node = _read_atom(token, line, column)

        if stack:
            stack[-1][3].append(node)
        else:
            nodes.append(node)

    if stack:
        _, line, column, _ = stack[-1]
        raise MalformedRecord("unbalanced parentheses: missing ')'", line, column)
    return nodes


__all__ = [
    "AtomKind",
    "Atom",
    "SList",
    "Node",
    "tokenize",
    "read_all",
    "quote_string",
    "unquote_string",
    "format_symbol",
    "is_keyword_name",
]
