"""
Logic Definition Loader (Raw Text → LogicRecord).

Reads one SMT-LIB logic definition:

    (logic QF_FF
     :smt-lib-version "2.6"
     :written-by "Cesare Tinelli"
     :theories (FieldElements)
     :language "..."
     :notes "..."
    )

Syntax Notes:
    - Keys may appear in any order
    - Recognized keys must hold a string, except :theories (list of symbols)
      and :smt-lib-version (string or numeral, e.g. 2.6)
    - Unrecognized keys are kept verbatim and reported as UnknownKeyWarning;
      an unrecognized key may have no value at all (:flag)
"""

import os
import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from smtlogic.errors import MalformedRecord, UnknownKeyWarning
from smtlogic.model import FIELD_FOR_KEY, THEORIES_KEY, VERSION_KEY, LogicRecord
from smtlogic.sexpr import Atom, AtomKind, Node, SList, read_all


@dataclass
class LoadResult:
    """A successfully loaded record plus the non-fatal warnings found on the way."""
    record: LogicRecord
    warnings: List[UnknownKeyWarning] = field(default_factory=list)


def _describe_node(node: Node) -> str:
    if isinstance(node, SList):
        return "a list"
    return {
        AtomKind.SYMBOL: "a symbol",
        AtomKind.KEYWORD: "a keyword",
        AtomKind.STRING: "a string",
        AtomKind.NUMERAL: "a numeral",
    }[node.kind]


def _expect_string(key: str, node: Node) -> str:
    if isinstance(node, Atom) and node.kind == AtomKind.STRING:
        return node.value
    raise MalformedRecord(
        f"value of :{key} must be a string, got {_describe_node(node)}",
        node.line,
        node.column,
    )


def _expect_string_or_numeral(key: str, node: Node) -> str:
    """A string literal, or a numeral kept as its source text (``:smt-lib-version 2.6``)."""
    if isinstance(node, Atom) and node.kind == AtomKind.NUMERAL:
        return node.text
    if isinstance(node, Atom) and node.kind == AtomKind.STRING:
        return node.value
    raise MalformedRecord(
        f"value of :{key} must be a string or a numeral, got {_describe_node(node)}",
        node.line,
        node.column,
    )


def _expect_symbol_list(key: str, node: Node) -> Tuple[str, ...]:
    if not isinstance(node, SList):
        raise MalformedRecord(
            f"value of :{key} must be a list of symbols, got {_describe_node(node)}",
            node.line,
            node.column,
        )
    names = []
    for item in node.items:
        if not (isinstance(item, Atom) and item.kind == AtomKind.SYMBOL):
            raise MalformedRecord(
                f"value of :{key} must be a list of symbols, found {_describe_node(item)}",
                item.line,
                item.column,
            )
        names.append(item.value)
    return tuple(names)


def _top_level_form(source: str) -> SList:
    """Return the single top-level list, or raise MalformedRecord."""
    nodes = read_all(source)
    if not nodes:
        raise MalformedRecord("missing top-level (logic ...) form")
    if len(nodes) > 1:
        extra = nodes[1]
        raise MalformedRecord("unexpected content after the logic form", extra.line, extra.column)
    form = nodes[0]
    if not isinstance(form, SList):
        raise MalformedRecord("missing top-level (logic ...) form", form.line, form.column)
    return form


def _parse(source: str) -> LoadResult:
    form = _top_level_form(source)
    items = form.items

    if not items:
        raise MalformedRecord("empty form; expected (logic <name> ...)", form.line, form.column)
    head = items[0]
    if not (isinstance(head, Atom) and head.kind == AtomKind.SYMBOL and head.value == "logic"):
        raise MalformedRecord("form must begin with the symbol 'logic'", head.line, head.column)

    if len(items) < 2 or (isinstance(items[1], Atom) and items[1].kind == AtomKind.KEYWORD):
        raise MalformedRecord("missing required field: name", form.line, form.column)
    name_node = items[1]
    if not (isinstance(name_node, Atom) and name_node.kind == AtomKind.SYMBOL):
        raise MalformedRecord(
            f"logic name must be a symbol, got {_describe_node(name_node)}",
            name_node.line,
            name_node.column,
        )
    name = name_node.value

    fields: Dict[str, object] = {}
    extra: Dict[str, str] = {}
    seen = set()
    found: List[UnknownKeyWarning] = []

    pos = 2
    while pos < len(items):
        key_node = items[pos]
        if not (isinstance(key_node, Atom) and key_node.kind == AtomKind.KEYWORD):
            raise MalformedRecord(
                f"expected a :keyword, got {_describe_node(key_node)}",
                key_node.line,
                key_node.column,
            )
        key = key_node.value
        if key in seen:
            raise MalformedRecord(f"duplicate key :{key}", key_node.line, key_node.column)
        seen.add(key)
        recognized = key == THEORIES_KEY or key in FIELD_FOR_KEY

        has_value = pos + 1 < len(items) and not (
            isinstance(items[pos + 1], Atom) and items[pos + 1].kind == AtomKind.KEYWORD
        )
        if not has_value:
            if recognized:
                raise MalformedRecord(f"missing value for :{key}", key_node.line, key_node.column)
            # <attribute> ::= <keyword>; kept as an empty raw value
            extra[key] = ""
            found.append(UnknownKeyWarning(key, logic=name))
            pos += 1
            continue
        value_node = items[pos + 1]

        if key == THEORIES_KEY:
            fields["theories"] = _expect_symbol_list(key, value_node)
        elif key == VERSION_KEY:
            fields[FIELD_FOR_KEY[key]] = _expect_string_or_numeral(key, value_node)
        elif recognized:
            fields[FIELD_FOR_KEY[key]] = _expect_string(key, value_node)
        else:
            extra[key] = value_node.text
            found.append(UnknownKeyWarning(key, logic=name))
        pos += 2

    record = LogicRecord(name=name, extra=extra, **fields)
    return LoadResult(record=record, warnings=found)


def load_with_warnings(source: str) -> LoadResult:
    """
    Parse a logic definition and return the record with its warnings.

    Unlike ``load``, warnings are returned rather than issued.

    Raises:
        MalformedRecord: If the text is not a well-formed logic form
    """
    return _parse(source)


def load(source: str) -> LogicRecord:
    """
    Parse a logic definition into a LogicRecord.

    Args:
        source: Text holding exactly one (logic NAME :key value ...) form

    Returns:
        Fully populated LogicRecord

    Raises:
        MalformedRecord: If the form is absent, the name is missing, or a
            recognized key holds the wrong kind of value
    """
    result = _parse(source)
    for warning in result.warnings:
        warnings.warn(warning, stacklevel=2)
    return result.record


def load_file(filepath: str, encoding: str = "utf-8") -> LogicRecord:
    """
    Load a logic definition from a file.

    Args:
        filepath: Path to an .smt2 logic file
        encoding: Text encoding of the file

    Returns:
        LogicRecord

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedRecord: If parsing fails; ``error.path`` names the file
    """
    result = load_file_with_warnings(filepath, encoding=encoding)
    for warning in result.warnings:
        warnings.warn(warning, stacklevel=2)
    return result.record


def load_file_with_warnings(filepath: str, encoding: str = "utf-8") -> LoadResult:
    """Like ``load_file`` but returns warnings instead of issuing them."""
    path = os.fspath(filepath)
    with open(path, "r", encoding=encoding) as f:
        content = f.read()
    try:
        return _parse(content)
    except MalformedRecord as e:
        raise e.with_path(path) from e


__all__ = [
    "LoadResult",
    "load",
    "load_with_warnings",
    "load_file",
    "load_file_with_warnings",
]
