"""
Serialization helpers for LogicRecord.

Provides:
    - serialize: the SMT-LIB S-expression form, in canonical key order
    - dict / JSON / YAML round-trip via an intermediate dict representation

The S-expression round-trip is structural, not byte-exact: values are
preserved, layout and key order are normalized.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict

import yaml

from smtlogic.model import (
    STRING_FIELDS,
    TRAILING_STRING_FIELDS,
    THEORIES_KEY,
    VERSION_KEY,
    LogicRecord,
)
from smtlogic.sexpr import format_symbol, quote_string


# Versions the corpus writes unquoted, e.g. 2.6
_VERSION_NUMERAL_RE = re.compile(r"[0-9]+(\.[0-9]+)?")


def serialize(record: LogicRecord, indent: str = " ") -> str:
    """
    Render a record as an SMT-LIB logic definition.

    Args:
        record: Record to render
        indent: Prefix of each attribute line

    Returns:
        Text of the form ``(logic NAME\\n :key value\\n ...\\n)``
    """
    lines = [f"(logic {format_symbol(record.name)}"]

    for key, attr in STRING_FIELDS:
        value = getattr(record, attr)
        if value is None:
            continue
        if key == VERSION_KEY and _VERSION_NUMERAL_RE.fullmatch(value):
            lines.append(f"{indent}:{key} {value}")
        else:
            lines.append(f"{indent}:{key} {quote_string(value)}")

    if record.theories:
        names = " ".join(format_symbol(t) for t in record.theories)
        lines.append(f"{indent}:{THEORIES_KEY} ({names})")

    for key, attr in TRAILING_STRING_FIELDS:
        value = getattr(record, attr)
        if value is not None:
            lines.append(f"{indent}:{key} {quote_string(value)}")

    # Unknown keys go last, verbatim; "" is a key with no value
    for key, raw in record.extra.items():
        lines.append(f"{indent}:{key} {raw}" if raw else f"{indent}:{key}")

    lines.append(")")
    return "\n".join(lines) + "\n"


def record_to_dict(r: LogicRecord) -> Dict[str, Any]:
    return {
        "name": r.name,
        "smt_lib_version": r.smt_lib_version,
        "smt_lib_release": r.smt_lib_release,
        "written_by": r.written_by,
        "date": r.date,
        "last_updated": r.last_updated,
        "update_history": r.update_history,
        "theories": list(r.theories),
        "language": r.language,
        "extensions": r.extensions,
        "values": r.values,
        "notes": r.notes,
        "extra": dict(r.extra),
    }


def record_from_dict(d: Dict[str, Any]) -> LogicRecord:
    return LogicRecord(
        name=d["name"],
        smt_lib_version=d.get("smt_lib_version"),
        smt_lib_release=d.get("smt_lib_release"),
        written_by=d.get("written_by"),
        date=d.get("date"),
        last_updated=d.get("last_updated"),
        update_history=d.get("update_history"),
        theories=tuple(d.get("theories") or ()),
        language=d.get("language"),
        extensions=d.get("extensions"),
        values=d.get("values"),
        notes=d.get("notes"),
        extra=d.get("extra") or {},
    )


def record_to_json(r: LogicRecord) -> str:
    return json.dumps(record_to_dict(r))


def record_from_json(s: str) -> LogicRecord:
    d = json.loads(s)
    return record_from_dict(d)


def record_to_yaml(r: LogicRecord) -> str:
    return yaml.safe_dump(record_to_dict(r), sort_keys=False, allow_unicode=True)


def record_from_yaml(s: str) -> LogicRecord:
    d = yaml.safe_load(s)
    return record_from_dict(d)


__all__ = [
    "serialize",
    "record_to_dict",
    "record_from_dict",
    "record_to_json",
    "record_from_json",
    "record_to_yaml",
    "record_from_yaml",
]
