"""
Human-readable summaries of logic records, for listing and search output.

Read-only: nothing here modifies a record.
"""

import re
from typing import Optional

from smtlogic.model import LogicRecord


_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s")


def first_sentence(text: Optional[str]) -> str:
    """
    Return the first sentence of a prose field with whitespace collapsed.

    A sentence ends at '.', '!' or '?' followed by whitespace, or at the
    end of the text.
    """
    if not text:
        return ""
    flat = " ".join(text.split())
    return _SENTENCE_END_RE.split(flat, maxsplit=1)[0]


def describe(record: LogicRecord) -> str:
    """
    Summarize a record: name, version, theories and the first sentence
    of its language description.

    Example:
        QF_FF (SMT-LIB 2.6)
          theories: FieldElements
          language: Closed quantifier-free formulas built over ...
    """
    header = record.name
    if record.smt_lib_version:
        header = f"{header} (SMT-LIB {record.smt_lib_version})"

    lines = [header]
    lines.append(f"  theories: {', '.join(record.theories) if record.theories else '(none)'}")
    summary = first_sentence(record.language)
    if summary:
        lines.append(f"  language: {summary}")
    return "\n".join(lines)
