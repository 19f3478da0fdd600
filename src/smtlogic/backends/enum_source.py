"""
Python enum source generator for logic catalogs.

Converts a LogicCatalog into the source of an ``Enum`` with one member per
logic, each documented with its language description, e.g.:

    class Logic(Enum):
        #: Closed quantifier-free formulas built over an arbitrary expansion of the
        #: FieldElements signature with free constant symbols.
        QF_FF = "QF_FF"

Logic names outside the catalog stay usable: ``Logic.parse`` returns them
as plain strings instead of failing.
"""

import keyword
import re
from typing import List

from smtlogic.catalog import LogicCatalog
from smtlogic.model import LogicRecord


_NON_IDENTIFIER_RE = re.compile(r"\W")


def _member_name(logic_name: str) -> str:
    """Turn a logic name into a valid Python identifier."""
    ident = _NON_IDENTIFIER_RE.sub("_", logic_name)
    if ident[0].isdigit() or keyword.iskeyword(ident):
        ident = f"_{ident}"
    return ident


def _doc_comment(record: LogicRecord, indent: str) -> List[str]:
    """Language description as ``#:`` comment lines, one per source line."""
    if not record.language:
        return []
    text = record.language.strip().strip('"“”').strip()
    return [f"{indent}#: {line.strip()}".rstrip() for line in text.splitlines()]


def generate_logic_enum(catalog: LogicCatalog, class_name: str = "Logic",
                        with_docs: bool = True) -> str:
    """
    Generate Python source for an Enum of the catalog's logics.

    Args:
        catalog: Logics to include, in catalog order
        class_name: Name of the generated class
        with_docs: Emit each logic's language description as a comment

    Returns:
        String containing a complete Python module

    Raises:
        ValueError: If two logic names map to the same identifier
    """
    lines = []

    # Header
    lines.append('"""SMT-LIB logics. Generated by smtlogic; do not edit."""')
    lines.append("")
    lines.append("from enum import Enum")
    lines.append("")
    lines.append("")
    lines.append(f"class {class_name}(Enum):")
    lines.append('    """')
    lines.append("    Logics a solver may be asked to use.")
    lines.append("")
    lines.append("    Names outside this collection are accepted by ``parse`` and")
    lines.append("    returned unchanged as plain strings.")
    lines.append('    """')

    # Members
    used = {}
    for record in catalog.values():
        member = _member_name(record.name)
        if member in used:
            raise ValueError(
                f"Logics {used[member]!r} and {record.name!r} both map to identifier {member}"
            )
        used[member] = record.name
        lines.append("")
        if with_docs:
            lines.extend(_doc_comment(record, "    "))
        lines.append(f"    {member} = {record.name!r}")

    # Helpers
    lines.append("")
    lines.append("    def __str__(self):")
    lines.append("        return self.value")
    lines.append("")
    lines.append("    @classmethod")
    lines.append("    def parse(cls, name):")
    lines.append("        try:")
    lines.append("            return cls(name)")
    lines.append("        except ValueError:")
    lines.append("            return name")

    return "\n".join(lines) + "\n"


def save_logic_enum(catalog: LogicCatalog, filename: str, class_name: str = "Logic") -> None:
    """
    Generate enum source and save it to a file.

    Args:
        catalog: Logics to include
        filename: Output file path (.py)
        class_name: Name of the generated class
    """
    source = generate_logic_enum(catalog, class_name=class_name)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(source)


__all__ = ["generate_logic_enum", "save_logic_enum"]
