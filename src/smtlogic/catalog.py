"""
Logic Catalog — a read-only collection of logic records keyed by name.

The SMT-LIB logic corpus is a directory of ``*.smt2`` files, one logic per
file. A catalog loads such a directory and answers lookup and search
queries. Like the records it holds, a catalog never changes after
construction, so it may be shared across threads without locks.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Union

from smtlogic.describe import describe
from smtlogic.errors import DuplicateLogic
from smtlogic.logic_parser import load_file
from smtlogic.model import LogicRecord


class LogicCatalog(Mapping):
    """
    Immutable mapping from logic name to LogicRecord.

    Iteration follows insertion order.

    Raises:
        DuplicateLogic: If two records share a name
    """

    def __init__(self, records: Iterable[LogicRecord] = ()):
        by_name: Dict[str, LogicRecord] = {}
        for record in records:
            if record.name in by_name:
                raise DuplicateLogic(f"Duplicate logic name: {record.name}")
            by_name[record.name] = record
        self._records = by_name

    def __getitem__(self, name: str) -> LogicRecord:
        return self._records[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"LogicCatalog({list(self._records)!r})"

    def search(self, term: str) -> List[LogicRecord]:
        """
        Find records whose name, theories or language mention ``term``.

        Matching is case-insensitive substring matching.
        """
        needle = term.lower()
        hits = []
        for record in self._records.values():
            haystack = [record.name, record.language or ""] + list(record.theories)
            if any(needle in text.lower() for text in haystack):
                hits.append(record)
        return hits

    def with_theory(self, theory: str) -> List[LogicRecord]:
        """Records that list ``theory`` among their theories (exact match)."""
        return [r for r in self._records.values() if theory in r.theories]

    def describe_all(self) -> str:
        """Summaries of every record, separated by blank lines."""
        return "\n\n".join(describe(r) for r in self._records.values())


def load_catalog_dir(directory: Union[str, Path], pattern: str = "*.smt2") -> LogicCatalog:
    """
    Load every logic file in a directory.

    Args:
        directory: Directory to scan (not recursive)
        pattern: Glob for logic files

    Returns:
        LogicCatalog with files loaded in file-name order

    Raises:
        NotADirectoryError: If ``directory`` is not a directory
        MalformedRecord: If any file fails to parse (``error.path`` names it)
        DuplicateLogic: If two files define the same logic
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"Logic directory not found: {root}")
    paths = sorted(p for p in root.glob(pattern) if p.is_file())
    return LogicCatalog(load_file(p) for p in paths)


__all__ = ["LogicCatalog", "load_catalog_dir"]
