"""
Core Logic Model

Defines the one entity of this package: ``LogicRecord``, the metadata of a
single SMT-LIB logic definition (e.g. QF_FF).

ARCHITECTURAL RULE:
    LogicRecord:
        - Knows nothing about the text format it was read from,
          beyond checking that extras hold one well-formed value each
        - Is immutable once constructed
        - Holds descriptive fields only, never behavior
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from smtlogic.errors import MalformedRecord
from smtlogic.sexpr import Atom, AtomKind, is_keyword_name, read_all


# Attribute keys in the order the SMT-LIB logic corpus writes them.
# Each maps a ``:key`` in the file to a LogicRecord field.
STRING_FIELDS = (
    ("smt-lib-version", "smt_lib_version"),
    ("smt-lib-release", "smt_lib_release"),
    ("written-by", "written_by"),
    ("date", "date"),
    ("last-updated", "last_updated"),
    ("update-history", "update_history"),
)

TRAILING_STRING_FIELDS = (
    ("language", "language"),
    ("extensions", "extensions"),
    ("values", "values"),
    ("notes", "notes"),
)

THEORIES_KEY = "theories"

# The corpus writes this one as a bare numeral: :smt-lib-version 2.6
VERSION_KEY = "smt-lib-version"

CANONICAL_KEYS = (
    tuple(key for key, _ in STRING_FIELDS)
    + (THEORIES_KEY,)
    + tuple(key for key, _ in TRAILING_STRING_FIELDS)
)

FIELD_FOR_KEY = dict(STRING_FIELDS + TRAILING_STRING_FIELDS)


@dataclass(frozen=True, eq=False)
class LogicRecord:
    """
    Metadata of one SMT-LIB logic.

    Properties:
        name:
            Logic identifier, e.g. "QF_FF". Required, unique within a catalog.

        smt_lib_version, smt_lib_release:
            Version of the SMT-LIB standard and its release date

        written_by, date, last_updated, update_history:
            Authorship and revision metadata (free text)

        theories:
            Theory names in source order, e.g. ("FieldElements",)

        language, extensions, values, notes:
            Prose describing the logic's language and caveats

        extra:
            Unrecognized keys (without the colon) mapped to the raw
            source text of their value, in source order. The text must
            be exactly one S-expression, or "" for a key with no value.

    INVARIANTS:
        - name is a non-empty string
        - theories is a tuple, extra is a read-only mapping
        - nothing can be reassigned after construction
    """

    name: str
    smt_lib_version: Optional[str] = None
    smt_lib_release: Optional[str] = None
    written_by: Optional[str] = None
    date: Optional[str] = None
    last_updated: Optional[str] = None
    update_history: Optional[str] = None
    theories: Tuple[str, ...] = ()
    language: Optional[str] = None
    extensions: Optional[str] = None
    values: Optional[str] = None
    notes: Optional[str] = None
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("LogicRecord.name must be a non-empty string")
        object.__setattr__(self, "theories", tuple(self.theories))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
        for key, raw in self.extra.items():
            _check_extra(key, raw)

    def __hash__(self):
        return hash((self.name, self.smt_lib_version, self.theories, tuple(self.extra.items())))

    def __eq__(self, other):
        if not isinstance(other, LogicRecord):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self) -> tuple:
        """All fields as a plain tuple, extras as ordered (key, raw) pairs."""
        return (
            self.name,
            self.smt_lib_version,
            self.smt_lib_release,
            self.written_by,
            self.date,
            self.last_updated,
            self.update_history,
            self.theories,
            self.language,
            self.extensions,
            self.values,
            self.notes,
            tuple(self.extra.items()),
        )

    @property
    def author(self) -> Optional[str]:
        return self.written_by

    @property
    def created_date(self) -> Optional[str]:
        return self.date

    @property
    def language_description(self) -> Optional[str]:
        return self.language

    def get(self, key: str) -> Optional[object]:
        """
        Look up a value by its file key (with or without the leading colon).

        Args:
            key: e.g. "written-by" or ":theories"

        Returns:
            The field value, the raw text of an extra key, or None
        """
        key = key.lstrip(":")
        if key == THEORIES_KEY:
            return self.theories
        if key in FIELD_FOR_KEY:
            return getattr(self, FIELD_FOR_KEY[key])
        return self.extra.get(key)


def _check_extra(key: str, raw: str) -> None:
    """Reject extras that would not survive a serialize/load round-trip."""
    if not isinstance(key, str) or not is_keyword_name(key):
        raise ValueError(f"Extra key is not a valid keyword name: {key!r}")
    if key == THEORIES_KEY or key in FIELD_FOR_KEY:
        raise ValueError(f"Extra key :{key} clashes with a recognized field")
    if not isinstance(raw, str):
        raise ValueError(f"Value of extra key :{key} must be raw text, got {type(raw).__name__}")
    if raw == "":
        return
    try:
        nodes = read_all(raw)
    except MalformedRecord as e:
        raise ValueError(f"Value of extra key :{key} is not a valid S-expression: {e}") from e
    if len(nodes) != 1:
        raise ValueError(f"Value of extra key :{key} must be exactly one S-expression: {raw!r}")
    if isinstance(nodes[0], Atom) and nodes[0].kind == AtomKind.KEYWORD:
        raise ValueError(f"Value of extra key :{key} cannot be a keyword: {raw!r}")
