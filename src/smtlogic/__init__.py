"""
SMT-LIB Logic Definitions (smtlogic)

Loads, renders and catalogs SMT-LIB logic definition files such as
``QF_FF.smt2``:

    (logic QF_FF
     :smt-lib-version "2.6"
     :theories (FieldElements)
     :language "..."
     ...)

SCOPE:
------
This package models the METADATA of a logic only.
It knows nothing about:
    - Solvers
    - Terms or commands
    - Finite-field arithmetic

Records are immutable and may be shared freely.
"""

from smtlogic.errors import (
    SmtLogicError,
    MalformedRecord,
    DuplicateLogic,
    UnknownKeyWarning,
)
from smtlogic.model import LogicRecord
from smtlogic.logic_parser import load, load_with_warnings, load_file, LoadResult
from smtlogic.serialization import serialize
from smtlogic.describe import describe
from smtlogic.catalog import LogicCatalog, load_catalog_dir

__version__ = "0.1.0"

__all__ = [
    "SmtLogicError",
    "MalformedRecord",
    "DuplicateLogic",
    "UnknownKeyWarning",
    "LogicRecord",
    "LoadResult",
    "load",
    "load_with_warnings",
    "load_file",
    "serialize",
    "describe",
    "LogicCatalog",
    "load_catalog_dir",
]
