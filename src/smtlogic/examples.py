"""
Bundled logic definitions.

Ships the SMT-LIB definitions this package knows about as package data
under ``smtlogic/logics`` and loads them on request.
"""
from importlib import resources

from smtlogic.catalog import LogicCatalog
from smtlogic.logic_parser import load
from smtlogic.model import LogicRecord


_LOGIC_PACKAGE = "smtlogic.logics"


def builtin_logic_names():
    """Names of the bundled logics, sorted."""
    files = resources.files(_LOGIC_PACKAGE).iterdir()
    return sorted(f.name[:-len(".smt2")] for f in files if f.name.endswith(".smt2"))


def builtin_logic_text(name: str) -> str:
    """Raw text of a bundled logic file, e.g. ``builtin_logic_text("QF_FF")``."""
    resource = resources.files(_LOGIC_PACKAGE).joinpath(f"{name}.smt2")
    if not resource.is_file():
        raise KeyError(f"No bundled logic named {name!r}")
    return resource.read_text(encoding="utf-8")


def load_builtin(name: str) -> LogicRecord:
    return load(builtin_logic_text(name))


def builtin_catalog() -> LogicCatalog:
    return LogicCatalog(load_builtin(name) for name in builtin_logic_names())
