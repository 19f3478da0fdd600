"""
Tests for the Python enum source backend.

The generated module must compile, expose one member per logic, and
keep logic names outside the catalog usable.
"""

import pytest

from smtlogic.backends import generate_logic_enum, save_logic_enum
from smtlogic.backends.enum_source import _member_name
from smtlogic.catalog import LogicCatalog
from smtlogic.logic_parser import load
from smtlogic.model import LogicRecord


def _exec_source(source: str) -> dict:
    namespace = {}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


class TestGenerateLogicEnum:
    """Test generated enum source."""

    def test_generated_enum_works(self, qf_ff_text):
        catalog = LogicCatalog([load(qf_ff_text), LogicRecord(name="QF_LIA")])
        Logic = _exec_source(generate_logic_enum(catalog))["Logic"]

        assert Logic.QF_FF.value == "QF_FF"
        assert str(Logic.QF_LIA) == "QF_LIA"
        assert [m.name for m in Logic] == ["QF_FF", "QF_LIA"]

    def test_parse_known_and_custom(self):
        catalog = LogicCatalog([LogicRecord(name="QF_FF")])
        Logic = _exec_source(generate_logic_enum(catalog))["Logic"]

        assert Logic.parse("QF_FF") is Logic.QF_FF
        assert Logic.parse("MY_LOGIC") == "MY_LOGIC"

    def test_language_as_doc_comment(self, qf_ff_text):
        source = generate_logic_enum(LogicCatalog([load(qf_ff_text)]))
        assert "    #: Closed quantifier-free formulas built over an arbitrary expansion of the" in source
        assert "    #: FieldElements signature with free constant symbols." in source

    def test_without_docs(self, qf_ff_text):
        source = generate_logic_enum(LogicCatalog([load(qf_ff_text)]), with_docs=False)
        assert "#:" not in source

    def test_class_name(self):
        source = generate_logic_enum(LogicCatalog([LogicRecord(name="A")]), class_name="SmtLogic")
        assert "SmtLogic" in _exec_source(source)

    def test_empty_catalog_compiles(self):
        Logic = _exec_source(generate_logic_enum(LogicCatalog()))["Logic"]
        assert list(Logic) == []

    def test_identifier_clash(self):
        catalog = LogicCatalog([LogicRecord(name="QF-AB"), LogicRecord(name="QF_AB")])
        with pytest.raises(ValueError, match="identifier QF_AB"):
            generate_logic_enum(catalog)

    def test_save(self, tmp_path):
        path = tmp_path / "logics.py"
        save_logic_enum(LogicCatalog([LogicRecord(name="QF_FF")]), str(path))
        assert "QF_FF = 'QF_FF'" in path.read_text(encoding="utf-8")


class TestMemberName:

    @pytest.mark.parametrize("name,expected", [
        ("QF_FF", "QF_FF"),
        ("QF-AB", "QF_AB"),
        ("2X", "_2X"),
        ("class", "_class"),
    ])
    def test_member_name(self, name, expected):
        assert _member_name(name) == expected
