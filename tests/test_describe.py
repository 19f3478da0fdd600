"""Tests for human-readable summaries."""

from smtlogic.describe import describe, first_sentence
from smtlogic.logic_parser import load
from smtlogic.model import LogicRecord


class TestFirstSentence:

    def test_collapses_whitespace(self):
        text = "Closed formulas built over\n  the signature.  More text."
        assert first_sentence(text) == "Closed formulas built over the signature."

    def test_no_terminator(self):
        assert first_sentence("  just a fragment ") == "just a fragment"

    def test_empty(self):
        assert first_sentence(None) == ""
        assert first_sentence("") == ""


class TestDescribe:

    def test_qf_ff_summary(self, qf_ff_text):
        out = describe(load(qf_ff_text))
        lines = out.splitlines()
        assert lines[0] == "QF_FF (SMT-LIB 2.6)"
        assert lines[1] == "  theories: FieldElements"
        assert lines[2] == (
            "  language: Closed quantifier-free formulas built over an arbitrary "
            "expansion of the FieldElements signature with free constant symbols."
        )
        assert "Field element sorts" not in out

    def test_idempotent(self, qf_ff_text):
        record = load(qf_ff_text)
        assert describe(record) == describe(record)
        assert record == load(qf_ff_text)

    def test_minimal_record(self):
        out = describe(LogicRecord(name="L"))
        assert out == "L\n  theories: (none)"

    def test_several_theories(self):
        out = describe(LogicRecord(name="L", theories=("Ints", "ArraysEx")))
        assert "theories: Ints, ArraysEx" in out
