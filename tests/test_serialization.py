"""
Tests for serialization of LogicRecord objects.

These tests ensure:
    - serialize emits the canonical key order
    - load(serialize(load(t))) reproduces load(t) field by field
    - lossless JSON/YAML round-trip through the dict form
"""

import json

import pytest

from smtlogic.logic_parser import load, load_with_warnings
from smtlogic.model import LogicRecord
from smtlogic.serialization import (
    record_from_dict,
    record_from_json,
    record_from_yaml,
    record_to_dict,
    record_to_json,
    record_to_yaml,
    serialize,
)


def build_sample_record() -> LogicRecord:
    return LogicRecord(
        name="QF_FF",
        smt_lib_version="2.6",
        written_by="Cesare Tinelli",
        update_history='First line.\nSecond line with "quotes".',
        theories=("FieldElements",),
        language="Closed quantifier-free formulas.",
        notes="Experimental.",
        extra={"foo": '"bar"', "sorts": "((F 0))"},
    )


class TestSerialize:
    """Test rendering to the S-expression form."""

    def test_name_only(self):
        assert serialize(LogicRecord(name="L")) == "(logic L\n)\n"

    def test_canonical_order(self):
        text = '(logic L :notes "n" :language "l" :theories (A) :written-by "w" :smt-lib-version "2.6")'
        out = serialize(load(text))
        positions = [out.index(k) for k in
                     (":smt-lib-version", ":written-by", ":theories", ":language", ":notes")]
        assert positions == sorted(positions)

    def test_extras_last_and_verbatim(self):
        out = serialize(build_sample_record())
        assert out.index(":notes") < out.index(":foo") < out.index(":sorts")
        assert ':foo "bar"' in out
        assert ":sorts ((F 0))" in out

    def test_quotes_escaped(self):
        out = serialize(build_sample_record())
        assert 'Second line with ""quotes"".' in out

    def test_absent_fields_omitted(self):
        out = serialize(LogicRecord(name="L", notes="n"))
        assert ":theories" not in out
        assert ":language" not in out
        assert ':notes "n"' in out

    def test_theory_order_kept(self):
        out = serialize(load("(logic L :theories (C A B))"))
        assert ":theories (C A B)" in out

    def test_custom_indent(self):
        out = serialize(LogicRecord(name="L", notes="n"), indent="    ")
        assert '\n    :notes "n"\n' in out

    def test_odd_names_quoted(self):
        out = serialize(LogicRecord(name="odd name", theories=("A B",)))
        assert out.startswith("(logic |odd name|")
        assert ":theories (|A B|)" in out


class TestRoundTrip:
    """serialize followed by load gives back the same record."""

    def test_qf_ff_roundtrip(self, qf_ff_text):
        record = load(qf_ff_text)
        assert load(serialize(record)) == record

    def test_roundtrip_with_extras_and_quotes(self):
        record = build_sample_record()
        restored = load_with_warnings(serialize(record)).record
        assert restored == record
        assert list(restored.extra) == ["foo", "sorts"]

    def test_serialize_is_stable(self, qf_ff_text):
        once = serialize(load(qf_ff_text))
        assert serialize(load(once)) == once


class TestDictFormats:
    """JSON and YAML round-trips through the dict form."""

    def test_dict_roundtrip(self):
        record = build_sample_record()
        assert record_from_dict(record_to_dict(record)) == record

    def test_json_roundtrip(self):
        record = build_sample_record()
        restored = record_from_json(record_to_json(record))
        assert restored == record

    def test_json_shape(self):
        d = json.loads(record_to_json(build_sample_record()))
        assert d["name"] == "QF_FF"
        assert d["theories"] == ["FieldElements"]
        assert d["extra"] == {"foo": '"bar"', "sorts": "((F 0))"}

    def test_yaml_roundtrip(self, qf_ff_text):
        record = load(qf_ff_text)
        restored = record_from_yaml(record_to_yaml(record))
        assert restored == record

    def test_from_dict_minimal(self):
        assert record_from_dict({"name": "L"}) == LogicRecord(name="L")

    def test_from_dict_rejects_bad_extra(self):
        with pytest.raises(ValueError):
            record_from_dict({"name": "L", "extra": {"foo": "bar baz"}})


class TestCorpusForms:
    """Numeral versions and bare keys survive serialize/load."""

    def test_numeral_version_unquoted(self):
        record = load("(logic QF_BV :smt-lib-version 2.6)")
        out = serialize(record)
        assert "\n :smt-lib-version 2.6\n" in out
        assert load(out) == record

    def test_non_numeral_version_stays_quoted(self):
        out = serialize(LogicRecord(name="L", smt_lib_version="2.6 draft"))
        assert ':smt-lib-version "2.6 draft"' in out

    def test_bare_key(self):
        record = load_with_warnings('(logic L :flag :notes "n")').record
        out = serialize(record)
        assert "\n :flag\n" in out
        assert load_with_warnings(out).record == record