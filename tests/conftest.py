"""Shared fixtures: the QF_FF logic definition as text and as a file."""

import pytest


QF_FF_TEXT = '''(logic QF_FF
 :smt-lib-version "2.6"
 :smt-lib-release "2017-07-18"
 :written-by "Cesare Tinelli"
 :date "2023-05-17"
 :last-updated "2023-05-17"
 :update-history
 "Note: history only accounts for content changes, not release changes.
 2023-05-17 Created.
 "
 :theories (FieldElements)
 :language
 "Closed quantifier-free formulas built over an arbitrary expansion of the
  FieldElements signature with free constant symbols.
  Field element sorts are of the form (_ FiniteField p) with p prime.
 "
 :notes
 "This logic is experimental and may change without notice."
)
'''


@pytest.fixture
def qf_ff_text():
    return QF_FF_TEXT


@pytest.fixture
def qf_ff_file(tmp_path):
    path = tmp_path / "QF_FF.smt2"
    path.write_text(QF_FF_TEXT, encoding="utf-8")
    return path
