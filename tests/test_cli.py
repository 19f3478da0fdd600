"""Tests for the smtlogic command-line interface."""

import json

import pytest

from smtlogic.cli import main
from smtlogic.logic_parser import load, load_file


class TestCommands:

    def test_describe(self, qf_ff_file, capsys):
        assert main(["describe", str(qf_ff_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("QF_FF (SMT-LIB 2.6)")

    def test_format_to_file(self, qf_ff_file, qf_ff_text, tmp_path):
        out_path = tmp_path / "formatted.smt2"
        assert main(["format", str(qf_ff_file), "-o", str(out_path)]) == 0
        assert load_file(out_path) == load(qf_ff_text)

    def test_export_json(self, qf_ff_file, capsys):
        assert main(["export", str(qf_ff_file), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "QF_FF"
        assert data["theories"] == ["FieldElements"]

    def test_export_yaml_default(self, qf_ff_file, capsys):
        assert main(["export", str(qf_ff_file)]) == 0
        assert "name: QF_FF" in capsys.readouterr().out

    def test_catalog_search(self, qf_ff_file, capsys):
        assert main(["catalog", str(qf_ff_file.parent), "--search", "field"]) == 0
        assert "QF_FF" in capsys.readouterr().out

    def test_catalog_search_no_match(self, qf_ff_file, capsys):
        assert main(["catalog", str(qf_ff_file.parent), "-s", "bitvector"]) == 0
        assert "No logic matches" in capsys.readouterr().out

    def test_enum(self, qf_ff_file, capsys):
        assert main(["enum", str(qf_ff_file.parent)]) == 0
        assert "QF_FF = 'QF_FF'" in capsys.readouterr().out


class TestErrors:

    def test_malformed_file(self, tmp_path, capsys):
        bad = tmp_path / "bad.smt2"
        bad.write_text("(logic)", encoding="utf-8")
        assert main(["describe", str(bad)]) == 1
        err = capsys.readouterr().err
        assert str(bad) in err
        assert "missing required field: name" in err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["describe", str(tmp_path / "nope.smt2")]) == 1
        assert "error:" in capsys.readouterr().err

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
