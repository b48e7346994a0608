"""
Tests for the AST source inspector, the JSON report and the CLI
"""

import json

import pytest

from pacts.cli import main
from pacts.output import ConditionReportFormatter
from pacts.parser import ContractSourceParser

SOURCE = '''
class Calculator:
    def add(self, a, b):
        """
        @param int a
        @param int b
        """
        return a + b

    def divide(self, a, b):
        """
        @param float a
        @pre not_zero 2
        """
        return a / b

    def reset(self):
        pass


def shout(text):
    """:param str text: What to shout"""
    return text.upper()
'''


def test_parse_source_finds_every_function():
    """Test every method and function is listed"""
    functions = ContractSourceParser().parse_source(SOURCE)
    names = [(f["class"], f["name"]) for f in functions]
    assert names == [
        ("Calculator", "add"),
        ("Calculator", "divide"),
        ("Calculator", "reset"),
        (None, "shout"),
    ]


def test_parse_source_descriptors():
    """Test descriptors found in source"""
    functions = {f["name"]: f for f in ContractSourceParser().parse_source(SOURCE)}
    assert functions["add"]["preconditions"] == [
        {"check": "basic", "type": "int", "param": 1},
        {"check": "basic", "type": "int", "param": 2},
    ]
    assert functions["divide"]["preconditions"] == [
        {"check": "basic", "type": "float", "param": 1},
        {"check": "custom", "type": "not_zero", "param": 2},
    ]
    assert functions["reset"]["preconditions"] == []
    assert functions["shout"]["preconditions"] == [{"check": "basic", "type": "str", "param": 1}]


def test_parse_file(tmp_path):
    """Test parsing a file from disk"""
    path = tmp_path / "calc.py"
    path.write_text(SOURCE)
    assert len(ContractSourceParser().parse_file(str(path))) == 4


def test_parse_invalid_source():
    """Test invalid source raises SyntaxError"""
    with pytest.raises(SyntaxError):
        ContractSourceParser().parse_source("def broken(:\n")


def test_report_formatter(tmp_path):
    """Test the JSON report contents"""
    path = tmp_path / "calc.py"
    path.write_text(SOURCE)

    formatter = ConditionReportFormatter(str(path))
    for func in ContractSourceParser().parse_file(str(path)):
        formatter.add_entry(func["name"], func["lineno"], func["preconditions"], func["class"])

    report = formatter.to_dict()
    assert report["schema_version"] == "1.0.0"
    assert len(report["source_hash"]) == 64
    assert report["summary"] == {
        "functions": 4,
        "with_preconditions": 3,
        "preconditions": {"basic": 4, "class": 0, "custom": 1},
    }
    assert report["functions"][0]["name"] == "Calculator.add"

    output = tmp_path / "report.json"
    formatter.save(str(output))
    assert json.loads(output.read_text())["source_file"] == str(path)


def test_cli_text_output(tmp_path, capsys):
    """Test CLI text listing"""
    path = tmp_path / "calc.py"
    path.write_text(SOURCE)

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Calculator.add" in out
    assert "[custom] not_zero -> argument 2" in out
    assert "3/4 functions declare preconditions" in out


def test_cli_json_output(tmp_path, capsys):
    """Test CLI JSON report"""
    path = tmp_path / "calc.py"
    path.write_text(SOURCE)

    assert main([str(path), "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["summary"]["functions"] == 4


def test_cli_missing_file(tmp_path, capsys):
    """Test CLI on a missing file"""
    assert main([str(tmp_path / "nope.py")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_cli_syntax_error(tmp_path, capsys):
    """Test CLI on unparsable source"""
    path = tmp_path / "bad.py"
    path.write_text("def broken(:\n")
    assert main([str(path)]) == 1
    assert "Cannot parse" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
