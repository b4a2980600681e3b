import json

from click.testing import CliRunner

from share_recovery.cli import main

DOCUMENT = {
    "keys": {"n": 6, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_prints_secret(write_document):
    path = write_document(json.dumps(DOCUMENT))
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert result.output.strip() == "3"


def test_report(write_document):
    path = write_document(json.dumps(DOCUMENT))
    result = CliRunner().invoke(main, [str(path), "--report"])
    assert result.exit_code == 0
    assert "secret: 3" in result.output
    assert "agreement: 4/4" in result.output
    assert "suspect shares: none" in result.output


def test_yaml_input(write_document):
    path = write_document("keys: {n: 2, k: 2}\n1: {base: 10, value: '3'}\n2: {base: 10, value: '5'}\n", "s.yaml")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert result.output.strip() == "1"


def test_core_failure_exits_non_zero(write_document):
    path = write_document('{"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "4242"}}')
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "InsufficientShares" in result.output
    assert "4242" not in result.output


def test_malformed_expression_reported(write_document):
    path = write_document('{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "sqrt(777)"}}')
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "MalformedExpression" in result.output
    assert "777" not in result.output


def test_missing_input_is_usage_error(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "nope.json")])
    assert result.exit_code == 2


def test_secret_longer_than_int_str_limit(write_document):
    path = write_document('{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "power(10, 5000)"}}')
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert result.output.strip() == "1" + "0" * 5000


def test_long_literal_share_value(write_document):
    digits = "7" * 5000
    document = '{"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "%s"}, "2": {"base": "10", "value": "%s"}}'
    path = write_document(document % (digits, digits))
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert result.output.strip() == digits


def test_run_leaves_no_files_behind(write_document, tmp_path, monkeypatch):
    path = write_document(json.dumps(DOCUMENT))
    monkeypatch.chdir(tmp_path)
    before = sorted(tmp_path.rglob("*"))
    result = CliRunner().invoke(main, [str(path), "--report"])
    assert result.exit_code == 0
    assert sorted(tmp_path.rglob("*")) == before
