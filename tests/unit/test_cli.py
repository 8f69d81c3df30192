"""Tests for the trading-journal command line."""

import json

import pytest
from click.testing import CliRunner

from trading_journal.cli import main
from trading_journal.journal.export import BOM


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setenv("JOURNAL_OBSERVABILITY__LOG_LEVEL", "WARNING")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def trades_file(api_rows, tmp_path):
    path = tmp_path / "trades.json"
    path.write_text(json.dumps(api_rows), encoding="utf-8")
    return path


def test_report_outputs_json(runner, trades_file):
    result = runner.invoke(main, ["report", str(trades_file), "--week", "2024-03-06"])
    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["summary"]["total_trades"] == 3
    assert report["weekly_recap"]["trades"] == 2


def test_report_filters_and_capital(runner, trades_file):
    result = runner.invoke(main, [
        "report", str(trades_file), "--capital", "1000",
        "--from", "2024-03-05", "--pair", "GBPUSD",
    ])
    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["summary"]["total_trades"] == 1
    assert report["equity_curve"][-1]["equity"] == 900.0


def test_report_rejects_bad_date(runner, trades_file):
    result = runner.invoke(main, ["report", str(trades_file), "--from", "03/05/2024"])
    assert result.exit_code != 0
    assert "YYYY-MM-DD" in result.output


def test_summary(runner, trades_file):
    result = runner.invoke(main, ["summary", str(trades_file)])
    assert result.exit_code == 0, result.output
    assert "3 (2W / 1L)" in result.output
    assert "10200.00" in result.output


def test_export_csv(runner, trades_file, tmp_path):
    out = tmp_path / "export.csv"
    result = runner.invoke(main, ["export", str(trades_file), str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8").startswith(BOM)


def test_export_unknown_format(runner, trades_file, tmp_path):
    result = runner.invoke(main, ["export", str(trades_file), str(tmp_path / "x.xlsx")])
    assert result.exit_code == 1
    assert "Cannot export" in result.output


def test_ruin_levels(runner, trades_file):
    result = runner.invoke(main, ["ruin", str(trades_file), "--risk", "1", "--risk", "2"])
    assert result.exit_code == 0, result.output
    assert "Sample: 3 trades" in result.output
    assert "statistical estimate" in result.output


def test_monthly(runner, trades_file):
    result = runner.invoke(main, ["monthly", str(trades_file)])
    assert result.exit_code == 0, result.output
    assert "Mar 24" in result.output
    assert "Apr 24" in result.output


def test_invalid_trade_file(runner, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"date": "2024-01-01"}]), encoding="utf-8")
    result = runner.invoke(main, ["summary", str(path)])
    assert result.exit_code == 1
    assert "Invalid trade #0" in result.output


def test_missing_config(runner, trades_file, tmp_path):
    result = runner.invoke(main, ["--config", str(tmp_path / "none.toml"), "summary", str(trades_file)])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_object_without_trades_is_rejected(runner, api_rows, tmp_path):
    path = tmp_path / "wrapped.json"
    path.write_text(json.dumps({"data": api_rows}), encoding="utf-8")
    result = runner.invoke(main, ["report", str(path)])
    assert result.exit_code == 1
    assert "'trades' list" in result.output
