from __future__ import annotations

import json

import pytest

import mpesa_statement.cli as cli
from mpesa_statement.data_model import DateFormatPolicy, LineEmission, UnparsedDatePolicy


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from reconfiguring logging or creating ./logs during tests."""
    calls = []
    monkeypatch.setattr(cli, "configure_logging", lambda *a, **k: calls.append(a))
    return calls


@pytest.fixture
def statement_file(tmp_path, make_statement, make_workbook, sample_metadata):
    path = tmp_path / "statement.xlsx"
    path.write_bytes(
        make_workbook(
            make_statement(
                sample_metadata,
                [
                    ["TXN001", "15/03/2024", None, None, None, "1000", None],
                    ["TXN002", "16/03/2024", None, None, None, None, "(250.75)"],
                ],
            )
        )
    )
    return path


def test_main_writes_both_files(statement_file, tmp_path, capsys):
    out_dir = tmp_path / "out"

    rc = cli.main([str(statement_file), "-o", str(out_dir)])

    assert rc == 0
    assert (out_dir / "M-Pesa-Header.xlsx").is_file()
    assert (out_dir / "M-Pesa-Lines.xlsx").is_file()
    printed = capsys.readouterr().out.splitlines()
    assert printed == [str(out_dir / "M-Pesa-Header.xlsx"), str(out_dir / "M-Pesa-Lines.xlsx")]


def test_main_summary_csv(statement_file, tmp_path, capsys):
    rc = cli.main(
        [str(statement_file), "-o", str(tmp_path), "--format", "csv", "--summary"]
    )

    assert rc == 0
    out = capsys.readouterr().out
    summary = json.loads(out[out.index("{"):])
    assert summary["line_count"] == 2
    assert summary["header"]["ENDINGBALANCE"] == 749.25
    assert (tmp_path / "M-Pesa-Lines.csv").is_file()


def test_verbose_sets_debug(statement_file, tmp_path, no_logging_setup):
    cli.main([str(statement_file), "-o", str(tmp_path), "-v", "--log-dir", str(tmp_path)])
    assert no_logging_setup == [(tmp_path, "DEBUG")]


def test_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit) as ei:
        cli.main([str(tmp_path / "absent.xlsx")])
    assert "not found" in str(ei.value)


def test_unreadable_input_exits(tmp_path):
    bad = tmp_path / "statement.xlsx"
    bad.write_bytes(b"not a workbook")
    with pytest.raises(SystemExit) as ei:
        cli.main([str(bad), "-o", str(tmp_path)])
    assert "Conversion failed" in str(ei.value)


def test_config_file_then_flags(tmp_path):
    # Arrange
    cfg_path = tmp_path / "settings.json"
    cfg_path.write_text(
        json.dumps({"date_format_policy": "month-first", "line_emission": "netted"}),
        encoding="utf-8",
    )
    args = cli.build_parser().parse_args(
        ["in.xlsx", "--config", str(cfg_path), "--date-policy", "auto", "--unparsed-date", "abort"]
    )

    # Act
    config = cli.config_from_args(args)

    # Assert
    assert config.date_format_policy is DateFormatPolicy.AUTO
    assert config.line_emission is LineEmission.NETTED
    assert config.unparsed_date_policy is UnparsedDatePolicy.ABORT
    assert config.day_swap_output is False


def test_bad_config_file_exits(tmp_path, statement_file):
    cfg_path = tmp_path / "settings.json"
    cfg_path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.main([str(statement_file), "--config", str(cfg_path)])

    cfg_path.write_text('{"date_format_policy": "sideways"}', encoding="utf-8")
    with pytest.raises(SystemExit) as ei:
        cli.main([str(statement_file), "--config", str(cfg_path)])
    assert "date_format_policy" in str(ei.value)
