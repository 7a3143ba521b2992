"""
Tests for the sheet-clean command line entry point.
"""
from sheet_cleaner.cli import main


def test_cleans_csv_file(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_text("name,city\n  bob ,\nBOB,\n,\n", encoding="utf-8")
    dest = tmp_path / "out.csv"

    exit_code = main([str(src), "-o", str(dest), "--report"])

    assert exit_code == 0
    assert dest.read_text(encoding="utf-8") == "Name,City\nBob,N/A\n"
    out = capsys.readouterr().out
    assert "Rows: 4 → 2" in out
    assert "DATA CLEANING REPORT" in out


def test_custom_placeholder_and_keep_case(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("NASA,\n", encoding="utf-8")
    dest = tmp_path / "out.csv"

    assert main([str(src), "-o", str(dest), "--placeholder", "?", "--keep-case"]) == 0
    assert dest.read_text(encoding="utf-8") == "NASA,?\n"


def test_missing_input_file(tmp_path):
    assert main([str(tmp_path / "missing.csv"), "-o", str(tmp_path / "out.csv")]) == 1


def test_empty_input_file(tmp_path):
    src = tmp_path / "empty.csv"
    src.write_text("")

    assert main([str(src), "-o", str(tmp_path / "out.csv")]) == 1
