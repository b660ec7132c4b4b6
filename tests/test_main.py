"""Smoke tests for the command-line entry point."""

import os

from main import main


def test_main_simulates_and_analyzes(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data = tmp_path / "data" / "sample.tsv"
    out = tmp_path / "out"
    code = main(
        [
            "--simulate",
            "--seed",
            "0",
            "--data",
            str(data),
            "--output-dir",
            str(out),
            "--no-plots",
        ]
    )
    assert code == 0
    assert data.exists()
    assert (out / "predictions.csv").exists()
    assert (out / "summary.txt").exists()


def test_main_missing_data_returns_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = main(["--data", str(tmp_path / "missing.tsv"), "--no-plots"])
    assert code == 1
    assert not os.path.exists(tmp_path / "output" / "predictions.csv")
