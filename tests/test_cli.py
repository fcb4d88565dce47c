"""Tests for the command-line entry point."""
import json
import logging

import pytest

from storerota.cli import main


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("storerota")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def prefs_csv(tmp_path):
    path = tmp_path / "prefs.csv"
    path.write_text(
        "name,day,slot\n"
        "w1,Mon,Morning\n"
        "w2,Mon,Morning\n"
        "w3,Mon,Morning\n"
        "w1,Tue,Evening\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def workers_csv(tmp_path):
    path = tmp_path / "workers.csv"
    path.write_text("id,name,salary_coefficient\nE1,w1,1.0\nE2,w2,2\nE3,w3,\n", encoding="utf-8")
    return path


class TestCLI:
    """Tests for CLI runs."""

    def test_text_output(self, prefs_csv, capsys):
        code = main(["--preferences", str(prefs_csv), "--locations", "A", "B"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Summary:" in out
        assert "A: 3/35" in out
        assert "B: 1/35" in out
        assert "all locations: 4/70" in out

    def test_json_output(self, prefs_csv, capsys):
        code = main(["--preferences", str(prefs_csv), "--locations", "A", "B", "--json"])
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        assert data["rosters"]["A"]["Mon"]["Morning"] == ["w1", "w2"]
        assert data["rosters"]["B"]["Mon"]["Morning"] == ["w3"]
        assert data["overall"]["total_assigned"] == 4
        assert data["overall"]["per_worker_count"]["w1"] == 2

    def test_payroll(self, prefs_csv, workers_csv, capsys):
        code = main([
            "--preferences", str(prefs_csv), "--locations", "A",
            "--workers", str(workers_csv), "--base-rate", "10", "--json",
        ])
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        salaries = {line["name"]: line["salary"] for line in data["payroll"]}
        assert salaries["w1"] == 8 * 10
        assert salaries["w2"] == 4 * 10 * 2
        assert salaries["w3"] == 0

    def test_capacity_override(self, prefs_csv, capsys):
        code = main([
            "--preferences", str(prefs_csv), "--locations", "A", "B",
            "--capacity", "Morning=3", "--json",
        ])
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        assert data["rosters"]["A"]["Mon"]["Morning"] == ["w1", "w2", "w3"]
        assert data["overall"]["total_required"] == 2 * 7 * 6

    @pytest.mark.parametrize("extra", [
        ["--locations", "A", "A"],
        ["--locations", "A", "--capacity", "Morning=0"],
        ["--locations", "A", "--capacity", "Night=2"],
    ])
    def test_invalid_config(self, prefs_csv, extra, capsys):
        code = main(["--preferences", str(prefs_csv), *extra])
        assert code == 2
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert captured.out == ""

    def test_missing_file(self, tmp_path, capsys):
        code = main(["--preferences", str(tmp_path / "missing.csv"), "--locations", "A"])
        assert code == 2
        assert "File not found" in capsys.readouterr().err

    def test_negative_coefficient_rejected(self, prefs_csv, tmp_path, capsys):
        workers = tmp_path / "workers.csv"
        workers.write_text("id,name,salary_coefficient\nE1,w1,-1\n", encoding="utf-8")

        code = main(["--preferences", str(prefs_csv), "--locations", "A", "--workers", str(workers)])
        assert code == 2
        assert "non-negative" in capsys.readouterr().err


class TestJSONStream:
    """JSON output stays parseable while logging is active."""

    def test_warnings_go_to_stderr(self, tmp_path, capsys):
        path = tmp_path / "prefs.csv"
        path.write_text("name,day,slot\nw1,Mon,Morning\nw2,Funday,Morning\n", encoding="utf-8")

        code = main(["--preferences", str(path), "--locations", "A", "--json"])
        captured = capsys.readouterr()
        data = json.loads(captured.out)

        assert code == 0
        assert data["rosters"]["A"]["Mon"]["Morning"] == ["w1"]
        assert "Skipping unknown day 'Funday'" in captured.err

    @pytest.mark.parametrize("verbosity", ["-v", "-vv"])
    def test_verbose_json(self, prefs_csv, verbosity, capsys):
        code = main(["--preferences", str(prefs_csv), "--locations", "A", "B", "--json", verbosity])
        captured = capsys.readouterr()
        data = json.loads(captured.out)

        assert code == 0
        assert data["overall"]["total_assigned"] == 4
        assert "Allocation complete" in captured.err

    def test_payroll_warning_kept_out_of_json(self, prefs_csv, tmp_path, capsys):
        workers = tmp_path / "workers.csv"
        workers.write_text("id,name\nE1,w1\n", encoding="utf-8")

        code = main([
            "--preferences", str(prefs_csv), "--locations", "A",
            "--workers", str(workers), "--json",
        ])
        captured = capsys.readouterr()
        data = json.loads(captured.out)

        assert code == 0
        assert [line["name"] for line in data["payroll"]] == ["w1"]
        assert "without a worker record" in captured.err
