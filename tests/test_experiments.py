"""
Tests for the command-line tools: solver report, batch runner, plots, path frames.
"""

import csv

import pytest

from puzzles.experiments import plot, runner, solve, visualize_path


class TestSolveCLI:
    def test_clock_report(self, capsys):
        assert solve.main(["clock", "12", "1", "6"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Hours: 12, Start: 1, End: 6"
        assert out[1] == "Total configs: 19"
        assert out[2] == "Unique configs: 11"
        assert out[3:] == [f"Step {i}: {i + 1}" for i in range(6)]

    def test_strings_report(self, capsys):
        solve.main(["strings", "AA", "AB"])
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Start: AA, End: AB"
        assert out[-2:] == ["Step 0: AA", "Step 1: AB"]

    def test_board_no_solution(self, capsys, data_dir):
        solve.main(["chess", str(data_dir / "chess-3.txt")])
        out = capsys.readouterr().out
        assert "Total configs: 1" in out
        assert "No solution" in out

    def test_board_steps_are_multiline(self, capsys, data_dir):
        solve.main(["hoppers", str(data_dir / "hoppers-1.txt")])
        out = capsys.readouterr().out
        assert "Step 1:\n    0 1 2 3 4" in out

    def test_missing_file(self, capsys, tmp_path):
        assert solve.main(["chess", str(tmp_path / "none.txt")]) == 1
        assert "Error reading input file" in capsys.readouterr().err

    def test_bad_arguments(self, capsys):
        assert solve.main(["clock", "12", "0", "3"]) == 1
        assert "not on a 12-hour clock" in capsys.readouterr().err

    def test_usage(self):
        with pytest.raises(SystemExit):
            solve.main(["clock", "12"])


class TestRunner:
    def test_generated_instances(self, tmp_path):
        out = tmp_path / "clock.csv"
        runner.main(["--domain", "clock", "--sizes", "6", "12", "--per_size", "3", "--out", str(out)])
        with out.open() as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 6
        assert list(rows[0]) == runner.HEADER
        assert [r["size"] for r in rows] == ["6"] * 3 + ["12"] * 3
        assert [r["seed"] for r in rows] == [str(i) for i in range(6)]
        for r in rows:
            assert r["termination"] == "ok"
            assert int(r["total_generated"]) >= int(r["unique_visited"])

    def test_board_files(self, tmp_path, data_dir):
        out = tmp_path / "hoppers.csv"
        files = [str(data_dir / n) for n in ("hoppers-1.txt", "hoppers-3.txt")]
        runner.main(["--domain", "hoppers", "--files", *files, "--out", str(out)])
        with out.open() as f:
            rows = list(csv.DictReader(f))
        assert [r["instance"] for r in rows] == ["hoppers-1.txt", "hoppers-3.txt"]
        assert rows[0]["path_len"] == "1"
        assert rows[1]["path_len"] == "" and rows[1]["termination"] == "exhausted"

    def test_board_domain_needs_files(self, tmp_path):
        with pytest.raises(SystemExit):
            runner.main(["--domain", "chess", "--out", str(tmp_path / "x.csv")])

    def test_instances_are_reproducible(self):
        a = runner._gen("strings", [2], 4, start_seed=3)
        b = runner._gen("strings", [2], 4, start_seed=3)
        assert [i.state for i in a] == [i.state for i in b]


class TestPlot:
    def test_agg_mean(self):
        rows = [
            {"domain": "clock", "size": 12, "total_generated": 10},
            {"domain": "clock", "size": 12, "total_generated": 20},
            {"domain": "clock", "size": 24, "total_generated": 40},
        ]
        xs, ys, es = plot.agg_mean(rows, "total_generated")["clock"]
        assert xs == [12, 24]
        assert ys == [15, 40]
        assert es == [5.0, 0.0]

    def test_writes_pngs(self, tmp_path):
        csv_path = tmp_path / "clock.csv"
        runner.main(["--domain", "clock", "--sizes", "6", "12", "--per_size", "2", "--out", str(csv_path)])
        save = tmp_path / "plots"
        plot.main([str(csv_path), "--save", str(save)])
        names = sorted(p.name for p in save.glob("*.png"))
        assert "clock_combined.png" in names
        assert "clock_unique_visited.png" in names


def test_visualize_path_frames(tmp_path, data_dir):
    outdir = tmp_path / "frames"
    assert visualize_path.main(["chess", str(data_dir / "chess-1.txt"), "--outdir", str(outdir)]) == 0
    assert sorted(p.name for p in outdir.glob("*.png")) == [f"step_{i:03d}.png" for i in range(4)]
