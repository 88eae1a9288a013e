# python -m pytest -q tests/test_cli.py
"""
Unit tests for the command-line entry point.
"""
import json
from levelgraphs import cli

# 1) Output to stdout
def test_main_prints_suite(capsys):
    assert cli.main(["-l", "3", "-n", "4", "-s", "10", "-L", "Haskell"]) == 0
    out = capsys.readouterr().out
    assert out.count(":: GenHaxl u Int") == 4

# 2) Output to file, preamble prepended
def test_main_writes_file_with_preamble(tmp_path):
    preamble = tmp_path / "pre.clj"
    preamble.write_text("(ns bench.core)\n\n")
    out_file = tmp_path / "bench.clj"
    assert cli.main(["-l", "3", "-n", "3", "-s", "4", "-p", str(preamble), "-o", str(out_file)]) == 0
    text = out_file.read_text()
    assert text.startswith("(ns bench.core)\n\n(defn test-0 []")
    assert text.count("(defn ") == 3

# 3) Reproducible with a seed
def test_main_reproducible(tmp_path):
    a, b = tmp_path / "a.txt", tmp_path / "b.txt"
    args = ["-l", "5", "-n", "6", "-s", "99", "-L", "Graph", "--percentage-ifs", "0.5"]
    assert cli.main(args + ["-o", str(a)]) == 0
    assert cli.main(args + ["-o", str(b)]) == 0
    assert a.read_text() == b.read_text()

# 4) Invalid requests are rejected before generation
def test_main_rejects_invalid_arguments(tmp_path):
    out_file = tmp_path / "never.txt"
    assert cli.main(["-l", "-1", "-o", str(out_file)]) == 1
    assert cli.main(["-L", "Cobol", "-o", str(out_file)]) == 1
    assert cli.main(["--percentage-sources", "0.8", "--percentage-sinks", "0.5", "-o", str(out_file)]) == 1
    assert not out_file.exists()

def test_main_missing_preamble(tmp_path):
    assert cli.main(["-p", str(tmp_path / "nope.txt"), "-s", "1"]) == 1

# 5) Config file, flags override it
def test_main_config_file_and_override(tmp_path, capsys):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"levels": 2, "total_graphs": 2, "language": "Lisp", "seed": 5}))
    assert cli.main(["--config", str(settings), "-L", "Graph"]) == 0
    out = capsys.readouterr().out
    assert out.count("digraph ") == 2

# 6) Summary CSV
def test_main_writes_summary(tmp_path, capsys):
    folder = tmp_path / "results"
    assert cli.main(["-l", "3", "-n", "5", "-s", "2", "--summary", str(folder)]) == 0
    files = list((folder / "lisp").glob("summary_lisp_*.csv"))
    assert len(files) == 1
    assert len(files[0].read_text().strip().splitlines()) == 6

def test_main_rejects_badly_typed_config(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"levels": "3"}))
    assert cli.main(["--config", str(settings), "-o", str(tmp_path / "never.txt")]) == 1
    assert not (tmp_path / "never.txt").exists()
