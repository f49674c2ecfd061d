import json

from scripts.run_batch import main


def test_batch_records_answers_and_load_errors(tmp_path, capsys):
    puzzles = tmp_path / "puzzles"
    puzzles.mkdir()
    (puzzles / "closed.txt").write_text("2 1\n1 2 C\n2 P\n", encoding="utf-8")
    (puzzles / "broken.txt").write_text("3 1\n1 2 O\n1 5 C\n2 P\n", encoding="utf-8")
    out_root = tmp_path / "runs"

    main(["--input-dir", str(puzzles), "--output", str(out_root)])

    rows = json.loads((out_root / "summary.json").read_text(encoding="utf-8"))
    by_run = {row["run"]: row for row in rows}
    assert by_run["closed"]["toggles"] == 1
    assert by_run["closed"]["error"] is None
    assert by_run["broken"]["toggles"] is None
    assert "vertex 5" in by_run["broken"]["error"]
    assert (out_root / "summary.csv").read_text(encoding="utf-8").startswith("run,input,toggles")
    assert "1 failed to load" in capsys.readouterr().out


def test_batch_records_undecodable_files(tmp_path):
    puzzles = tmp_path / "puzzles"
    puzzles.mkdir()
    (puzzles / "good.txt").write_text("2 1\n1 2 O\n2 P\n", encoding="utf-8")
    (puzzles / "binary.txt").write_bytes(b"2 1\n1 2 \xff\n2 P\n")
    out_root = tmp_path / "runs"

    main(["--input-dir", str(puzzles), "--output", str(out_root)])

    rows = json.loads((out_root / "summary.json").read_text(encoding="utf-8"))
    by_run = {row["run"]: row for row in rows}
    assert by_run["good"]["toggles"] == 0
    assert by_run["binary"]["toggles"] is None
    assert "not valid UTF-8" in by_run["binary"]["error"]
    assert (out_root / "summary.csv").exists()
