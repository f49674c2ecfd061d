"""Batch solver for a directory of door tree puzzles."""
from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Dict, List
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from configs import BatchSettings, Config
from door_tree import PuzzleLoadError, Solution, save_json
from door_tree.io_utils import ensure_dir
from src.main import execute_run

FIELDNAMES = ["run", "input", "toggles", "root_need", "vertex_count", "room_count", "error"]


def _summarise_run(config: Config, solution: Solution | None, error: str | None = None) -> Dict:
    """Build a single CSV-style summary row."""

    return {
        "run": config.label(),
        "input": config.input_path,
        "toggles": solution.toggles if solution else None,
        "root_need": solution.root_need.value if solution else None,
        "vertex_count": solution.vertex_count if solution else None,
        "room_count": solution.room_count if solution else None,
        "error": error,
    }


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Batch door tree solves")
    parser.add_argument("--input-dir", help="Override the puzzle directory defined in configs.BatchSettings")
    parser.add_argument("--pattern", help="Glob pattern for puzzle files")
    parser.add_argument("--output", help="Override batch output root directory")
    parser.add_argument("--render", action="store_true", help="Render every tree as a PNG")
    args = parser.parse_args(argv)

    settings = BatchSettings()
    if args.input_dir:
        settings.input_dir = args.input_dir
    if args.pattern:
        settings.pattern = args.pattern
    if args.output:
        settings.output_root = args.output
    if args.render:
        settings.render = True

    summaries = []
    for config in settings.iter_configs():
        try:
            solution = execute_run(config)
        except PuzzleLoadError as exc:
            summaries.append(_summarise_run(config, None, error=str(exc)))
            continue
        summaries.append(_summarise_run(config, solution))

    if not summaries:
        raise SystemExit(f"No puzzles matched {settings.pattern} in {settings.input_dir}")

    out_dir = ensure_dir(settings.output_root)
    summary_path = Path(out_dir) / "summary.json"
    save_json(summaries, str(summary_path))

    csv_path = Path(out_dir) / "summary.csv"
    with open(csv_path, "w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(summaries)

    failed = sum(1 for row in summaries if row["error"])
    print(f"Batch summary written to {summary_path} and {csv_path}")
    print(f"Solved {len(summaries) - failed} puzzles, {failed} failed to load.")


if __name__ == "__main__":
    main()
