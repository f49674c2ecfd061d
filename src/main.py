"""Command-line entrypoint for the door tree solver."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from configs import Config
from door_tree import (
    DoorPuzzle,
    PuzzleLoadError,
    Solution,
    TokenFormatError,
    load_puzzle,
    read_puzzle_text,
    solve,
    write_run_log,
)


def _log(config: Config, message: str) -> None:
    if config.verbose:
        print(f"[door-tree] {message}", file=sys.stderr, flush=True)


def build_puzzle(config: Config, stdin: TextIO | None = None) -> DoorPuzzle:
    if config.input_path:
        text = read_puzzle_text(config.input_path)
    else:
        try:
            text = (stdin or sys.stdin).read()
        except UnicodeDecodeError as exc:
            raise TokenFormatError(f"<stdin>: not valid UTF-8 text ({exc.reason} at byte {exc.start})") from None
    return load_puzzle(text, root=config.root_id)


def execute_run(config: Config, stdin: TextIO | None = None) -> Solution:
    """Load, solve and optionally persist artefacts for one configuration."""

    puzzle = build_puzzle(config, stdin)
    _log(config, f"Loaded {config.label()}: n={puzzle.vertex_count}, m={puzzle.room_count}")

    solution = solve(puzzle, config)
    _log(config, f"Solved with {solution.algorithm}: toggles={solution.toggles}, root_need={solution.root_need.value}")

    if config.write_summary:
        summary_path = config.output_path(config.summary_filename)
        write_run_log(
            str(summary_path),
            config_dict=config.as_dict(),
            solution=solution,
            summary=puzzle.summary(),
        )
        _log(config, f"Run log written to {summary_path}")

    if config.render:
        from door_tree.visuals import render_tree

        render_path = config.output_path(config.render_filename)
        render_tree(puzzle, str(render_path), dpi=config.render_dpi)
        _log(config, f"Tree rendered to {render_path}")

    return solution


def run_from_cli(argv: List[str] | None = None, stdin: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(description="Minimum door toggles for a door tree puzzle")
    parser.add_argument("--input", help="Puzzle file (defaults to standard input)")
    parser.add_argument("--root", type=int, default=1, help="Vertex id the tree is rooted at")
    parser.add_argument(
        "--algorithm", default="need_propagation", choices=["need_propagation"], help="Solver algorithm"
    )
    parser.add_argument("--output", default="artifacts", help="Directory for the run log and rendering")
    parser.add_argument("--summary", action="store_true", help="Write a JSON run log")
    parser.add_argument("--render", action="store_true", help="Render the rooted tree as a PNG")
    parser.add_argument("--verbose", action="store_true", help="Print progress to stderr")
    args = parser.parse_args(argv)

    config = Config(
        input_path=args.input,
        root_id=args.root,
        algorithm=args.algorithm,
        output_dir=args.output,
        write_summary=args.summary,
        render=args.render,
        verbose=args.verbose,
    )
    config.update_from_env()

    try:
        solution = execute_run(config, stdin)
    except (PuzzleLoadError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(solution.toggles)
    return 0


if __name__ == "__main__":
    raise SystemExit(run_from_cli())
