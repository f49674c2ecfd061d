"""IO utilities for door tree runs."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from .planner import Solution


def ensure_dir(path: str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def save_json(data: Any, path: str) -> None:
    Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def solution_to_dict(solution: Solution) -> dict:
    return {
        "toggles": solution.toggles,
        "root_need": solution.root_need.value,
        "vertex_count": solution.vertex_count,
        "room_count": solution.room_count,
        "algorithm": solution.algorithm,
    }


def write_run_log(
    path: str,
    *,
    config_dict: Mapping[str, Any],
    solution: Solution,
    summary: Mapping[str, int],
) -> None:
    """Persist a JSON record of one solve: the settings, the answer and the tree shape."""

    input_path = config_dict.get("input_path")
    log_payload: dict[str, Any] = {
        "input": Path(input_path).name if input_path else "<stdin>",
        "run": config_dict.get("run_name"),
        **solution_to_dict(solution),
        "tree": dict(summary),
        "config": dict(config_dict),
    }
    save_json(log_payload, path)


__all__ = ["ensure_dir", "save_json", "solution_to_dict", "write_run_log"]
