"""Solving interface for the door tree puzzle."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from configs import Config
from .engine import changes
from .problem import DoorPuzzle, Need


@dataclass
class Solution:
    toggles: int
    root_need: Need
    vertex_count: int
    room_count: int
    algorithm: str


def solve(puzzle: DoorPuzzle, config: Config, algorithm: Optional[str] = None) -> Solution:
    algorithm = algorithm or config.algorithm
    if algorithm == "need_propagation":
        root_need, toggles = changes(puzzle.tree, is_root=True)
        return Solution(
            toggles=toggles,
            root_need=root_need,
            vertex_count=puzzle.vertex_count,
            room_count=puzzle.room_count,
            algorithm=algorithm,
        )
    raise NotImplementedError(f"Unknown algorithm: {algorithm}")


__all__ = ["solve", "Solution"]
