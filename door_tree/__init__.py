"""Public API for the door tree puzzle solver."""
from .engine import changes, fold_door, minimum_toggles
from .io_utils import ensure_dir, save_json, write_run_log
from .loader import load_puzzle, load_puzzle_file, parse_puzzle_text, read_puzzle_text
from .planner import Solution, solve
from .problem import (
    DoorPuzzle,
    GraphConsistencyError,
    Hub,
    Need,
    PuzzleLoadError,
    Room,
    RoomType,
    TokenFormatError,
)

__all__ = [
    "DoorPuzzle",
    "Room",
    "Hub",
    "RoomType",
    "Need",
    "PuzzleLoadError",
    "TokenFormatError",
    "GraphConsistencyError",
    "load_puzzle",
    "load_puzzle_file",
    "read_puzzle_text",
    "parse_puzzle_text",
    "changes",
    "fold_door",
    "minimum_toggles",
    "solve",
    "Solution",
    "ensure_dir",
    "save_json",
    "write_run_log",
]
