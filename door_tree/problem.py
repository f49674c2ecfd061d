"""Problem definitions for the door tree puzzle."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Tuple, Union


class PuzzleLoadError(ValueError):
    """Raised when a puzzle description cannot be turned into a rooted tree."""


class TokenFormatError(PuzzleLoadError):
    """A line does not have the expected integer/character shape."""


class GraphConsistencyError(PuzzleLoadError):
    """The edge list does not describe a tree connected to the root."""


class RoomType(Enum):
    PROGRAMMERS = "P"
    MANAGERS = "M"
    EMPTY = "E"

    @classmethod
    def from_label(cls, label: str) -> "RoomType":
        try:
            return cls(label)
        except ValueError:
            raise TokenFormatError(f"Unknown room type {label!r}; expected one of P, M, E") from None


class Need(Enum):
    """What a subtree demands of the door connecting it to its parent."""

    NO_NEED = "none"
    NEED_OPEN = "open"
    NEED_CLOSED = "closed"


@dataclass(frozen=True)
class Room:
    id: int
    room_type: RoomType


@dataclass(frozen=True)
class Hub:
    id: int
    # (child, door_open) pairs in discovery order
    doors: Tuple[Tuple["Vertex", bool], ...]


Vertex = Union[Room, Hub]


@dataclass(frozen=True)
class DoorPuzzle:
    vertex_count: int
    room_count: int
    tree: Vertex

    def iter_vertices(self) -> Iterator[Tuple[Vertex, int]]:
        """Walk the tree in preorder, yielding ``(vertex, depth)`` pairs."""

        stack = [(self.tree, 0)]
        while stack:
            vertex, depth = stack.pop()
            yield vertex, depth
            if isinstance(vertex, Hub):
                for child, _ in reversed(vertex.doors):
                    stack.append((child, depth + 1))

    def summary(self) -> Dict[str, int]:
        counts = {
            "hubs": 0,
            "rooms_programmers": 0,
            "rooms_managers": 0,
            "rooms_empty": 0,
            "doors_open": 0,
            "doors_closed": 0,
            "max_depth": 0,
        }
        for vertex, depth in self.iter_vertices():
            counts["max_depth"] = max(counts["max_depth"], depth)
            if isinstance(vertex, Room):
                counts[f"rooms_{vertex.room_type.name.lower()}"] += 1
                continue
            counts["hubs"] += 1
            for _, door_open in vertex.doors:
                counts["doors_open" if door_open else "doors_closed"] += 1
        return counts


__all__ = [
    "PuzzleLoadError",
    "TokenFormatError",
    "GraphConsistencyError",
    "RoomType",
    "Need",
    "Room",
    "Hub",
    "Vertex",
    "DoorPuzzle",
]
