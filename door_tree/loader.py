"""Puzzle loading utilities.

The input is a header line ``n m``, ``n - 1`` door lines ``a b s`` and ``m``
room lines ``a t``. Loading orients the undirected door graph into a tree
rooted at vertex 1 and materialises it into :class:`Room` / :class:`Hub`
values.
"""
from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from .problem import (
    DoorPuzzle,
    GraphConsistencyError,
    Hub,
    PuzzleLoadError,
    Room,
    RoomType,
    TokenFormatError,
    Vertex,
)

Edge = Tuple[int, int, bool]
Adjacency = Dict[int, List[Tuple[int, bool]]]

DOOR_STATES = {"O": True, "C": False}


@dataclass
class PuzzleInput:
    vertex_count: int
    room_count: int
    edges: List[Edge]
    rooms: Dict[int, RoomType]


def tokenize_lines(text: str) -> List[Tuple[int, List[str]]]:
    """Split ``text`` into ``(line_number, tokens)`` pairs, skipping blank lines."""

    lines: List[Tuple[int, List[str]]] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        tokens = raw.split()
        if tokens:
            lines.append((number, tokens))
    return lines


def _take(lines: Iterator[Tuple[int, List[str]]], arity: int, what: str) -> Tuple[int, List[str]]:
    try:
        number, tokens = next(lines)
    except StopIteration:
        raise TokenFormatError(f"Unexpected end of input while reading {what}") from None
    if len(tokens) != arity:
        raise TokenFormatError(
            f"Line {number}: expected {arity} tokens for {what}, got {len(tokens)}: {' '.join(tokens)!r}"
        )
    return number, tokens


def _int(token: str, number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise TokenFormatError(f"Line {number}: {token!r} is not an integer") from None


def _check_vertex(vertex: int, vertex_count: int, number: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise GraphConsistencyError(
            f"Line {number}: references vertex {vertex} but n={vertex_count}"
        )
    return vertex


def parse_puzzle_text(text: str) -> PuzzleInput:
    lines = iter(tokenize_lines(text))

    number, header = _take(lines, 2, "the 'n m' header")
    vertex_count, room_count = (_int(token, number) for token in header)
    if vertex_count < 1 or room_count < 0:
        raise TokenFormatError(f"Line {number}: invalid header n={vertex_count}, m={room_count}")

    edges: List[Edge] = []
    for _ in range(vertex_count - 1):
        number, (a, b, state) = _take(lines, 3, "a door")
        if state not in DOOR_STATES:
            raise TokenFormatError(f"Line {number}: door state {state!r} is not 'O' or 'C'")
        edges.append(
            (
                _check_vertex(_int(a, number), vertex_count, number),
                _check_vertex(_int(b, number), vertex_count, number),
                DOOR_STATES[state],
            )
        )

    rooms: Dict[int, RoomType] = {}
    for _ in range(room_count):
        number, (a, label) = _take(lines, 2, "a room")
        try:
            room_type = RoomType.from_label(label)
        except TokenFormatError as exc:
            raise TokenFormatError(f"Line {number}: {exc}") from None
        rooms[_check_vertex(_int(a, number), vertex_count, number)] = room_type

    return PuzzleInput(vertex_count=vertex_count, room_count=room_count, edges=edges, rooms=rooms)


def build_adjacency(edges: Sequence[Edge]) -> Adjacency:
    """Record every door under both of its endpoints with the same state."""

    adjacency: Adjacency = defaultdict(list)
    for a, b, door_open in edges:
        adjacency[a].append((b, door_open))
        adjacency[b].append((a, door_open))
    return dict(adjacency)


def orient_tree(adjacency: Mapping[int, Sequence[Tuple[int, bool]]], root: int = 1) -> Adjacency:
    """Breadth-first orientation from ``root``; back edges are dropped."""

    directed: Adjacency = defaultdict(list)
    seen = {root}
    queue = deque([root])

    while queue:
        vertex = queue.popleft()
        if vertex not in adjacency:
            raise GraphConsistencyError(f"Vertex {vertex} has no doors recorded")
        for neighbour, door_open in adjacency[vertex]:
            if neighbour in seen:
                continue
            seen.add(neighbour)
            directed[vertex].append((neighbour, door_open))
            queue.append(neighbour)

    return dict(directed)


def materialize_tree(
    directed: Mapping[int, Sequence[Tuple[int, bool]]],
    rooms: Mapping[int, RoomType],
    root: int = 1,
) -> Vertex:
    """Turn the oriented adjacency into nested ``Room``/``Hub`` values."""

    built: Dict[int, Vertex] = {}
    stack = [(root, False)]
    while stack:
        vertex, expanded = stack.pop()
        if vertex in rooms:
            built[vertex] = Room(id=vertex, room_type=rooms[vertex])
            continue
        if vertex not in directed:
            raise GraphConsistencyError(f"Vertex {vertex} is a dead end but is not declared as a room")
        children = directed[vertex]
        if not expanded:
            stack.append((vertex, True))
            stack.extend((child, False) for child, _ in children)
            continue
        built[vertex] = Hub(
            id=vertex,
            doors=tuple((built[child], door_open) for child, door_open in children),
        )
    return built[root]


def _check_connected(directed: Adjacency, vertex_count: int, root: int) -> None:
    reached = {root}
    for children in directed.values():
        reached.update(child for child, _ in children)
    missing = sorted(set(range(1, vertex_count + 1)) - reached)
    if missing:
        preview = ", ".join(str(vertex) for vertex in missing[:5])
        raise GraphConsistencyError(
            f"{len(missing)} vertices are unreachable from root {root} (first: {preview})"
        )


def load_puzzle(text: str, root: int = 1) -> DoorPuzzle:
    parsed = parse_puzzle_text(text)
    if not 1 <= root <= parsed.vertex_count:
        raise GraphConsistencyError(f"Root {root} is outside 1..{parsed.vertex_count}")
    directed = orient_tree(build_adjacency(parsed.edges), root=root)
    _check_connected(directed, parsed.vertex_count, root)
    tree = materialize_tree(directed, parsed.rooms, root=root)
    return DoorPuzzle(vertex_count=parsed.vertex_count, room_count=parsed.room_count, tree=tree)


def read_puzzle_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TokenFormatError(f"{path}: not valid UTF-8 text ({exc.reason} at byte {exc.start})") from None


def load_puzzle_file(path: str, root: int = 1) -> DoorPuzzle:
    return load_puzzle(read_puzzle_text(path), root=root)


__all__ = [
    "PuzzleInput",
    "PuzzleLoadError",
    "TokenFormatError",
    "GraphConsistencyError",
    "tokenize_lines",
    "parse_puzzle_text",
    "build_adjacency",
    "orient_tree",
    "materialize_tree",
    "load_puzzle",
    "read_puzzle_text",
    "load_puzzle_file",
]
