"""Visualization helpers that draw the rooted door tree."""
from __future__ import annotations

from typing import Dict, List, Tuple

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from .problem import DoorPuzzle, Hub, Room, RoomType

ROOM_COLOURS: Dict[RoomType, str] = {
    RoomType.PROGRAMMERS: "#2ca02c",
    RoomType.MANAGERS: "#d62728",
    RoomType.EMPTY: "#dddddd",
}
HUB_COLOUR = "#7f7f7f"
OPEN_DOOR = {"color": "#2ca02c", "linestyle": "-"}
CLOSED_DOOR = {"color": "#d62728", "linestyle": "--"}


def tree_positions(puzzle: DoorPuzzle) -> Dict[int, Tuple[float, float]]:
    """Leaves are spaced evenly left to right; hubs sit above the mean of their children."""

    order = list(puzzle.iter_vertices())
    positions: Dict[int, Tuple[float, float]] = {}
    next_leaf = 0
    for vertex, depth in order:
        if isinstance(vertex, Room):
            positions[vertex.id] = (float(next_leaf), -float(depth))
            next_leaf += 1
    for vertex, depth in reversed(order):
        if isinstance(vertex, Hub):
            xs = [positions[child.id][0] for child, _ in vertex.doors]
            positions[vertex.id] = (sum(xs) / len(xs), -float(depth))
    return positions


def render_tree(puzzle: DoorPuzzle, output_path: str, dpi: int = 120) -> None:
    """Save a PNG of the tree with door states and room types."""

    positions = tree_positions(puzzle)
    width = max(4.0, 0.6 * (max(x for x, _ in positions.values()) + 1))
    height = max(3.0, 0.9 * (1 - min(y for _, y in positions.values())))
    fig, ax = plt.subplots(figsize=(width, height))

    for vertex, _ in puzzle.iter_vertices():
        if not isinstance(vertex, Hub):
            continue
        px, py = positions[vertex.id]
        for child, door_open in vertex.doors:
            cx, cy = positions[child.id]
            style = OPEN_DOOR if door_open else CLOSED_DOOR
            ax.plot([px, cx], [py, cy], linewidth=1.5, zorder=1, **style)

    for vertex, _ in puzzle.iter_vertices():
        x, y = positions[vertex.id]
        colour = ROOM_COLOURS[vertex.room_type] if isinstance(vertex, Room) else HUB_COLOUR
        marker = "s" if isinstance(vertex, Room) else "o"
        ax.scatter([x], [y], s=220, c=colour, marker=marker, edgecolors="black", zorder=2)
        ax.text(x, y, str(vertex.id), ha="center", va="center", fontsize=7, zorder=3)

    handles: List[Line2D] = [
        Line2D([0], [0], linewidth=1.5, label="open door", **OPEN_DOOR),
        Line2D([0], [0], linewidth=1.5, label="closed door", **CLOSED_DOOR),
    ]
    handles.extend(
        Line2D([0], [0], marker="s", linestyle="", markerfacecolor=colour, markeredgecolor="black",
               label=room_type.name.lower())
        for room_type, colour in ROOM_COLOURS.items()
    )
    ax.legend(handles=handles, loc="upper right", fontsize=7, frameon=False)
    ax.set_title(f"Door tree (n={puzzle.vertex_count}, m={puzzle.room_count})", fontsize=10)
    ax.set_axis_off()
    fig.tight_layout()
    fig.savefig(output_path, format="png", dpi=dpi, bbox_inches="tight")
    plt.close(fig)


__all__ = ["render_tree", "tree_positions"]
