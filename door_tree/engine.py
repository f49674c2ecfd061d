"""Need propagation over the rooted door tree."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .problem import Hub, Need, Room, RoomType, Vertex

NeedCost = Tuple[Need, int]

ROOM_NEEDS: Dict[RoomType, Need] = {
    RoomType.PROGRAMMERS: Need.NEED_OPEN,
    RoomType.MANAGERS: Need.NEED_CLOSED,
    RoomType.EMPTY: Need.NO_NEED,
}


def fold_door(child_need: Need, inner_cost: int, door_open: bool, is_root: bool) -> NeedCost:
    """Combine a child's ``(need, cost)`` with the door leading to it."""

    if child_need is Need.NO_NEED:
        return Need.NO_NEED, 0
    if child_need is Need.NEED_CLOSED:
        if is_root:
            # the root has no incoming door, so only this door is charged
            return Need.NEED_CLOSED, int(door_open)
        return Need.NEED_OPEN, inner_cost + int(door_open)
    return Need.NEED_OPEN, inner_cost + int(not door_open)


def _aggregate(folded: List[NeedCost]) -> NeedCost:
    need = Need.NO_NEED
    open_changes = 0
    close_changes = 0
    for inner_need, inner_changes in folded:
        # an open requirement, once seen, is never replaced
        if need is not Need.NEED_OPEN and inner_need is not Need.NO_NEED:
            need = inner_need
        if inner_need is Need.NEED_OPEN:
            open_changes += inner_changes
        elif inner_need is Need.NEED_CLOSED:
            close_changes += inner_changes

    if need is Need.NEED_OPEN:
        return Need.NEED_OPEN, open_changes + close_changes
    return need, 0


def changes(node: Vertex, is_root: bool = False) -> NeedCost:
    """Return the ``(need, toggles)`` pair ``node`` presents to its parent.

    ``is_root`` applies to ``node`` only; every descendant is evaluated as a
    non-root hub. The traversal is post-order with an explicit stack so that
    deep trees stay within the interpreter recursion limit.
    """

    if isinstance(node, Room):
        return ROOM_NEEDS[node.room_type], 0

    results: Dict[int, NeedCost] = {}
    stack: List[Tuple[Vertex, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, Room):
            results[id(current)] = (ROOM_NEEDS[current.room_type], 0)
            continue
        if not expanded:
            stack.append((current, True))
            stack.extend((child, False) for child, _ in current.doors)
            continue
        root_here = is_root and current is node
        folded = [
            fold_door(*results.pop(id(child)), door_open, root_here)
            for child, door_open in current.doors
        ]
        results[id(current)] = _aggregate(folded)
    return results[id(node)]


def minimum_toggles(tree: Vertex) -> int:
    _, toggles = changes(tree, is_root=True)
    return toggles


__all__ = ["ROOM_NEEDS", "fold_door", "changes", "minimum_toggles"]
