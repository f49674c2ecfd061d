import pytest

from door_tree import load_puzzle


@pytest.fixture
def puzzle_from():
    """Build a puzzle from ``n m`` plus door and room lines."""

    def _build(header, doors, rooms):
        lines = [header, *doors, *rooms]
        return load_puzzle("\n".join(lines) + "\n")

    return _build
