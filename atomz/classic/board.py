"""Board helpers for the classic game.

Side-effect-free functions over a ``Terrain``: which positions hold a
playable cell, which of them are adjacent, and how many atoms a cell holds
before it overflows.
"""

from __future__ import annotations

from ..geometry.terrain import Terrain
from ..geometry.vector import Position, Vector

# In-plane directions a cell overflows towards.
DIRECTIONS: tuple[Vector, ...] = (
    Vector(1, 0, 0),
    Vector(-1, 0, 0),
    Vector(0, 1, 0),
    Vector(0, -1, 0),
)


def is_playable(terrain: Terrain, position: Position) -> bool:
    """True if ``position`` holds a flat terrain cell."""
    if not terrain.volume.is_inside(position):
        return False
    cell = terrain.get_cell_at(position)
    return cell is not None and cell.is_flat()


def neighbours(terrain: Terrain, position: Position) -> list[Position]:
    """Playable positions adjacent to ``position``, in ``DIRECTIONS`` order."""
    return [
        position + direction
        for direction in DIRECTIONS
        if is_playable(terrain, position + direction)
    ]


def capacity(terrain: Terrain, position: Position) -> int:
    """Atoms a cell holds before it overflows: one less than its neighbours."""
    return len(neighbours(terrain, position)) - 1


def is_unstable(terrain: Terrain, position: Position, occupation: int) -> bool:
    return occupation > capacity(terrain, position)
