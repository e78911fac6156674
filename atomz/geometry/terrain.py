"""Sparse, volume-bounded terrain."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel

from ..common.serializable import Serializable
from .vector import Position, Vector
from .volume import Volume

logger = logging.getLogger(__name__)


class CellMaterial(str, Enum):
    """Material a terrain cell is made of"""
    WATER = "water"
    GROUND = "ground"


class CellKind(str, Enum):
    """Shape of a terrain cell"""
    # Full of material: nothing can be placed on top of it
    FILL = "fill"
    # Flat: pieces can be placed on top of it
    FLAT = "flat"


class CellType(BaseModel):
    """Type of a terrain cell: ``Fill(material)`` or ``Flat(material)``"""
    kind: CellKind
    material: CellMaterial

    class Config:
        frozen = True

    @classmethod
    def fill(cls, material: CellMaterial) -> "CellType":
        return cls(kind=CellKind.FILL, material=material)

    @classmethod
    def flat(cls, material: CellMaterial) -> "CellType":
        return cls(kind=CellKind.FLAT, material=material)

    def is_flat(self) -> bool:
        return self.kind == CellKind.FLAT


class Terrain(Serializable):
    """Terrain where players place their pieces.

    Cells can only be stored inside ``volume``; positions without a stored
    cell are empty. Every mutation goes through the checked setters below.
    """

    def __init__(self, volume: Volume):
        self._volume = volume
        self._cells: dict[Position, CellType] = {}

    def __repr__(self) -> str:
        return f"Terrain(volume={self._volume!r}, cells={len(self._cells)})"

    @property
    def volume(self) -> Volume:
        """Max boundary box; cells cannot be placed outside of it."""
        return self._volume

    def bounding_box(self) -> Optional[Volume]:
        """Return the smallest volume that contains every stored cell.

        Returns None for an empty terrain. A volume cannot be flat, so an
        axis on which every cell shares the same coordinate is widened by
        one unit on its upper side.
        """
        if not self._cells:
            return None

        xs = [p.x for p in self._cells]
        ys = [p.y for p in self._cells]
        zs = [p.z for p in self._cells]
        lower = Vector(min(xs), min(ys), min(zs))
        upper = Vector(
            max(max(xs), lower.x + 1),
            max(max(ys), lower.y + 1),
            max(max(zs), lower.z + 1),
        )
        return Volume.new(lower, upper)

    def get_cell_at(self, position: Position) -> Optional[CellType]:
        """Return the cell type at ``position``.

        None if the position is outside the volume or holds no cell.
        """
        if not self._volume.is_inside(position):
            logger.warning("Position %r is outside of terrain", position)
            return None
        return self._cells.get(position)

    def set_cell_at(self, position: Position, cell_type: CellType) -> bool:
        """Store ``cell_type`` at ``position``.

        Returns False, leaving the terrain untouched, when the position is
        outside the volume.
        """
        if not self._volume.is_inside(position):
            logger.warning(
                "Position %r is not valid for terrain %r", position, self._volume
            )
            return False
        self._cells[position] = cell_type
        return True

    def remove_cell_at(self, position: Position) -> bool:
        """Remove the cell at ``position``; True if a cell existed."""
        if not self._volume.is_inside(position):
            logger.warning(
                "Position %r is not valid for terrain %r", position, self._volume
            )
            return False
        return self._cells.pop(position, None) is not None

    def __iter__(self) -> Iterator[tuple[Position, CellType]]:
        return iter(self._cells.items())

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, position: object) -> bool:
        return position in self._cells

    def data_to_be_serialized(self) -> list[tuple[Position, CellType]]:
        """Cells as ``(position, cell_type)`` pairs.

        Pair order follows insertion order and is not part of the contract.
        """
        return list(self._cells.items())
