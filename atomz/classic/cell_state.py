"""Cell state of the classic game."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..game.cell_state import CellOccupation, CellState
from ..game.player import PlayerId

# Atoms are counted in an unsigned byte.
CELL_OCCUPATION_MAX = 255


class ClassicCellState(BaseModel, CellState):
    """Either ``Empty`` or ``Occupied(owner, occupation)``.

    ``owner`` is None exactly when the cell is empty.
    """
    owner: Optional[PlayerId] = None
    occupation: CellOccupation = Field(0, ge=0, le=CELL_OCCUPATION_MAX)

    @model_validator(mode="after")
    def _check_variant(self) -> "ClassicCellState":
        if (self.owner is None) != (self.occupation == 0):
            raise ValueError("an occupied cell needs both an owner and a positive occupation")
        return self

    @classmethod
    def empty(cls) -> "ClassicCellState":
        return cls()

    @classmethod
    def occupied(cls, player_id: PlayerId, count: CellOccupation) -> "ClassicCellState":
        return cls(owner=player_id, occupation=count)

    def player_occupation(self, player_id: PlayerId) -> Optional[CellOccupation]:
        if self.owner is not None and self.owner == player_id:
            return self.occupation
        return None

    def set_player_occupation(self, player_id: PlayerId, count: CellOccupation) -> bool:
        if count <= 0 or count > CELL_OCCUPATION_MAX:
            return False
        self.owner = player_id
        self.occupation = count
        return True

    def is_empty(self) -> bool:
        return self.owner is None

    def copy(self) -> "ClassicCellState":  # type: ignore[override]
        return self.model_copy()

    def data_to_be_serialized(self) -> "ClassicCellState":
        return self
