"""Generic per-cell state capability."""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional

from ..common.serializable import Serializable
from .player import PlayerId

# Type used for number of elements in a cell
CellOccupation = int


class CellState(Serializable):
    """Represents a generic state of a game cell."""

    @abstractmethod
    def player_occupation(self, player_id: PlayerId) -> Optional[CellOccupation]:
        """Return the number of elements owned by ``player_id`` in this cell.

        None if the player has no element in this cell.
        """

    @abstractmethod
    def set_player_occupation(
        self, player_id: PlayerId, count: CellOccupation
    ) -> bool:
        """Set the number of elements owned by ``player_id``.

        Returns False, leaving the cell unchanged, for a count that is not
        strictly positive.
        """

    @abstractmethod
    def is_empty(self) -> bool:
        """True if no player occupies this cell."""

    @abstractmethod
    def copy(self) -> "CellState":
        """Return an independent copy of this cell state."""
