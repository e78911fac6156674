"""Game state of the classic game."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from ..errors import InvalidStateError
from ..game.action import TurnId
from ..game.game_state import GameState
from ..game.player import PlayerId
from ..geometry.terrain import CellType, Terrain
from ..geometry.vector import Position
from .board import is_playable
from .cell_state import ClassicCellState
from .player import ClassicPlayerState

logger = logging.getLogger(__name__)


class ClassicGameStateData(BaseModel):
    """Serialized view of a ``ClassicGameState``."""
    terrain: list[tuple[Position, CellType]]
    current_player: PlayerId = Field(alias="currentPlayer")
    current_turn: TurnId = Field(alias="currentTurn")
    current_turn_substep: TurnId = Field(alias="currentTurnSubstep")
    players: list[ClassicPlayerState]
    cells: list[tuple[Position, ClassicCellState]]

    class Config:
        populate_by_name = True


class ClassicGameState(GameState[ClassicPlayerState, ClassicCellState]):
    """Snapshot of a classic game.

    Player and cell records are copied on the way in and on the way out,
    so no caller ever holds a reference into a committed snapshot. That
    makes ``copy()`` a matter of copying the two dictionaries.
    """

    def __init__(
        self,
        terrain: Terrain,
        players: Sequence[ClassicPlayerState],
        cells: Optional[Mapping[Position, ClassicCellState]] = None,
        current_player: Optional[PlayerId] = None,
        current_turn: TurnId = 0,
        current_turn_substep: TurnId = 0,
    ):
        if not players:
            raise InvalidStateError("A game needs at least one player")

        self._terrain = terrain
        self._players: dict[PlayerId, ClassicPlayerState] = {
            p.id: p.copy() for p in players
        }
        if len(self._players) != len(players):
            raise InvalidStateError("Player ids must be unique")

        if cells is None:
            self._cells: dict[Position, ClassicCellState] = {
                position: ClassicCellState.empty()
                for position, _ in terrain
                if is_playable(terrain, position)
            }
        else:
            self._cells = {}
            for position, cell in cells.items():
                if not is_playable(terrain, position):
                    raise InvalidStateError(
                        f"Cell {position!r} is not a playable terrain cell",
                        context={"volume": repr(terrain.volume)},
                    )
                self._cells[position] = cell.copy()

        if current_player is None:
            current_player = next(
                (p.id for p in self._players.values() if p.is_alive), None
            )
        player = self._players.get(current_player)
        if player is None or not player.is_alive:
            raise InvalidStateError(
                f"Current player {current_player} is not an alive player of the game"
            )
        self._current_player = current_player
        self._current_turn = current_turn
        self._current_turn_substep = current_turn_substep

    def __repr__(self) -> str:
        return (
            f"ClassicGameState(turn={self._current_turn}."
            f"{self._current_turn_substep}, current_player={self._current_player}, "
            f"players={len(self._players)}, occupied={len(self.occupied_cells())})"
        )

    @property
    def terrain(self) -> Terrain:
        return self._terrain

    @property
    def current_player(self) -> PlayerId:
        return self._current_player

    def set_current_player(self, player_id: PlayerId) -> bool:
        player = self._players.get(player_id)
        if player is None or not player.is_alive:
            logger.warning("Player %s cannot become the current player", player_id)
            return False
        self._current_player = player_id
        return True

    @property
    def current_turn(self) -> TurnId:
        return self._current_turn

    def set_current_turn(self, turn: TurnId) -> bool:
        if turn < self._current_turn:
            logger.warning(
                "Turn cannot go back from %d to %d", self._current_turn, turn
            )
            return False
        self._current_turn = turn
        return True

    @property
    def current_turn_substep(self) -> TurnId:
        return self._current_turn_substep

    def set_current_turn_substep(self, substep: TurnId) -> None:
        self._current_turn_substep = substep

    def player_ids(self) -> list[PlayerId]:
        return list(self._players)

    def player_state(self, player_id: PlayerId) -> Optional[ClassicPlayerState]:
        player = self._players.get(player_id)
        return player.copy() if player is not None else None

    def set_player_state(self, player_id: PlayerId, state: ClassicPlayerState) -> bool:
        if player_id not in self._players or state.id != player_id:
            logger.warning("Player %s is not part of this game", player_id)
            return False
        self._players[player_id] = state.copy()
        return True

    def cell_state(self, position: Position) -> Optional[ClassicCellState]:
        """Cell at ``position``; None unless it holds a flat terrain cell."""
        if not is_playable(self._terrain, position):
            logger.warning("Position %r is not a playable cell", position)
            return None
        cell = self._cells.get(position)
        return cell.copy() if cell is not None else ClassicCellState.empty()

    def set_cell_state(self, position: Position, state: ClassicCellState) -> bool:
        if not is_playable(self._terrain, position):
            logger.warning("Position %r is not a playable cell", position)
            return False
        self._cells[position] = state.copy()
        return True

    def copy(self) -> "ClassicGameState":
        clone = object.__new__(ClassicGameState)
        clone._terrain = self._terrain
        clone._players = dict(self._players)
        clone._cells = dict(self._cells)
        clone._current_player = self._current_player
        clone._current_turn = self._current_turn
        clone._current_turn_substep = self._current_turn_substep
        return clone

    def next_substep(self) -> TurnId:
        """Advance the substep counter and return its new value."""
        self._current_turn_substep += 1
        return self._current_turn_substep

    def occupied_cells(self) -> dict[Position, ClassicCellState]:
        return {
            position: cell.copy()
            for position, cell in self._cells.items()
            if not cell.is_empty()
        }

    def atoms_of(self, player_id: PlayerId) -> int:
        """Total atoms owned by ``player_id``."""
        return sum(
            cell.occupation for cell in self._cells.values() if cell.owner == player_id
        )

    def owners(self) -> set[PlayerId]:
        return {cell.owner for cell in self._cells.values() if cell.owner is not None}

    def all_players_have_played(self) -> bool:
        """True once every seat has taken at least one turn.

        Nobody is eliminated during the first round, so turn ``t`` of that
        round belongs to seat ``t``; the last seat has played once its turn
        has executed at least one action.
        """
        last_seat_turn = len(self._players) - 1
        if self._current_turn > last_seat_turn:
            return True
        return self._current_turn == last_seat_turn and self._current_turn_substep > 0

    def data_to_be_serialized(self) -> ClassicGameStateData:
        return ClassicGameStateData(
            terrain=self._terrain.data_to_be_serialized(),
            current_player=self._current_player,
            current_turn=self._current_turn,
            current_turn_substep=self._current_turn_substep,
            players=list(self._players.values()),
            cells=list(self._cells.items()),
        )
