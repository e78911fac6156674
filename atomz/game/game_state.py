"""Snapshot-of-the-world contract a rule operates on."""

from __future__ import annotations

from abc import abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

from ..common.serializable import Serializable
from ..geometry.terrain import Terrain
from ..geometry.vector import Position
from .action import TurnId
from .cell_state import CellState
from .player import PlayerId, PlayerState

PS = TypeVar("PS", bound=PlayerState)
CS = TypeVar("CS", bound=CellState)


class GameState(Serializable, Generic[PS, CS]):
    """State of the game at a particular moment.

    Rules never mutate a state they receive: they ``copy()`` it and apply
    setters to the copy. The copy shares the ``Terrain`` object, so a
    reader holding an older snapshot keeps a consistent view.

    Setters that take an identifier return False for unknown players or
    invalid positions and leave the state unchanged; callers must check
    the flag.
    """

    @property
    @abstractmethod
    def terrain(self) -> Terrain:
        """Terrain shared by every snapshot of this game."""

    @property
    @abstractmethod
    def current_player(self) -> PlayerId:
        """Current active player."""

    @abstractmethod
    def set_current_player(self, player_id: PlayerId) -> bool:
        """Set the active player; False if the id is unknown or not alive."""

    @property
    @abstractmethod
    def current_turn(self) -> TurnId:
        """Id of the turn being played.

        Increases every time the current player changes.
        """

    @abstractmethod
    def set_current_turn(self, turn: TurnId) -> bool:
        """Set the turn id; False if it would move backwards."""

    @property
    @abstractmethod
    def current_turn_substep(self) -> TurnId:
        """Substep of the current turn, mainly for UI animation."""

    @abstractmethod
    def set_current_turn_substep(self, substep: TurnId) -> None:
        ...

    @abstractmethod
    def player_ids(self) -> list[PlayerId]:
        """Ids of every player of this game, in seat order."""

    @abstractmethod
    def player_state(self, player_id: PlayerId) -> Optional[PS]:
        """Return a copy of the state of ``player_id``, or None if unknown."""

    @abstractmethod
    def set_player_state(self, player_id: PlayerId, state: PS) -> bool:
        """Replace the state of ``player_id``; False if unknown."""

    @abstractmethod
    def cell_state(self, position: Position) -> Optional[CS]:
        """Return a copy of the cell state at ``position``.

        None if the position is not valid.
        """

    @abstractmethod
    def set_cell_state(self, position: Position, state: CS) -> bool:
        """Replace the cell state at ``position``; False if not valid."""

    @abstractmethod
    def copy(self) -> "GameState[PS, CS]":
        """Return a new state sharing the terrain and copying everything else."""

    def player_states(self) -> list[PS]:
        """States of every player, in seat order."""
        states = []
        for player_id in self.player_ids():
            state = self.player_state(player_id)
            if state is not None:
                states.append(state)
        return states

    def alive_players(self) -> list[PlayerId]:
        return [p.id for p in self.player_states() if p.is_alive]

    def cell_states(self, positions: Iterable[Position]) -> dict[Position, CS]:
        """Cell states for ``positions``, skipping invalid ones."""
        result = {}
        for position in positions:
            state = self.cell_state(position)
            if state is not None:
                result[position] = state
        return result
