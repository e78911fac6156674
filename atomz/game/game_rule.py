"""Rule contracts: validate and execute actions against a game state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from .action import Action
from .game_state import GameState
from .player import PlayerId, PlayerState

GS = TypeVar("GS", bound=GameState)
A = TypeVar("A", bound=Action)


class GameRule(ABC, Generic[GS, A]):
    """A unit governing one class of actions.

    ``execute`` is a pure function: it must return a new state and leave
    the one it was given untouched. Reactions it returns are dispatched
    depth-first, in order, before the next pending action.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def can_handle(self, action: Action) -> bool:
        """True if this rule manages ``action``."""

    @abstractmethod
    def is_valid(self, game_state: GS, action: A) -> bool:
        """True if ``action`` can be applied to ``game_state``."""

    @abstractmethod
    def execute(self, game_state: GS, action: A) -> tuple[GS, list[Action]]:
        """Apply ``action`` and return the new state plus reaction actions."""


class BasicRules(ABC, Generic[GS]):
    """Winner and turn-order policy of a concrete game."""

    @abstractmethod
    def winner(self, game_state: GS) -> Optional[PlayerId]:
        """Return the winner, or None while the game is undecided."""

    @abstractmethod
    def next_player(
        self, game_state: GS, players: Sequence[PlayerState]
    ) -> Optional[PlayerId]:
        """Return the next player to act, skipping players that are not alive.

        None if no player can act.
        """
