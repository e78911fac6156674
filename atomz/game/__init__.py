"""Generic game protocol shared by every concrete atomz game."""

from .action import Action, TurnId
from .actor import CONTROLLER, UI, Actor, ActorKind
from .cell_state import CellOccupation, CellState
from .dispatcher import ActionDispatcher, DispatchResult, DispatchStep
from .game_rule import BasicRules, GameRule
from .game_state import GameState
from .player import PlayerId, PlayerInfo, PlayerRage, PlayerState, Score

__all__ = [
    "CONTROLLER",
    "UI",
    "Action",
    "ActionDispatcher",
    "Actor",
    "ActorKind",
    "BasicRules",
    "CellOccupation",
    "CellState",
    "DispatchResult",
    "DispatchStep",
    "GameRule",
    "GameState",
    "PlayerId",
    "PlayerInfo",
    "PlayerRage",
    "PlayerState",
    "Score",
    "TurnId",
]
