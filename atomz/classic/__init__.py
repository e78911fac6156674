"""The classic chain-reaction game built on the generic protocol."""

from .actions import (
    AtomArrivalAction,
    ClassicAction,
    EndTurnAction,
    OverflowAction,
    PlaceAtomAction,
    controller_action,
    parse_classic_action,
)
from .board import capacity, is_playable, is_unstable, neighbours
from .cell_state import CELL_OCCUPATION_MAX, ClassicCellState
from .game import new_classic_dispatcher, new_classic_game, new_classic_terrain
from .game_state import ClassicGameState, ClassicGameStateData
from .player import ClassicPlayerState
from .rules import (
    AtomArrivalRule,
    ClassicRule,
    ClassicRules,
    EndTurnRule,
    OverflowRule,
    PlaceAtomRule,
    classic_rule_set,
)

__all__ = [
    "CELL_OCCUPATION_MAX",
    "AtomArrivalAction",
    "AtomArrivalRule",
    "ClassicAction",
    "ClassicCellState",
    "ClassicGameState",
    "ClassicGameStateData",
    "ClassicPlayerState",
    "ClassicRule",
    "ClassicRules",
    "EndTurnAction",
    "EndTurnRule",
    "OverflowAction",
    "OverflowRule",
    "PlaceAtomAction",
    "PlaceAtomRule",
    "capacity",
    "classic_rule_set",
    "controller_action",
    "is_playable",
    "is_unstable",
    "neighbours",
    "new_classic_dispatcher",
    "new_classic_game",
    "new_classic_terrain",
    "parse_classic_action",
]
