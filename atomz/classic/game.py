"""Setup of a classic game."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..errors import InvalidStateError
from ..game.dispatcher import ActionDispatcher
from ..game.player import PlayerInfo
from ..geometry.terrain import CellMaterial, CellType, Terrain
from ..geometry.vector import Vector
from ..geometry.volume import Volume
from .game_state import ClassicGameState
from .player import ClassicPlayerState
from .rules import ClassicRules, classic_rule_set

logger = logging.getLogger(__name__)


# On a board one cell wide the end cells have a single neighbour: one atom
# already overflows there and first-round chains never stop.
MIN_BOARD_SIDE = 2


def new_classic_terrain(width: int, height: int) -> Terrain:
    """Flat ground board of ``width`` x ``height`` cells on layer z = 0.

    Raises:
        InvalidStateError: either side is shorter than ``MIN_BOARD_SIDE``.
    """
    if width < MIN_BOARD_SIDE or height < MIN_BOARD_SIDE:
        raise InvalidStateError(
            f"Board must be at least {MIN_BOARD_SIDE}x{MIN_BOARD_SIDE}",
            context={"width": width, "height": height},
        )
    volume = Volume.new(Vector(0, 0, 0), Vector(width, height, 1))
    assert volume is not None

    terrain = Terrain(volume)
    ground = CellType.flat(CellMaterial.GROUND)
    for position in volume:
        terrain.set_cell_at(position, ground)
    return terrain


def new_classic_game(
    players: Sequence[PlayerInfo], width: int = 8, height: int = 6
) -> ClassicGameState:
    """Create the opening state: empty board, every player alive, first seat current."""
    if len(players) < 2:
        raise InvalidStateError(
            "A classic game needs at least two players",
            context={"players": len(players)},
        )

    terrain = new_classic_terrain(width, height)
    states = []
    for seat, info in enumerate(players):
        state = ClassicPlayerState.new(info.id)
        state.set_is_alive(True)
        state.set_is_current(seat == 0)
        states.append(state)

    logger.debug(
        "New classic game %dx%d for %s", width, height, [p.name for p in players]
    )
    return ClassicGameState(terrain, states, current_player=players[0].id)


def new_classic_dispatcher(
    basic_rules: Optional[ClassicRules] = None,
    max_reactions: Optional[int] = None,
) -> ActionDispatcher:
    return ActionDispatcher(classic_rule_set(basic_rules), max_reactions=max_reactions)
