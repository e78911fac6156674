"""Actions of the classic game.

Every action carries a ``type`` discriminator so a recorded sequence can be
parsed back with ``parse_classic_action``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from ..game.action import Action
from ..game.actor import CONTROLLER, Actor
from ..game.game_state import GameState
from ..game.player import PlayerId
from ..geometry.vector import Position


class PlaceAtomAction(Action):
    """A player drops one atom on a cell."""
    type: Literal["place_atom"] = "place_atom"
    position: Position

    @classmethod
    def create(
        cls, game_state: GameState, player_id: PlayerId, position: Position
    ) -> "PlaceAtomAction":
        return cls(
            source=Actor.player(player_id),
            destination=CONTROLLER,
            turn=game_state.current_turn,
            turn_substep=game_state.current_turn_substep,
            position=position,
        )


class OverflowAction(Action):
    """An unstable cell bursts into its neighbours."""
    type: Literal["overflow"] = "overflow"
    position: Position


class AtomArrivalAction(Action):
    """One atom lands on ``position`` and converts it to ``player_id``."""
    type: Literal["atom_arrival"] = "atom_arrival"
    position: Position
    player_id: PlayerId = Field(alias="playerId")
    origin: Optional[Position] = None


class EndTurnAction(Action):
    """Scores, eliminations and hand-over to the next player."""
    type: Literal["end_turn"] = "end_turn"


ClassicAction = Annotated[
    Union[PlaceAtomAction, OverflowAction, AtomArrivalAction, EndTurnAction],
    Field(discriminator="type"),
]

_CLASSIC_ACTION_ADAPTER: TypeAdapter = TypeAdapter(ClassicAction)


def parse_classic_action(data: Union[str, bytes, dict[str, Any]]) -> Action:
    """Build a classic action from its JSON text or dict form."""
    if isinstance(data, (str, bytes)):
        return _CLASSIC_ACTION_ADAPTER.validate_json(data)
    return _CLASSIC_ACTION_ADAPTER.validate_python(data)


def controller_action(action_cls: type, game_state: GameState, **payload: Any) -> Action:
    """Create a controller-to-controller reaction tagged with the state's turn."""
    return action_cls(
        source=CONTROLLER,
        destination=CONTROLLER,
        turn=game_state.current_turn,
        turn_substep=game_state.current_turn_substep,
        **payload,
    )
