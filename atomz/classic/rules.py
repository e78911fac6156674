"""Rules of the classic chain-reaction game.

A turn is one ``place_atom`` followed by its reaction chain:

    place_atom -> [overflow] -> atom_arrival* -> [overflow] -> ... -> end_turn

A cell overflows once it holds more atoms than its capacity (one less than
its playable neighbours): it sends one atom to each neighbour and every
arrival captures the receiving cell. The chain stops when no cell is
unstable or a winner emerges; the winner check is what guarantees
termination once one player owns every atom.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..game.action import Action
from ..game.actor import ActorKind
from ..game.game_rule import BasicRules, GameRule
from ..game.player import PlayerId, PlayerState
from .actions import (
    AtomArrivalAction,
    EndTurnAction,
    OverflowAction,
    PlaceAtomAction,
    controller_action,
)
from .board import is_playable, is_unstable, neighbours
from .cell_state import CELL_OCCUPATION_MAX, ClassicCellState
from .game_state import ClassicGameState

logger = logging.getLogger(__name__)


class ClassicRules(BasicRules[ClassicGameState]):
    """Winner and turn order of the classic game."""

    def winner(self, game_state: ClassicGameState) -> Optional[PlayerId]:
        """The last alive player, or the sole owner of every atom.

        Ownership only decides the game once every player has had a turn.
        """
        alive = game_state.alive_players()
        if len(alive) == 1:
            return alive[0]
        if not alive:
            return None
        if game_state.all_players_have_played():
            owners = game_state.owners()
            if len(owners) == 1:
                return next(iter(owners))
        return None

    def next_player(
        self, game_state: ClassicGameState, players: Sequence[PlayerState]
    ) -> Optional[PlayerId]:
        """Next alive player in seat order after the current one.

        The current player is considered last, so a lone survivor keeps
        the turn.
        """
        if not players:
            return None

        current_index = -1
        for i, player in enumerate(players):
            if player.id == game_state.current_player:
                current_index = i
                break

        for offset in range(1, len(players) + 1):
            candidate = players[(current_index + offset) % len(players)]
            if candidate.is_alive:
                return candidate.id
        return None


class ClassicRule(GameRule[ClassicGameState, Action]):
    """Base for the classic rules: they share the winner/turn policy."""

    action_type: type = Action

    def __init__(self, basic_rules: Optional[ClassicRules] = None):
        self.basic_rules = basic_rules or ClassicRules()

    def can_handle(self, action: Action) -> bool:
        return isinstance(action, self.action_type)


class PlaceAtomRule(ClassicRule):
    action_type = PlaceAtomAction

    def is_valid(self, game_state: ClassicGameState, action: PlaceAtomAction) -> bool:
        source = action.source
        if source.kind != ActorKind.PLAYER or source.player_id != game_state.current_player:
            logger.info("Player %s is not the current player", source.player_id)
            return False

        player = game_state.player_state(source.player_id)
        if player is None or not player.is_alive:
            return False
        if self.basic_rules.winner(game_state) is not None:
            return False
        if not is_playable(game_state.terrain, action.position):
            return False

        cell = game_state.cell_state(action.position)
        if cell is None:
            return False
        if cell.is_empty():
            return True
        return (
            cell.owner == source.player_id
            and cell.occupation < CELL_OCCUPATION_MAX
        )

    def execute(
        self, game_state: ClassicGameState, action: PlaceAtomAction
    ) -> tuple[ClassicGameState, list[Action]]:
        player_id = action.source.player_id
        new_state = game_state.copy()

        cell = new_state.cell_state(action.position)
        count = (cell.player_occupation(player_id) or 0) + 1
        cell.set_player_occupation(player_id, count)
        new_state.set_cell_state(action.position, cell)
        new_state.next_substep()

        reactions: list[Action] = []
        if is_unstable(new_state.terrain, action.position, count):
            reactions.append(
                controller_action(OverflowAction, new_state, position=action.position)
            )
        reactions.append(controller_action(EndTurnAction, new_state))
        return new_state, reactions


class OverflowRule(ClassicRule):
    action_type = OverflowAction

    def is_valid(self, game_state: ClassicGameState, action: OverflowAction) -> bool:
        cell = game_state.cell_state(action.position)
        if cell is None or cell.is_empty():
            return False
        return is_unstable(game_state.terrain, action.position, cell.occupation)

    def execute(
        self, game_state: ClassicGameState, action: OverflowAction
    ) -> tuple[ClassicGameState, list[Action]]:
        new_state = game_state.copy()
        cell = new_state.cell_state(action.position)
        owner = cell.owner
        targets = neighbours(new_state.terrain, action.position)

        leftover = cell.occupation - len(targets)
        if leftover > 0:
            cell.set_player_occupation(owner, leftover)
        else:
            cell = ClassicCellState.empty()
        new_state.set_cell_state(action.position, cell)
        new_state.next_substep()

        reactions: list[Action] = [
            controller_action(
                AtomArrivalAction,
                new_state,
                position=target,
                player_id=owner,
                origin=action.position,
            )
            for target in targets
        ]
        return new_state, reactions


class AtomArrivalRule(ClassicRule):
    action_type = AtomArrivalAction

    def is_valid(self, game_state: ClassicGameState, action: AtomArrivalAction) -> bool:
        if game_state.player_state(action.player_id) is None:
            return False
        return is_playable(game_state.terrain, action.position)

    def execute(
        self, game_state: ClassicGameState, action: AtomArrivalAction
    ) -> tuple[ClassicGameState, list[Action]]:
        new_state = game_state.copy()
        cell = new_state.cell_state(action.position)
        count = min(cell.occupation + 1, CELL_OCCUPATION_MAX)
        cell.set_player_occupation(action.player_id, count)
        new_state.set_cell_state(action.position, cell)
        new_state.next_substep()

        reactions: list[Action] = []
        if (
            is_unstable(new_state.terrain, action.position, count)
            and self.basic_rules.winner(new_state) is None
        ):
            reactions.append(
                controller_action(OverflowAction, new_state, position=action.position)
            )
        return new_state, reactions


class EndTurnRule(ClassicRule):
    action_type = EndTurnAction

    def is_valid(self, game_state: ClassicGameState, action: EndTurnAction) -> bool:
        return action.source.kind == ActorKind.CONTROLLER

    def execute(
        self, game_state: ClassicGameState, action: EndTurnAction
    ) -> tuple[ClassicGameState, list[Action]]:
        new_state = game_state.copy()
        eliminate = new_state.all_players_have_played()

        for player in new_state.player_states():
            atoms = new_state.atoms_of(player.id)
            player.set_score(atoms)
            if eliminate and player.is_alive and atoms == 0:
                logger.info("Player %s has been eliminated", player.id)
                player.set_is_alive(False)
            new_state.set_player_state(player.id, player)

        winner = self.basic_rules.winner(new_state)
        if winner is not None:
            logger.info("Player %s wins on turn %d", winner, new_state.current_turn)
            new_state.next_substep()
            return new_state, []

        next_player = self.basic_rules.next_player(new_state, new_state.player_states())
        if next_player is None or next_player == new_state.current_player:
            new_state.next_substep()
            return new_state, []

        for player in new_state.player_states():
            player.set_is_current(player.id == next_player)
            new_state.set_player_state(player.id, player)
        new_state.set_current_player(next_player)
        new_state.set_current_turn(new_state.current_turn + 1)
        new_state.set_current_turn_substep(0)
        return new_state, []


def classic_rule_set(basic_rules: Optional[ClassicRules] = None) -> list[ClassicRule]:
    """All rules of the classic game, sharing one ``ClassicRules`` policy."""
    basic_rules = basic_rules or ClassicRules()
    return [
        PlaceAtomRule(basic_rules),
        OverflowRule(basic_rules),
        AtomArrivalRule(basic_rules),
        EndTurnRule(basic_rules),
    ]
