"""Rule cycle: route an action to its rule and drain the reactions.

The controller hands the dispatcher a committed ``GameState`` and an
incoming ``Action``. The dispatcher finds the rule that claims the action,
validates it, executes it and then processes every reaction the same way.
Reactions are kept on an explicit LIFO stack so a long chain never grows
the Python call stack, while preserving the depth-first order of a
recursive re-entry: all reactions of an action (and their own reactions)
run before the next sibling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .. import config, metrics
from ..errors import InvalidActionError, ReactionLimitExceededError
from .action import Action
from .game_rule import GameRule
from .game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class DispatchStep:
    """One executed action and the state it produced."""
    action: Action
    rule: str
    state: GameState


@dataclass
class DispatchResult:
    """Outcome of dispatching one root action.

    Attributes:
        state: Latest state; the input state when nothing was applied.
        applied: Whether the root action passed validation and ran.
        steps: Executed actions in execution order, each with the state
            it produced.
        rejected: Actions that no rule handled or that failed validation.
    """
    state: GameState
    applied: bool
    steps: list[DispatchStep] = field(default_factory=list)
    rejected: list[Action] = field(default_factory=list)

    @property
    def executed_actions(self) -> list[Action]:
        return [step.action for step in self.steps]

    @property
    def reaction_count(self) -> int:
        return max(0, len(self.steps) - 1)


class ActionDispatcher:
    """Dispatches actions to a fixed set of rules.

    Args:
        rules: Rules of the concrete game. Exactly one should claim each
            action; when several do, the first one wins.
        max_reactions: Ceiling on reactions executed per root action.
            ``None`` reads ``ATOMZ_MAX_REACTIONS``; ``0`` disables it.
    """

    def __init__(
        self,
        rules: Sequence[GameRule],
        max_reactions: Optional[int] = None,
    ):
        self.rules = list(rules)
        if max_reactions is None:
            self.max_reactions = config.max_reactions()
        else:
            self.max_reactions = max_reactions or None
        self.debug = config.debug_engine()

    def find_rule(self, action: Action) -> Optional[GameRule]:
        """Return the rule that handles ``action``, or None."""
        claiming = [rule for rule in self.rules if rule.can_handle(action)]
        if not claiming:
            return None
        if len(claiming) > 1:
            logger.warning(
                "Action %s is claimed by %d rules (%s); using %s",
                action.type,
                len(claiming),
                ", ".join(rule.name for rule in claiming),
                claiming[0].name,
            )
        return claiming[0]

    def _accept(self, state: GameState, action: Action) -> Optional[GameRule]:
        rule = self.find_rule(action)
        if rule is None:
            logger.warning("No rule can handle action %s", action.type)
            metrics.record_action("none", "unhandled")
            return None
        if not rule.is_valid(state, action):
            logger.info("Action %r rejected by %s", action, rule.name)
            metrics.record_action(rule.name, "invalid")
            return None
        return rule

    def _execute(
        self,
        rule: GameRule,
        state: GameState,
        action: Action,
        steps: list[DispatchStep],
    ) -> tuple[GameState, list[Action]]:
        new_state, reactions = rule.execute(state, action)
        steps.append(DispatchStep(action=action, rule=rule.name, state=new_state))
        metrics.record_action(rule.name, "applied")
        metrics.record_reactions(len(reactions))
        if self.debug:
            logger.debug(
                "%s executed %s (turn %d.%d), %d reaction(s)",
                rule.name,
                action.type,
                new_state.current_turn,
                new_state.current_turn_substep,
                len(reactions),
            )
        return new_state, reactions

    def dispatch(self, game_state: GameState, action: Action) -> DispatchResult:
        """Apply ``action`` and every reaction it causes.

        An invalid or unhandled root action returns ``game_state``
        unchanged with ``applied`` False. An invalid reaction is skipped and
        recorded in ``rejected``; the rest of the chain continues.

        Raises:
            ReactionLimitExceededError: the chain ran past ``max_reactions``.
        """
        result = DispatchResult(state=game_state, applied=False)

        rule = self._accept(game_state, action)
        if rule is None:
            result.rejected.append(action)
            return result

        state, reactions = self._execute(rule, game_state, action, result.steps)
        result.applied = True

        pending = list(reversed(reactions))
        executed = 0
        while pending:
            reaction = pending.pop()
            rule = self._accept(state, reaction)
            if rule is None:
                result.rejected.append(reaction)
                continue
            if self.max_reactions is not None and executed >= self.max_reactions:
                raise ReactionLimitExceededError(
                    f"Reaction chain of {action.type} exceeded "
                    f"{self.max_reactions} reactions",
                    limit=self.max_reactions,
                    action_type=reaction.type,
                )
            executed += 1
            state, reactions = self._execute(rule, state, reaction, result.steps)
            pending.extend(reversed(reactions))

        result.state = state
        metrics.observe_chain_length(len(result.steps))
        return result

    def dispatch_or_raise(self, game_state: GameState, action: Action) -> DispatchResult:
        """Like ``dispatch`` but raise when the root action is not applied."""
        result = self.dispatch(game_state, action)
        if not result.applied:
            raise InvalidActionError(
                "Action was not applied",
                action_type=action.type,
                context={"turn": action.turn, "turn_substep": action.turn_substep},
            )
        return result
