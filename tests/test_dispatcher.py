"""Tests for the generic rule cycle."""

import logging
from typing import Literal

import pytest
from prometheus_client import REGISTRY

from atomz import config
from atomz.errors import (
    ConfigurationError,
    InvalidActionError,
    ReactionLimitExceededError,
)
from atomz.game.action import Action
from atomz.game.actor import CONTROLLER
from atomz.game.dispatcher import ActionDispatcher
from atomz.game.game_rule import GameRule


class EchoAction(Action):
    type: Literal["echo"] = "echo"
    label: str


def echo(label: str) -> EchoAction:
    return EchoAction(source=CONTROLLER, destination=CONTROLLER, turn=0, label=label)


class EchoRule(GameRule):
    """Emits the children listed for each label and bumps the substep."""

    def __init__(self, tree=None, rejected=()):
        self.tree = tree or {}
        self.rejected = set(rejected)
        self.seen_states = []

    def can_handle(self, action):
        return isinstance(action, EchoAction)

    def is_valid(self, game_state, action):
        return action.label not in self.rejected

    def execute(self, game_state, action):
        self.seen_states.append(game_state)
        new_state = game_state.copy()
        new_state.next_substep()
        return new_state, [echo(child) for child in self.tree.get(action.label, [])]


class ShadowRule(EchoRule):
    pass


class LoopRule(EchoRule):
    """Every action causes one more."""

    def execute(self, game_state, action):
        return game_state.copy(), [echo(action.label)]


def sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestDispatch:
    def test_reactions_run_depth_first(self, classic_state):
        tree = {"root": ["a", "b"], "a": ["a1", "a2"]}
        dispatcher = ActionDispatcher([EchoRule(tree)], max_reactions=0)

        result = dispatcher.dispatch(classic_state, echo("root"))

        assert result.applied
        assert [a.label for a in result.executed_actions] == ["root", "a", "a1", "a2", "b"]
        assert result.reaction_count == 4
        assert result.state.current_turn_substep == 5
        assert [step.state.current_turn_substep for step in result.steps] == [1, 2, 3, 4, 5]
        assert all(step.rule == "EchoRule" for step in result.steps)
        assert classic_state.current_turn_substep == 0

    def test_each_reaction_sees_the_latest_state(self, classic_state):
        rule = EchoRule({"root": ["a", "b"]})
        result = ActionDispatcher([rule], max_reactions=0).dispatch(classic_state, echo("root"))

        assert rule.seen_states[0] is classic_state
        assert rule.seen_states[1] is result.steps[0].state
        assert rule.seen_states[2] is result.steps[1].state

    def test_unhandled_root_action(self, classic_state):
        dispatcher = ActionDispatcher([], max_reactions=0)
        action = echo("root")

        result = dispatcher.dispatch(classic_state, action)

        assert not result.applied
        assert result.state is classic_state
        assert result.rejected == [action]
        assert result.steps == []

    def test_invalid_root_action(self, classic_state):
        dispatcher = ActionDispatcher([EchoRule(rejected={"root"})], max_reactions=0)
        result = dispatcher.dispatch(classic_state, echo("root"))
        assert not result.applied
        assert result.state is classic_state

    def test_invalid_reaction_is_skipped(self, classic_state):
        tree = {"root": ["bad", "ok"], "bad": ["never"]}
        dispatcher = ActionDispatcher([EchoRule(tree, rejected={"bad"})], max_reactions=0)

        result = dispatcher.dispatch(classic_state, echo("root"))

        assert result.applied
        assert [a.label for a in result.executed_actions] == ["root", "ok"]
        assert [a.label for a in result.rejected] == ["bad"]

    def test_dispatch_or_raise(self, classic_state):
        dispatcher = ActionDispatcher([EchoRule(rejected={"root"})], max_reactions=0)
        with pytest.raises(InvalidActionError) as exc_info:
            dispatcher.dispatch_or_raise(classic_state, echo("root"))
        assert exc_info.value.code == "INVALID_ACTION"
        assert exc_info.value.action_type == "echo"

        ok = ActionDispatcher([EchoRule()], max_reactions=0)
        assert ok.dispatch_or_raise(classic_state, echo("root")).applied


class TestRuleSelection:
    def test_first_claiming_rule_wins(self, classic_state, caplog):
        first, second = EchoRule(), ShadowRule()
        dispatcher = ActionDispatcher([first, second], max_reactions=0)

        with caplog.at_level(logging.WARNING, logger="atomz.game.dispatcher"):
            result = dispatcher.dispatch(classic_state, echo("root"))

        assert result.steps[0].rule == "EchoRule"
        assert len(first.seen_states) == 1
        assert second.seen_states == []
        assert any("claimed by 2 rules" in r.getMessage() for r in caplog.records)

    def test_find_rule(self):
        rule = EchoRule()
        dispatcher = ActionDispatcher([rule], max_reactions=0)
        assert dispatcher.find_rule(echo("x")) is rule
        other = Action(type="other", source=CONTROLLER, destination=CONTROLLER, turn=0)
        assert dispatcher.find_rule(other) is None


class TestReactionLimit:
    def test_runaway_chain_raises(self, classic_state):
        dispatcher = ActionDispatcher([LoopRule()], max_reactions=10)
        with pytest.raises(ReactionLimitExceededError) as exc_info:
            dispatcher.dispatch(classic_state, echo("loop"))
        assert exc_info.value.limit == 10
        assert exc_info.value.context["limit"] == 10
        assert exc_info.value.action_type == "echo"

    def test_chain_at_limit_is_allowed(self, classic_state):
        tree = {"root": ["a", "b", "c"]}
        dispatcher = ActionDispatcher([EchoRule(tree)], max_reactions=3)
        assert dispatcher.dispatch(classic_state, echo("root")).reaction_count == 3

    def test_limit_from_environment(self, monkeypatch):
        monkeypatch.setenv("ATOMZ_MAX_REACTIONS", "5")
        assert ActionDispatcher([]).max_reactions == 5

    def test_zero_disables_limit(self, monkeypatch):
        monkeypatch.setenv("ATOMZ_MAX_REACTIONS", "0")
        assert config.max_reactions() is None
        assert ActionDispatcher([]).max_reactions is None
        assert ActionDispatcher([], max_reactions=0).max_reactions is None

    def test_default_limit(self, monkeypatch):
        monkeypatch.delenv("ATOMZ_MAX_REACTIONS", raising=False)
        assert ActionDispatcher([]).max_reactions == config.DEFAULT_MAX_REACTIONS

    def test_malformed_limit(self, monkeypatch):
        monkeypatch.setenv("ATOMZ_MAX_REACTIONS", "abc")
        with pytest.raises(ConfigurationError) as exc_info:
            ActionDispatcher([])
        assert exc_info.value.setting == "ATOMZ_MAX_REACTIONS"


class TestMetrics:
    def test_outcomes_are_counted(self, classic_state):
        applied = {"rule": "EchoRule", "outcome": "applied"}
        invalid = {"rule": "EchoRule", "outcome": "invalid"}
        unhandled = {"rule": "none", "outcome": "unhandled"}
        before = {
            "applied": sample("atomz_actions_total", applied),
            "invalid": sample("atomz_actions_total", invalid),
            "unhandled": sample("atomz_actions_total", unhandled),
            "reactions": sample("atomz_reactions_total", {}),
        }

        tree = {"root": ["a", "bad"]}
        dispatcher = ActionDispatcher([EchoRule(tree, rejected={"bad"})], max_reactions=0)
        dispatcher.dispatch(classic_state, echo("root"))
        ActionDispatcher([], max_reactions=0).dispatch(classic_state, echo("root"))

        assert sample("atomz_actions_total", applied) == before["applied"] + 2
        assert sample("atomz_actions_total", invalid) == before["invalid"] + 1
        assert sample("atomz_actions_total", unhandled) == before["unhandled"] + 1
        assert sample("atomz_reactions_total", {}) == before["reactions"] + 2


class TestDebugLogging:
    def test_steps_are_logged(self, classic_state, monkeypatch, caplog):
        monkeypatch.setenv("ATOMZ_DEBUG_ENGINE", "1")
        dispatcher = ActionDispatcher([EchoRule({"root": ["a"]})], max_reactions=0)
        assert dispatcher.debug

        with caplog.at_level(logging.DEBUG, logger="atomz.game.dispatcher"):
            dispatcher.dispatch(classic_state, echo("root"))

        messages = [r.getMessage() for r in caplog.records]
        assert sum("EchoRule executed echo" in m for m in messages) == 2
