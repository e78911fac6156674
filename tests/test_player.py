"""Tests for player metadata and the classic player state."""

import pytest

from atomz.classic.player import ClassicPlayerState
from atomz.game.player import PlayerInfo, PlayerRage


class TestClassicPlayerState:
    def test_defaults(self):
        state = ClassicPlayerState.new(42)
        assert state.id == 42
        assert state.is_alive is False
        assert state.is_current is False
        assert state.score == 0

    def test_setters(self, rng):
        for _ in range(200):
            player_id = rng.randint(0, 1_000_000)
            state = ClassicPlayerState.new(player_id)
            is_alive, is_current = rng.random() < 0.5, rng.random() < 0.5
            score = rng.randint(0, 2**32 - 1)

            state.set_is_alive(is_alive)
            state.set_is_current(is_current)
            state.set_score(score)

            assert state.is_alive == is_alive
            assert state.is_current == is_current
            assert state.score == score
            assert state.id == player_id

    def test_id_is_immutable(self):
        state = ClassicPlayerState.new(1)
        with pytest.raises(ValueError):
            state.player_id = 2
        with pytest.raises((AttributeError, ValueError)):
            state.id = 2
        assert state.id == 1

    def test_copy_is_independent(self):
        state = ClassicPlayerState.new(1)
        clone = state.copy()
        clone.set_score(10)
        assert state.score == 0
        assert clone.id == 1

    def test_serialized_with_aliases(self):
        state = ClassicPlayerState.new(3)
        state.set_is_alive(True)
        assert state.to_jsonable() == {
            "id": 3,
            "isAlive": True,
            "isCurrent": False,
            "score": 0,
        }


class TestPlayerInfo:
    def test_new_keeps_data(self):
        info = PlayerInfo.new("Alice", PlayerRage.YELLOW, True)
        assert info.name == "Alice"
        assert info.rage == PlayerRage.YELLOW
        assert info.is_human is True

    def test_ids_are_unique(self, rng):
        infos = [
            PlayerInfo.new(f"p{i}", rng.choice(list(PlayerRage)), rng.random() < 0.5)
            for i in range(1_000)
        ]
        assert len({info.id for info in infos}) == len(infos)
