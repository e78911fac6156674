"""Player state of the classic game."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..game.player import PlayerId, PlayerState, Score


class ClassicPlayerState(BaseModel, PlayerState):
    """State of a player in the classic atomz game"""
    player_id: PlayerId = Field(alias="id", frozen=True)
    alive: bool = Field(False, alias="isAlive")
    current: bool = Field(False, alias="isCurrent")
    points: Score = Field(0, ge=0, alias="score")

    class Config:
        populate_by_name = True

    @classmethod
    def new(cls, player_id: PlayerId) -> "ClassicPlayerState":
        """Create a player state that is not alive, not current, score 0."""
        return cls(player_id=player_id)

    @property
    def id(self) -> PlayerId:
        return self.player_id

    @property
    def is_alive(self) -> bool:
        return self.alive

    @property
    def is_current(self) -> bool:
        return self.current

    @property
    def score(self) -> Score:
        return self.points

    def set_is_alive(self, is_alive: bool) -> None:
        self.alive = is_alive

    def set_is_current(self, is_current: bool) -> None:
        self.current = is_current

    def set_score(self, score: Score) -> None:
        self.points = score

    def copy(self) -> "ClassicPlayerState":  # type: ignore[override]
        return self.model_copy()

    def data_to_be_serialized(self) -> "ClassicPlayerState":
        return self
