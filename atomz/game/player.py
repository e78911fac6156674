"""Player state capability and static player metadata."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum

from pydantic import BaseModel, Field

from ..common.id_generator import Id, new_id
from ..common.serializable import Serializable

PlayerId = Id
Score = int


class PlayerRage(str, Enum):
    """Player rage (colour/faction) enumeration"""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"
    BLACK = "black"
    YELLOW = "yellow"


class PlayerInfo(BaseModel):
    """Static information about a player."""
    name: str
    rage: PlayerRage
    is_human: bool = Field(alias="isHuman")
    id: PlayerId

    class Config:
        frozen = True
        populate_by_name = True

    @classmethod
    def new(cls, name: str, rage: PlayerRage, is_human: bool) -> "PlayerInfo":
        """Create player info with a freshly allocated id."""
        return cls(name=name, rage=rage, is_human=is_human, id=new_id())


class PlayerState(Serializable):
    """Per-player mutable record owned by a game state.

    Players are never removed mid-game; an eliminated player keeps its
    record with ``is_alive`` False.
    """

    @property
    @abstractmethod
    def id(self) -> PlayerId:
        """Id of the player, fixed at creation."""

    @property
    @abstractmethod
    def is_alive(self) -> bool:
        """Whether the player is alive (thus can play)."""

    @property
    @abstractmethod
    def is_current(self) -> bool:
        """Whether the player is currently playing its turn."""

    @property
    @abstractmethod
    def score(self) -> Score:
        ...

    @abstractmethod
    def set_is_alive(self, is_alive: bool) -> None:
        ...

    @abstractmethod
    def set_is_current(self, is_current: bool) -> None:
        ...

    @abstractmethod
    def set_score(self, score: Score) -> None:
        ...

    @abstractmethod
    def copy(self) -> "PlayerState":
        """Return an independent copy of this player state."""
