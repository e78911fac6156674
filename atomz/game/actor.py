"""Identities that can send or receive an Action."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..common.id_generator import Id


class ActorKind(str, Enum):
    """Actor kind enumeration"""
    CONTROLLER = "controller"
    PLAYER = "player"
    UI = "ui"


class Actor(BaseModel):
    """Who performs or receives an ``Action``.

    Closed variant set: the game controller, a player (human or CPU)
    identified by id, or the user interface. Only ``PLAYER`` actors carry
    an id.
    """
    kind: ActorKind
    player_id: Optional[Id] = Field(None, alias="playerId")

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="after")
    def _check_player_id(self) -> "Actor":
        if (self.kind == ActorKind.PLAYER) != (self.player_id is not None):
            raise ValueError("player_id is required for PLAYER actors only")
        return self

    @classmethod
    def controller(cls) -> "Actor":
        return cls(kind=ActorKind.CONTROLLER)

    @classmethod
    def player(cls, player_id: Id) -> "Actor":
        return cls(kind=ActorKind.PLAYER, player_id=player_id)

    @classmethod
    def ui(cls) -> "Actor":
        return cls(kind=ActorKind.UI)

    def is_player(self, player_id: Optional[Id] = None) -> bool:
        """True for player actors, optionally a specific one."""
        if self.kind != ActorKind.PLAYER:
            return False
        return player_id is None or self.player_id == player_id


CONTROLLER = Actor.controller()
UI = Actor.ui()
