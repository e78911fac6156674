"""Turn-tagged messages exchanged between actors."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .actor import Actor

# Id for turn and turn substep
TurnId = int


class Action(BaseModel):
    """Generic action an ``Actor`` performs or receives.

    Actions are immutable once created. ``turn`` and ``turn_substep`` record
    when the action was created so hosts can order and replay them.
    Concrete games subclass it, narrow ``type`` to a literal and add their
    payload.
    """
    type: str
    source: Actor
    destination: Actor
    turn: TurnId = Field(ge=0)
    turn_substep: TurnId = Field(0, ge=0, alias="turnSubstep")

    class Config:
        frozen = True
        populate_by_name = True
